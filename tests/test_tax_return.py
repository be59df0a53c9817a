"""Tests for the full tax return estimate."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.calculators.tax_return import calculate_tax_return, format_rate
from src.models import TaxCalculationInput


def _estimate(**kwargs: object):
    return calculate_tax_return(TaxCalculationInput(**kwargs))


class TestReferenceScenarios:
    def test_resident_50k(self) -> None:
        """Base $5,788 + Medicare $1,000 - LITO $250 = $6,538."""
        result = _estimate(annual_income=50000)
        assert result.base_tax == 5788.0
        assert result.medicare_levy == 1000.0
        assert result.medicare_levy_surcharge == 0.0
        assert result.low_income_offset == 250.0
        assert result.total_tax == 6538.0
        assert result.take_home_pay == 43462.0
        assert result.effective_rate == "13.08%"

    def test_non_resident_200k(self) -> None:
        """Foreign residents pay no Medicare levy."""
        result = _estimate(annual_income=200000, is_resident=False, has_private_health=True)
        assert result.base_tax == 65350.0
        assert result.medicare_levy == 0.0
        assert result.low_income_offset == 0.0
        assert result.total_tax == 65350.0

    def test_deductions_and_other_income(self) -> None:
        """$65,000 gross less $10,000 deductions: taxable $55,000."""
        result = _estimate(annual_income=60000, other_income=5000, total_deductions=10000)
        assert result.gross_income == 65000.0
        assert result.taxable_income == 55000.0
        assert result.base_tax == 7288.0
        assert result.medicare_levy == 1100.0
        assert result.low_income_offset == 175.0
        assert result.total_tax == 8213.0
        assert result.take_home_pay == 56787.0

    def test_help_and_surcharge(self) -> None:
        result = _estimate(annual_income=100000, help_balance=20000)
        assert result.medicare_levy_surcharge == 1000.0
        assert result.help_repayment.compulsory_amount == 6000.0
        assert result.help_repayment.voluntary_bonus == 500.0
        assert result.help_repayment.projected_years_to_repay == 4
        assert result.total_tax == 29788.0

    def test_private_health_rebate_reduces_tax(self) -> None:
        result = _estimate(
            annual_income=100000,
            help_balance=20000,
            has_private_health=True,
            private_health_premiums=2000,
            age=40,
        )
        assert result.medicare_levy_surcharge == 0.0
        assert result.private_health_rebate_rate == pytest.approx(16.1600736)
        assert result.private_health_rebate == pytest.approx(323.201472)
        assert result.total_tax == pytest.approx(28464.798528)

    def test_reportable_super_counts_for_surcharge_only(self) -> None:
        result = _estimate(annual_income=90000, reportable_super_contributions=5000)
        assert result.taxable_income == 90000.0
        assert result.medicare_levy_surcharge == 950.0

    def test_fringe_benefits_not_taxed(self) -> None:
        """Reportable fringe benefits are not assessable income."""
        result = _estimate(annual_income=50000, reportable_fringe_benefits=10000)
        assert result.gross_income == 50000.0
        assert result.taxable_income == 50000.0
        assert result.base_tax == 5788.0
        assert result.total_tax == 6538.0

    def test_fringe_benefits_count_for_surcharge(self) -> None:
        """$90,000 + $10,000 fringe benefits crosses the $93,000 surcharge tier."""
        result = _estimate(annual_income=90000, reportable_fringe_benefits=10000)
        assert result.taxable_income == 90000.0
        assert result.base_tax == 17788.0
        assert result.medicare_levy_surcharge == 1000.0

    def test_fringe_benefits_move_rebate_tier(self) -> None:
        result = _estimate(
            annual_income=90000,
            reportable_fringe_benefits=10000,
            has_private_health=True,
            private_health_premiums=1000,
            age=40,
        )
        assert result.medicare_levy_surcharge == 0.0
        assert result.private_health_rebate_rate == pytest.approx(16.1600736)


class TestEdgeCases:
    def test_zero_income(self) -> None:
        """LITO exceeds nil tax; total is floored at zero."""
        result = _estimate()
        assert result.total_tax == 0.0
        assert result.take_home_pay == 0.0
        assert result.effective_rate == "0.00%"
        assert result.is_refund is True

    def test_deductions_exceed_income(self) -> None:
        result = _estimate(annual_income=10000, total_deductions=25000)
        assert result.taxable_income == 0.0
        assert result.total_tax == 0.0

    def test_refund(self) -> None:
        result = _estimate(annual_income=50000, tax_withheld=7000)
        assert result.refund_or_debt == 462.0
        assert result.is_refund is True

    def test_debt(self) -> None:
        result = _estimate(annual_income=50000, tax_withheld=6000)
        assert result.refund_or_debt == -538.0
        assert result.is_refund is False

    def test_previous_year(self) -> None:
        result = _estimate(annual_income=50000, tax_year="2023-24")
        assert result.tax_year == "2023-24"
        assert result.base_tax == 6717.0


class TestInvariants:
    @pytest.mark.parametrize("income", [0, 18200, 37500, 45000, 93000, 135000, 190000, 350000])
    def test_take_home_plus_tax_is_gross(self, income: int) -> None:
        result = _estimate(annual_income=income, help_balance=15000)
        assert result.take_home_pay + result.total_tax == pytest.approx(result.gross_income)

    @pytest.mark.parametrize("income", [0, 18200, 50000, 135000, 350000])
    def test_total_tax_never_negative(self, income: int) -> None:
        result = _estimate(
            annual_income=income,
            has_private_health=True,
            private_health_premiums=50000,
            age=75,
        )
        assert result.total_tax >= 0

    def test_result_is_immutable(self) -> None:
        result = _estimate(annual_income=50000)
        with pytest.raises(ValidationError):
            result.total_tax = 0.0

    def test_help_repayment_is_immutable(self) -> None:
        result = _estimate(annual_income=100000, help_balance=20000)
        with pytest.raises(ValidationError):
            result.help_repayment.compulsory_amount = 0.0


class TestFormatRate:
    def test_no_income(self) -> None:
        assert format_rate(Decimal("100"), Decimal("0")) == "0.00%"

    def test_two_decimal_places(self) -> None:
        assert format_rate(Decimal("6538"), Decimal("50000")) == "13.08%"
