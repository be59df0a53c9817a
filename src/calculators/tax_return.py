"""Tax return estimate: composites base tax, levies, offsets and HELP."""

import logging
from decimal import Decimal

from src.calculators.brackets import ZERO
from src.calculators.help_debt import calculate_help_repayment
from src.calculators.income_tax import calculate_base_tax
from src.calculators.medicare import calculate_medicare_levy, calculate_medicare_levy_surcharge
from src.calculators.offsets import calculate_low_income_offset
from src.calculators.private_health import calculate_private_health_rebate
from src.models import HelpRepaymentResult, TaxCalculationInput, TaxCalculationResult

logger = logging.getLogger(__name__)


def format_rate(total_tax: Decimal, gross_income: Decimal) -> str:
    """Effective tax rate as a percentage string; "0.00%" when there is no income."""
    if gross_income <= 0:
        return "0.00%"
    return f"{total_tax / gross_income * 100:.2f}%"


def calculate_tax_return(inputs: TaxCalculationInput) -> TaxCalculationResult:
    """Estimate a year's tax liability and refund for one taxpayer.

    total tax = base tax + Medicare levy + surcharge - LITO - rebate + HELP,
    floored at zero. Foreign residents pay no Medicare levy. Surcharge and
    rebate tiers are assessed on taxable income plus reportable super and
    reportable fringe benefits, which are not themselves taxed.

    Args:
        inputs: Validated calculator input.

    Returns:
        Immutable TaxCalculationResult.
    """
    year = inputs.tax_year
    gross_income = inputs.annual_income + inputs.other_income
    taxable_income = max(ZERO, gross_income - inputs.total_deductions)
    surcharge_income = (
        taxable_income
        + inputs.reportable_super_contributions
        + inputs.reportable_fringe_benefits
    )

    base_tax = calculate_base_tax(taxable_income, inputs.is_resident, year)

    medicare_levy = ZERO
    if inputs.is_resident:
        medicare_levy = calculate_medicare_levy(
            taxable_income, inputs.dependents, inputs.is_family, year
        )

    surcharge = calculate_medicare_levy_surcharge(
        surcharge_income, inputs.has_private_health, inputs.is_family, year
    )
    lito = calculate_low_income_offset(taxable_income, year)

    rebate_rate = calculate_private_health_rebate(
        surcharge_income, inputs.age, inputs.is_family, year
    )
    rebate = ZERO
    if inputs.has_private_health:
        rebate = inputs.private_health_premiums * rebate_rate / 100

    help_repayment = calculate_help_repayment(
        taxable_income, inputs.help_balance, inputs.is_overseas, year
    )

    total_tax = max(
        ZERO,
        base_tax + medicare_levy + surcharge - lito - rebate + help_repayment.compulsory_amount,
    )
    take_home_pay = gross_income - total_tax
    refund_or_debt = inputs.tax_withheld - total_tax

    logger.debug(
        "Estimate year=%s taxable=%s total_tax=%s refund_or_debt=%s",
        year, taxable_income, total_tax, refund_or_debt,
    )

    return TaxCalculationResult(
        tax_year=year,
        gross_income=float(gross_income),
        total_deductions=float(inputs.total_deductions),
        taxable_income=float(taxable_income),
        base_tax=float(base_tax),
        medicare_levy=float(medicare_levy),
        medicare_levy_surcharge=float(surcharge),
        low_income_offset=float(lito),
        private_health_rebate_rate=float(rebate_rate),
        private_health_rebate=float(rebate),
        help_repayment=HelpRepaymentResult(
            compulsory_amount=float(help_repayment.compulsory_amount),
            voluntary_bonus=float(help_repayment.voluntary_bonus),
            projected_years_to_repay=help_repayment.projected_years_to_repay,
        ),
        total_tax=float(total_tax),
        take_home_pay=float(take_home_pay),
        tax_withheld=float(inputs.tax_withheld),
        refund_or_debt=float(refund_or_debt),
        is_refund=refund_or_debt >= 0,
        effective_rate=format_rate(total_tax, gross_income),
    )
