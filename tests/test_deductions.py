"""Tests for the work-related deduction calculator."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.calculators.deductions import (
    calculate_actual_home_office,
    calculate_actual_vehicle,
    calculate_deductions,
)
from src.models import DeductionClaim, HomeOfficeExpenses, VehicleExpenses

D = Decimal


class TestHomeOffice:
    def test_shortcut_method(self) -> None:
        result = calculate_deductions(DeductionClaim(home_office_method="shortcut", home_office_hours=100))
        assert result["home_office"] == 80.0

    def test_fixed_rate_method(self) -> None:
        result = calculate_deductions(DeductionClaim(home_office_method="fixed", home_office_hours=100))
        assert result["home_office"] == 52.0

    def test_actual_costs(self) -> None:
        """Half the internet bill counts; equipment is depreciated at 40%."""
        expenses = HomeOfficeExpenses(electricity=1000, internet=800, office_equipment=1000)
        assert calculate_actual_home_office(expenses, D("50"), 365) == D("1100")

    def test_actual_costs_part_year(self) -> None:
        expenses = HomeOfficeExpenses(rent=36500)
        assert calculate_actual_home_office(expenses, D("100"), 73) == D("7300")

    def test_actual_without_expenses_is_zero(self) -> None:
        result = calculate_deductions(DeductionClaim(home_office_method="actual"))
        assert result["home_office"] == 0.0


class TestVehicle:
    def test_cents_per_km_capped(self) -> None:
        result = calculate_deductions(DeductionClaim(vehicle_method="cents_per_km", vehicle_km=6000))
        assert result["vehicle_km_claimed"] == 5000.0
        assert result["vehicle"] == 3625.0

    def test_cents_per_km_under_cap(self) -> None:
        result = calculate_deductions(DeductionClaim(vehicle_method="cents_per_km", vehicle_km=1000))
        assert result["vehicle"] == 725.0

    def test_actual_costs(self) -> None:
        """Tolls and parking are not scaled by work use."""
        expenses = VehicleExpenses(
            fuel=2000, registration=800, depreciation=1200, tolls=100, parking=50
        )
        assert calculate_actual_vehicle(expenses, D("60")) == D("2550")


class TestDeductionTotals:
    def test_itemised_and_industry(self) -> None:
        claim = DeductionClaim(
            itemised={"tax_agent_fees": 300, "donations": 200},
            industry={"tools": 500},
        )
        result = calculate_deductions(claim)
        assert result["itemised"] == 500.0
        assert result["industry"] == 500.0
        assert result["total_deductions"] == 1000.0

    def test_all_categories(self) -> None:
        claim = DeductionClaim(
            itemised={"donations": 100},
            home_office_method="shortcut",
            home_office_hours=500,
            vehicle_method="cents_per_km",
            vehicle_km=2000,
        )
        assert calculate_deductions(claim)["total_deductions"] == 100.0 + 400.0 + 1450.0

    def test_empty_claim(self) -> None:
        result = calculate_deductions(DeductionClaim())
        assert result["total_deductions"] == 0.0
        assert result["tax_year"] == "2024-25"


class TestDeductionValidation:
    def test_negative_itemised_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeductionClaim(itemised={"donations": -50})

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeductionClaim(vehicle_method="logbook")

    def test_work_use_over_100_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DeductionClaim(vehicle_work_use_percent=120)
