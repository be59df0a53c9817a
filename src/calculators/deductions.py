"""Work-related deduction calculator: home office, vehicle, itemised, industry."""

from decimal import Decimal
from typing import Any

from src.calculators.brackets import ZERO
from src.calculators.tax_data import TAX_YEARS
from src.models import DeductionClaim, HomeOfficeExpenses, VehicleExpenses

INTERNET_WORK_SHARE = Decimal("0.5")
EQUIPMENT_DEPRECIATION_RATE = Decimal("0.4")
FURNITURE_DEPRECIATION_RATE = Decimal("0.2")
DAYS_PER_YEAR = Decimal("365")


def calculate_actual_home_office(
    expenses: HomeOfficeExpenses,
    work_use_percent: Decimal,
    days_worked: int,
) -> Decimal:
    """Home office deduction using the actual cost method.

    Running, occupancy and maintenance costs are scaled by the share of the
    year worked from home and the work-use percentage. Only half of the
    internet bill counts. Equipment and furniture are depreciated in full.
    """
    scale = Decimal(days_worked) / DAYS_PER_YEAR * work_use_percent / 100

    running = (
        expenses.electricity
        + expenses.gas
        + expenses.water
        + expenses.internet * INTERNET_WORK_SHARE
        + expenses.phone_usage
    )
    occupancy = expenses.rent + expenses.mortgage + expenses.insurance + expenses.council_rates
    maintenance = expenses.repairs + expenses.cleaning
    depreciation = (
        expenses.office_equipment * EQUIPMENT_DEPRECIATION_RATE
        + expenses.furniture * FURNITURE_DEPRECIATION_RATE
    )

    return (running + occupancy + maintenance) * scale + depreciation


def calculate_actual_vehicle(expenses: VehicleExpenses, work_use_percent: Decimal) -> Decimal:
    """Vehicle deduction using actual costs; tolls and parking count in full."""
    use = work_use_percent / 100
    running = (
        expenses.fuel
        + expenses.registration
        + expenses.insurance
        + expenses.repairs
        + expenses.lease
    )
    return (running + expenses.depreciation) * use + expenses.tolls + expenses.parking


def calculate_deductions(claim: DeductionClaim) -> dict[str, Any]:
    """Total a deduction claim.

    Args:
        claim: Validated deduction claim.

    Returns:
        Dict with a per-category breakdown, total_deductions and tax_year.
    """
    rates = TAX_YEARS[claim.tax_year].deduction_rates

    itemised = sum(claim.itemised.values(), ZERO)
    industry = sum(claim.industry.values(), ZERO)

    home_office = ZERO
    if claim.home_office_method == "shortcut":
        home_office = claim.home_office_hours * rates.home_office_shortcut
    elif claim.home_office_method == "fixed":
        home_office = claim.home_office_hours * rates.home_office_fixed
    elif claim.home_office_method == "actual" and claim.home_office_expenses is not None:
        home_office = calculate_actual_home_office(
            claim.home_office_expenses,
            claim.home_office_work_use_percent,
            claim.home_office_days,
        )

    vehicle = ZERO
    vehicle_km = min(claim.vehicle_km, rates.vehicle_km_cap)
    if claim.vehicle_method == "cents_per_km":
        vehicle = vehicle_km * rates.vehicle_cents_per_km
    elif claim.vehicle_method == "actual" and claim.vehicle_expenses is not None:
        vehicle = calculate_actual_vehicle(claim.vehicle_expenses, claim.vehicle_work_use_percent)

    total = itemised + industry + home_office + vehicle

    return {
        "itemised": float(itemised),
        "industry": float(industry),
        "home_office": float(home_office),
        "home_office_method": claim.home_office_method,
        "vehicle": float(vehicle),
        "vehicle_method": claim.vehicle_method,
        "vehicle_km_claimed": float(vehicle_km) if claim.vehicle_method == "cents_per_km" else 0.0,
        "total_deductions": float(total),
        "tax_year": claim.tax_year,
    }
