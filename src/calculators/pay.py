"""Take-home pay calculator: annualises pay, splits super, runs the estimate."""

from decimal import Decimal
from typing import Any

from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS
from src.calculators.tax_return import calculate_tax_return
from src.models import TaxCalculationInput

PAY_PERIODS: dict[str, int] = {
    "weekly": 52,
    "fortnightly": 26,
    "monthly": 12,
    "annual": 1,
}

HOURLY = "hourly"
WEEKS_PER_YEAR = 52


def convert_to_annual(amount: Decimal, pay_period: str, hours_per_week: Decimal = Decimal("0")) -> Decimal:
    """Annualise an hourly, weekly, fortnightly, monthly or annual figure."""
    if pay_period == HOURLY:
        return amount * hours_per_week * WEEKS_PER_YEAR
    return amount * PAY_PERIODS[pay_period]


def split_super(
    annual_amount: Decimal,
    super_rate: Decimal,
    includes_super: bool,
) -> tuple[Decimal, Decimal]:
    """Return (salary, super) for a package that does or doesn't include super.

    ``super_rate`` is a percentage, e.g. 11.5.
    """
    if includes_super:
        super_amount = annual_amount * super_rate / (100 + super_rate)
        return annual_amount - super_amount, super_amount
    return annual_amount, annual_amount * super_rate / 100


def calculate_take_home_pay(
    amount: Decimal,
    pay_period: str = "annual",
    hours_per_week: Decimal = Decimal("0"),
    super_rate: Decimal | None = None,
    includes_super: bool = False,
    is_resident: bool = True,
    is_family: bool = False,
    dependents: int = 0,
    has_private_health: bool = False,
    age: int = 0,
    is_overseas: bool = False,
    help_balance: Decimal = Decimal("0"),
    tax_year: str = DEFAULT_TAX_YEAR,
) -> dict[str, Any]:
    """Calculate gross, super, tax and take-home pay per week, fortnight, month and year.

    Args:
        amount: Pay for one ``pay_period`` (must be >= 0).
        pay_period: One of hourly, weekly, fortnightly, monthly, annual.
        hours_per_week: Required for hourly pay.
        super_rate: Super guarantee percentage; defaults to the tax year's rate.
        includes_super: Whether ``amount`` is a package that already includes super.
        tax_year: Tax year key, e.g. "2024-25".

    Returns:
        Dict with the annual estimate and per-period summary rows.
    """
    if pay_period != HOURLY and pay_period not in PAY_PERIODS:
        valid = ", ".join(sorted([*PAY_PERIODS, HOURLY]))
        return {"error": f"Invalid pay period: {pay_period}. Must be one of: {valid}"}

    if tax_year not in TAX_YEARS:
        return {"error": f"Unknown tax year: {tax_year}. Available: {', '.join(sorted(TAX_YEARS))}"}

    if amount < 0:
        return {"error": "Pay amount must be non-negative."}

    if pay_period == HOURLY and hours_per_week <= 0:
        return {"error": "Hours per week is required for hourly pay."}

    if super_rate is None:
        super_rate = TAX_YEARS[tax_year].super_guarantee_rate

    annual = convert_to_annual(amount, pay_period, hours_per_week)
    salary, super_amount = split_super(annual, super_rate, includes_super)

    estimate = calculate_tax_return(
        TaxCalculationInput(
            annual_income=salary,
            is_resident=is_resident,
            is_family=is_family,
            dependents=dependents,
            has_private_health=has_private_health,
            age=age,
            is_overseas=is_overseas,
            help_balance=help_balance,
            tax_year=tax_year,
        )
    )

    annual_tax = Decimal(str(estimate.total_tax))
    annual_take_home = Decimal(str(estimate.take_home_pay))

    summary: dict[str, dict[str, float]] = {}
    for period in ("weekly", "fortnightly", "monthly", "annual"):
        periods = PAY_PERIODS[period]
        summary[period] = {
            "gross": float(salary / periods),
            "super": float(super_amount / periods),
            "tax": float(annual_tax / periods),
            "take_home": float(annual_take_home / periods),
        }

    return {
        "pay_period": pay_period,
        "annual_salary": float(salary),
        "super_rate": float(super_rate),
        "super_amount": float(super_amount),
        "includes_super": includes_super,
        "tax_year": tax_year,
        "summary": summary,
        "estimate": estimate.model_dump(),
        "notes": (
            "Estimate assumes a full year at the same pay. "
            "Salary sacrifice, allowances and the tax-free threshold claim "
            "with a second employer are not modelled."
        ),
    }
