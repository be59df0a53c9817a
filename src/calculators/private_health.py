"""Private health insurance rebate percentage."""

from decimal import Decimal

from src.calculators.brackets import flat_tier_index
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS


def calculate_private_health_rebate(
    income: Decimal,
    age: int,
    is_family: bool = False,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> Decimal:
    """Rebate as a percentage of premiums (e.g. ``24.608``), not a dollar amount.

    The age band picks the base percentage; the income tier, using the same
    boundaries as the Medicare levy surcharge, scales it down to zero at the
    top tier.
    """
    data = TAX_YEARS[tax_year]
    rebate = data.private_health_rebate

    if age >= 70:
        base = rebate.age_70_plus
    elif age >= 65:
        base = rebate.age_65_to_69
    else:
        base = rebate.under_65

    tiers = data.surcharge.family if is_family else data.surcharge.individual
    tier = flat_tier_index(income, tiers) or 0
    return base * rebate.tier_factors[tier]
