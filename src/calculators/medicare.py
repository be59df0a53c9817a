"""Medicare levy and Medicare levy surcharge."""

from decimal import Decimal

from src.calculators.brackets import ZERO, flat_tier_rate
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS


def calculate_medicare_levy(
    taxable_income: Decimal,
    dependents: int = 0,
    is_family: bool = False,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> Decimal:
    """Medicare levy with low-income reduction.

    At or below the lower threshold no levy is payable; at or above the
    upper threshold the full rate applies to the whole income. In between,
    the levy is ``(income - lower) * 10% * rate``. Family thresholds move
    up by a fixed amount per dependent.
    """
    levy = TAX_YEARS[tax_year].medicare_levy

    if is_family:
        shift = dependents * levy.family.per_dependent
        lower = levy.family.lower + shift
        upper = levy.family.upper + shift
    else:
        lower = levy.individual.lower
        upper = levy.individual.upper

    if taxable_income <= lower:
        return ZERO
    if taxable_income >= upper:
        return taxable_income * levy.rate

    return (taxable_income - lower) * levy.phase_in_fraction * levy.rate


def calculate_medicare_levy_surcharge(
    income: Decimal,
    has_private_health: bool,
    is_family: bool = False,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> Decimal:
    """Medicare levy surcharge for people without private hospital cover.

    The rate of the highest tier crossed applies to the whole income,
    not just the part above the threshold.
    """
    if has_private_health:
        return ZERO

    surcharge = TAX_YEARS[tax_year].surcharge
    tiers = surcharge.family if is_family else surcharge.individual
    return income * flat_tier_rate(income, tiers)
