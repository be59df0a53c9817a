"""Low income tax offset (LITO)."""

from decimal import Decimal

from src.calculators.brackets import ZERO
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS


def calculate_low_income_offset(
    taxable_income: Decimal,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> Decimal:
    """LITO: full offset up to the first threshold, then two linear phase-outs.

    Never negative.
    """
    lito = TAX_YEARS[tax_year].low_income_offset

    if taxable_income <= lito.first_threshold:
        return lito.maximum

    if taxable_income <= lito.second_threshold:
        return lito.maximum - (taxable_income - lito.first_threshold) * lito.first_rate

    at_second = lito.maximum - (lito.second_threshold - lito.first_threshold) * lito.first_rate
    offset = at_second - (taxable_income - lito.second_threshold) * lito.second_rate
    return max(ZERO, offset)
