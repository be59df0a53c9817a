"""Income tax calculator: marginal brackets with a per-bracket breakdown."""

from decimal import Decimal
from typing import Any

from src.calculators.brackets import marginal_breakdown, marginal_tax
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS, TaxBracket


def _brackets(is_resident: bool, tax_year: str) -> tuple[TaxBracket, ...]:
    data = TAX_YEARS[tax_year]
    return data.resident_brackets if is_resident else data.non_resident_brackets


def calculate_base_tax(
    taxable_income: Decimal,
    is_resident: bool = True,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> Decimal:
    """Base income tax on taxable income, before levies and offsets.

    Callers clamp taxable income to zero first; income at or below the
    lowest threshold yields zero.
    """
    return marginal_tax(taxable_income, _brackets(is_resident, tax_year))


def calculate_income_tax(
    annual_income: Decimal,
    is_resident: bool = True,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> dict[str, Any]:
    """Calculate Australian income tax with per-bracket breakdown.

    Args:
        annual_income: Taxable annual income (must be >= 0).
        is_resident: Resident rates (with tax-free threshold) or foreign resident rates.
        tax_year: Tax year key, e.g. "2024-25".

    Returns:
        Dict with total_tax, effective_rate, breakdown, tax_year.
    """
    if tax_year not in TAX_YEARS:
        return {"error": f"Unknown tax year: {tax_year}. Available: {', '.join(sorted(TAX_YEARS))}"}

    if annual_income < 0:
        return {"error": "Annual income must be non-negative."}

    total_tax = calculate_base_tax(annual_income, is_resident, tax_year)
    breakdown = [
        {
            "lower": float(row["lower"]),
            "upper": float(row["upper"]) if row["upper"] is not None else None,
            "rate": float(row["rate"]),
            "taxable_amount": float(row["taxable_amount"]),
            "tax": float(row["tax"]),
        }
        for row in marginal_breakdown(annual_income, _brackets(is_resident, tax_year))
    ]

    effective_rate = (total_tax / annual_income * 100) if annual_income > 0 else Decimal("0")

    return {
        "annual_income": float(annual_income),
        "is_resident": is_resident,
        "total_tax": float(total_tax),
        "effective_rate": float(round(effective_rate, 2)),
        "breakdown": breakdown,
        "tax_year": tax_year,
    }
