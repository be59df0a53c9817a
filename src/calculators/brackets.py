"""Bracket evaluation strategies.

Two different kinds of table live in ``tax_data``:

* marginal tables (income tax): each rate applies only to the slice of
  income above its threshold;
* flat-tier tables (Medicare levy surcharge, HELP repayment): the rate of
  the single highest tier crossed applies to the whole income.
"""

from decimal import Decimal
from typing import Any

from src.calculators.tax_data import TaxBracket

ZERO = Decimal("0")


def marginal_tax(income: Decimal, brackets: tuple[TaxBracket, ...]) -> Decimal:
    """Cumulative tax on ``income`` under marginal brackets.

    Walks the table from the highest threshold down, taxing the excess over
    each threshold and clamping the remaining income to it.
    """
    tax = ZERO
    remaining = income
    for bracket in reversed(brackets):
        if remaining > bracket.threshold:
            tax += (remaining - bracket.threshold) * bracket.rate
            remaining = bracket.threshold
    return tax


def marginal_breakdown(income: Decimal, brackets: tuple[TaxBracket, ...]) -> list[dict[str, Any]]:
    """Per-bracket slices of ``income``, lowest bracket first.

    The ``tax`` values sum to ``marginal_tax(income, brackets)``.
    """
    breakdown: list[dict[str, Any]] = []
    for i, bracket in enumerate(brackets):
        if income <= bracket.threshold:
            break

        upper = brackets[i + 1].threshold if i + 1 < len(brackets) else None
        top = min(income, upper) if upper is not None else income
        taxable = top - bracket.threshold
        breakdown.append({
            "lower": bracket.threshold,
            "upper": upper,
            "rate": bracket.rate,
            "taxable_amount": taxable,
            "tax": taxable * bracket.rate,
        })
    return breakdown


def flat_tier_index(income: Decimal, tiers: tuple[TaxBracket, ...]) -> int | None:
    """Index of the highest tier whose threshold ``income`` strictly exceeds.

    Returns None when income is at or below every threshold.
    """
    for i in range(len(tiers) - 1, -1, -1):
        if income > tiers[i].threshold:
            return i
    return None


def flat_tier_rate(income: Decimal, tiers: tuple[TaxBracket, ...]) -> Decimal:
    """Rate of the tier selected by ``flat_tier_index``; zero when no tier is crossed."""
    index = flat_tier_index(income, tiers)
    if index is None:
        return ZERO
    return tiers[index].rate
