"""HELP/HECS compulsory repayment calculator."""

import math
from decimal import Decimal
from typing import NamedTuple

from src.calculators.brackets import ZERO, flat_tier_rate
from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS

# Business rules carried over from the firm's calculator, not ATO constants.
OVERSEAS_RATE_MULTIPLIER = Decimal("1.25")
VOLUNTARY_BONUS_RATE = Decimal("0.05")
VOLUNTARY_BONUS_CAP = Decimal("500")


class HelpRepayment(NamedTuple):
    """Result of a HELP repayment calculation.

    ``projected_years_to_repay`` is None when a balance is outstanding but
    income is below the repayment threshold (the debt never clears).
    """

    compulsory_amount: Decimal
    voluntary_bonus: Decimal
    projected_years_to_repay: int | None


NO_REPAYMENT = HelpRepayment(ZERO, ZERO, 0)


def calculate_help_repayment(
    taxable_income: Decimal,
    help_balance: Decimal,
    is_overseas: bool = False,
    tax_year: str = DEFAULT_TAX_YEAR,
) -> HelpRepayment:
    """Compulsory HELP repayment for the year.

    The rate of the highest threshold crossed applies to the whole income.
    Overseas debtors pay at 1.25x that rate.
    """
    if help_balance <= 0:
        return NO_REPAYMENT

    rate = flat_tier_rate(taxable_income, TAX_YEARS[tax_year].help_repayment)
    if is_overseas:
        rate *= OVERSEAS_RATE_MULTIPLIER

    compulsory = taxable_income * rate
    bonus = min(help_balance * VOLUNTARY_BONUS_RATE, VOLUNTARY_BONUS_CAP)
    years = math.ceil(help_balance / compulsory) if compulsory > 0 else None

    return HelpRepayment(compulsory, bonus, years)
