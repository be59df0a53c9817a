"""Print a tax estimate from the command line.

Usage:
    python scripts/estimate.py 85000 --deductions 2400 --withheld 17000
    python scripts/estimate.py 120000 --help-balance 30000 --family --dependents 2
"""

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS
from src.calculators.tax_return import calculate_tax_return
from src.models import TaxCalculationInput

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

_ROWS = [
    ("Gross income", "gross_income"),
    ("Deductions", "total_deductions"),
    ("Taxable income", "taxable_income"),
    ("Income tax", "base_tax"),
    ("Medicare levy", "medicare_levy"),
    ("Medicare levy surcharge", "medicare_levy_surcharge"),
    ("Low income tax offset", "low_income_offset"),
    ("Private health rebate", "private_health_rebate"),
    ("Total tax", "total_tax"),
    ("Take-home pay", "take_home_pay"),
    ("Tax withheld", "tax_withheld"),
]


def main() -> None:
    """Parse arguments, run the estimate, print a summary table."""
    parser = argparse.ArgumentParser(description="Australian income tax estimate")
    parser.add_argument("income", type=Decimal, help="Annual income (AUD)")
    parser.add_argument("--other-income", type=Decimal, default=Decimal("0"))
    parser.add_argument("--deductions", type=Decimal, default=Decimal("0"))
    parser.add_argument("--withheld", type=Decimal, default=Decimal("0"))
    parser.add_argument("--non-resident", action="store_true")
    parser.add_argument("--family", action="store_true")
    parser.add_argument("--dependents", type=int, default=0)
    parser.add_argument("--private-health", action="store_true")
    parser.add_argument("--premiums", type=Decimal, default=Decimal("0"))
    parser.add_argument("--age", type=int, default=0)
    parser.add_argument("--help-balance", type=Decimal, default=Decimal("0"))
    parser.add_argument("--overseas", action="store_true")
    parser.add_argument("--tax-year", default=DEFAULT_TAX_YEAR, choices=sorted(TAX_YEARS))
    args = parser.parse_args()

    result = calculate_tax_return(
        TaxCalculationInput(
            annual_income=args.income,
            other_income=args.other_income,
            total_deductions=args.deductions,
            tax_withheld=args.withheld,
            is_resident=not args.non_resident,
            is_family=args.family,
            dependents=args.dependents,
            has_private_health=args.private_health,
            private_health_premiums=args.premiums,
            age=args.age,
            help_balance=args.help_balance,
            is_overseas=args.overseas,
            tax_year=args.tax_year,
        )
    )
    logger.info("Estimate for %s", result.tax_year)

    values = result.model_dump()
    for label, key in _ROWS:
        print(f"{label:<26} ${values[key]:>12,.2f}")
    print(f"{'HELP repayment':<26} ${result.help_repayment.compulsory_amount:>12,.2f}")
    outcome = "Refund" if result.is_refund else "Amount owed"
    print(f"{outcome:<26} ${abs(result.refund_or_debt):>12,.2f}")
    print(f"{'Effective rate':<26} {result.effective_rate:>13}")


if __name__ == "__main__":
    main()
