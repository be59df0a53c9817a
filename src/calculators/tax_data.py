"""Australian tax constants: brackets, Medicare, HELP, offsets and deduction rates.

Hardcoded Python constants (not DB-driven). Each tax year is a complete
``TaxYearData`` record: when the ATO publishes a new year, add a new record
rather than editing individual tables of an existing one.
"""

from decimal import Decimal
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A (threshold, rate) row. Tables are ordered by ascending threshold."""

    threshold: Decimal
    rate: Decimal


class LevyThresholds(NamedTuple):
    """Medicare levy low-income thresholds for one assessment mode."""

    lower: Decimal
    upper: Decimal
    per_dependent: Decimal = Decimal("0")


class MedicareLevy(NamedTuple):
    """Medicare levy rate and its individual/family reduction thresholds."""

    rate: Decimal
    individual: LevyThresholds
    family: LevyThresholds
    phase_in_fraction: Decimal = Decimal("0.10")


class SurchargeTiers(NamedTuple):
    """Medicare levy surcharge tiers (flat rate on total income)."""

    individual: tuple[TaxBracket, ...]
    family: tuple[TaxBracket, ...]


class PrivateHealthRebate(NamedTuple):
    """Age-banded base rebate percentages and per-income-tier scaling.

    ``tier_factors`` lines up index-for-index with the surcharge tiers.
    """

    under_65: Decimal
    age_65_to_69: Decimal
    age_70_plus: Decimal
    tier_factors: tuple[Decimal, ...]


class LowIncomeOffset(NamedTuple):
    """Low income tax offset: maximum and two linear phase-out segments."""

    maximum: Decimal
    first_threshold: Decimal
    first_rate: Decimal
    second_threshold: Decimal
    second_rate: Decimal


class DeductionRates(NamedTuple):
    """Shortcut rates used by the deduction calculator."""

    home_office_shortcut: Decimal  # per hour
    home_office_fixed: Decimal  # per hour
    vehicle_cents_per_km: Decimal  # dollars per km
    vehicle_km_cap: Decimal


class TaxYearData(NamedTuple):
    """All tax parameters for a single Australian tax year."""

    resident_brackets: tuple[TaxBracket, ...]
    non_resident_brackets: tuple[TaxBracket, ...]
    medicare_levy: MedicareLevy
    surcharge: SurchargeTiers
    private_health_rebate: PrivateHealthRebate
    help_repayment: tuple[TaxBracket, ...]
    low_income_offset: LowIncomeOffset
    super_guarantee_rate: Decimal
    deduction_rates: DeductionRates


def _table(*rows: tuple[str, str]) -> tuple[TaxBracket, ...]:
    return tuple(TaxBracket(Decimal(threshold), Decimal(rate)) for threshold, rate in rows)


# Stage 3 resident rates (from 1 July 2024)
_RESIDENT_2024 = _table(
    ("0", "0"),
    ("18200", "0.16"),
    ("45000", "0.30"),
    ("135000", "0.37"),
    ("190000", "0.45"),
)

_NON_RESIDENT_2024 = _table(
    ("0", "0.30"),
    ("135000", "0.37"),
    ("190000", "0.45"),
)

_RESIDENT_2023 = _table(
    ("0", "0"),
    ("18200", "0.19"),
    ("45000", "0.325"),
    ("120000", "0.37"),
    ("180000", "0.45"),
)

_NON_RESIDENT_2023 = _table(
    ("0", "0.325"),
    ("120000", "0.37"),
    ("180000", "0.45"),
)

# Medicare thresholds are still the 2023-24 figures; update when 2024-25 is legislated.
_MEDICARE_LEVY = MedicareLevy(
    rate=Decimal("0.02"),
    individual=LevyThresholds(Decimal("24276"), Decimal("30345")),
    family=LevyThresholds(Decimal("41112"), Decimal("51094"), per_dependent=Decimal("3760")),
)

_SURCHARGE = SurchargeTiers(
    individual=_table(
        ("0", "0"),
        ("93000", "0.01"),
        ("108000", "0.0125"),
        ("144000", "0.015"),
    ),
    family=_table(
        ("0", "0"),
        ("186000", "0.01"),
        ("216000", "0.0125"),
        ("288000", "0.015"),
    ),
)

_PRIVATE_HEALTH_REBATE = PrivateHealthRebate(
    under_65=Decimal("24.608"),
    age_65_to_69=Decimal("28.710"),
    age_70_plus=Decimal("32.812"),
    tier_factors=(Decimal("1.0"), Decimal("0.6567"), Decimal("0.3278"), Decimal("0")),
)

_HELP_2024 = _table(
    ("0", "0"),
    ("51550", "0.01"),
    ("57154", "0.02"),
    ("62738", "0.025"),
    ("66502", "0.03"),
    ("70717", "0.035"),
    ("75956", "0.04"),
    ("81808", "0.045"),
    ("86768", "0.05"),
    ("91647", "0.055"),
    ("96709", "0.06"),
    ("102013", "0.065"),
    ("107762", "0.07"),
    ("113720", "0.075"),
    ("120193", "0.08"),
    ("126968", "0.085"),
    ("134096", "0.09"),
    ("141533", "0.095"),
    ("149420", "0.10"),
)

_HELP_2023 = _table(
    ("0", "0"),
    ("51550", "0.01"),
    ("59518", "0.02"),
    ("67087", "0.025"),
    ("70889", "0.03"),
    ("74990", "0.035"),
    ("79391", "0.04"),
    ("83955", "0.045"),
    ("88763", "0.05"),
    ("93843", "0.055"),
    ("99214", "0.06"),
    ("104906", "0.065"),
    ("110951", "0.07"),
    ("117377", "0.075"),
    ("124222", "0.08"),
    ("131543", "0.085"),
    ("139381", "0.09"),
    ("147788", "0.095"),
    ("156806", "0.10"),
)

_LITO = LowIncomeOffset(
    maximum=Decimal("700"),
    first_threshold=Decimal("37500"),
    first_rate=Decimal("0.05"),
    second_threshold=Decimal("45000"),
    second_rate=Decimal("0.015"),
)

_DEDUCTION_RATES = DeductionRates(
    home_office_shortcut=Decimal("0.80"),
    home_office_fixed=Decimal("0.52"),
    vehicle_cents_per_km=Decimal("0.725"),
    vehicle_km_cap=Decimal("5000"),
)

TAX_YEARS: dict[str, TaxYearData] = {
    "2023-24": TaxYearData(
        resident_brackets=_RESIDENT_2023,
        non_resident_brackets=_NON_RESIDENT_2023,
        medicare_levy=_MEDICARE_LEVY,
        surcharge=_SURCHARGE,
        private_health_rebate=_PRIVATE_HEALTH_REBATE,
        help_repayment=_HELP_2023,
        low_income_offset=_LITO,
        super_guarantee_rate=Decimal("11.0"),
        deduction_rates=_DEDUCTION_RATES,
    ),
    "2024-25": TaxYearData(
        resident_brackets=_RESIDENT_2024,
        non_resident_brackets=_NON_RESIDENT_2024,
        medicare_levy=_MEDICARE_LEVY,
        surcharge=_SURCHARGE,
        private_health_rebate=_PRIVATE_HEALTH_REBATE,
        help_repayment=_HELP_2024,
        low_income_offset=_LITO,
        super_guarantee_rate=Decimal("11.5"),  # percent
        deduction_rates=_DEDUCTION_RATES,
    ),
}

DEFAULT_TAX_YEAR = "2024-25"
