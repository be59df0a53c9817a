"""Pydantic models for calculator inputs/outputs and chat payloads."""

from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from src.calculators.tax_data import DEFAULT_TAX_YEAR, TAX_YEARS

# --- Shared field types ---


def _blank_as_zero(value: Any) -> Any:
    """Empty form fields mean zero; anything else must parse as a number."""
    if value is None:
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    return value


def _known_tax_year(value: str) -> str:
    if value not in TAX_YEARS:
        raise ValueError(f"Unknown tax year: {value}. Available: {', '.join(sorted(TAX_YEARS))}")
    return value


# Keeps Decimal arithmetic inside the default context's exponent range.
MAX_AMOUNT = Decimal("1e12")

Amount = Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT)]
FormAmount = Annotated[Decimal, BeforeValidator(_blank_as_zero), Field(ge=0, le=MAX_AMOUNT)]
FormCount = Annotated[int, BeforeValidator(_blank_as_zero), Field(ge=0)]
Age = Annotated[int, BeforeValidator(_blank_as_zero), Field(ge=0, le=130)]
TaxYear = Annotated[str, AfterValidator(_known_tax_year)]


# --- Tax estimate ---


class TaxCalculationInput(BaseModel):
    """Everything one estimate needs. Created per request, never stored."""

    model_config = ConfigDict(frozen=True)

    annual_income: FormAmount = Decimal("0")
    other_income: FormAmount = Decimal("0")
    reportable_fringe_benefits: FormAmount = Decimal("0")
    reportable_super_contributions: FormAmount = Decimal("0")
    total_deductions: FormAmount = Decimal("0")
    tax_withheld: FormAmount = Decimal("0")
    is_resident: bool = True
    is_family: bool = False
    dependents: FormCount = 0
    has_private_health: bool = False
    private_health_premiums: FormAmount = Decimal("0")
    age: Age = 0
    is_overseas: bool = False
    help_balance: FormAmount = Decimal("0")
    tax_year: TaxYear = DEFAULT_TAX_YEAR


class HelpRepaymentResult(BaseModel):
    """HELP/HECS part of an estimate."""

    model_config = ConfigDict(frozen=True)

    compulsory_amount: float
    voluntary_bonus: float
    projected_years_to_repay: int | None


class TaxCalculationResult(BaseModel):
    """Output of one estimate. Amounts in AUD, rates as documented per field."""

    model_config = ConfigDict(frozen=True)

    tax_year: str
    gross_income: float
    total_deductions: float
    taxable_income: float
    base_tax: float
    medicare_levy: float
    medicare_levy_surcharge: float
    low_income_offset: float
    private_health_rebate_rate: float  # percent of premiums
    private_health_rebate: float
    help_repayment: HelpRepaymentResult
    total_tax: float
    take_home_pay: float
    tax_withheld: float
    refund_or_debt: float  # positive = refund, negative = amount owed
    is_refund: bool
    effective_rate: str  # e.g. "11.58%"


class IncomeTaxRequest(BaseModel):
    """Request body for the bracket breakdown endpoint."""

    annual_income: Amount
    is_resident: bool = True
    tax_year: TaxYear = DEFAULT_TAX_YEAR


# --- Deductions ---


class HomeOfficeExpenses(BaseModel):
    """Actual running, occupancy and equipment costs for a home office."""

    electricity: Amount = Decimal("0")
    gas: Amount = Decimal("0")
    water: Amount = Decimal("0")
    internet: Amount = Decimal("0")
    phone_usage: Amount = Decimal("0")
    office_equipment: Amount = Decimal("0")
    furniture: Amount = Decimal("0")
    repairs: Amount = Decimal("0")
    cleaning: Amount = Decimal("0")
    rent: Amount = Decimal("0")
    mortgage: Amount = Decimal("0")
    insurance: Amount = Decimal("0")
    council_rates: Amount = Decimal("0")


class VehicleExpenses(BaseModel):
    """Actual car costs for the logbook-style method."""

    fuel: Amount = Decimal("0")
    registration: Amount = Decimal("0")
    insurance: Amount = Decimal("0")
    repairs: Amount = Decimal("0")
    depreciation: Amount = Decimal("0")
    lease: Amount = Decimal("0")
    tolls: Amount = Decimal("0")
    parking: Amount = Decimal("0")


class DeductionClaim(BaseModel):
    """Work-related deductions as entered on the deductions form."""

    itemised: dict[str, Amount] = {}
    industry: dict[str, Amount] = {}
    home_office_method: Literal["none", "shortcut", "fixed", "actual"] = "none"
    home_office_hours: FormAmount = Decimal("0")
    home_office_expenses: HomeOfficeExpenses | None = None
    home_office_work_use_percent: Amount = Field(default=Decimal("0"), le=100)
    home_office_days: int = Field(default=0, ge=0, le=365)
    vehicle_method: Literal["none", "cents_per_km", "actual"] = "none"
    vehicle_km: FormAmount = Decimal("0")
    vehicle_expenses: VehicleExpenses | None = None
    vehicle_work_use_percent: Amount = Field(default=Decimal("0"), le=100)
    tax_year: TaxYear = DEFAULT_TAX_YEAR


# --- Pay calculator ---


class PayRequest(BaseModel):
    """Request body for the take-home pay calculator."""

    amount: Amount
    pay_period: str = "annual"
    hours_per_week: FormAmount = Decimal("0")
    super_rate: Amount | None = None
    includes_super: bool = False
    is_resident: bool = True
    is_family: bool = False
    dependents: FormCount = 0
    has_private_health: bool = False
    age: Age = 0
    is_overseas: bool = False
    help_balance: FormAmount = Decimal("0")
    tax_year: TaxYear = DEFAULT_TAX_YEAR


# --- Chat proxy ---


class ChatTurn(BaseModel):
    """One prior message in the conversation, oldest first."""

    role: Literal["user", "assistant"]
    content: str


class GenerationConfig(BaseModel):
    """Optional sampling overrides forwarded to the LLM."""

    temperature: float | None = Field(default=None, ge=0, le=2)
    top_p: float | None = Field(default=None, ge=0, le=1, validation_alias=AliasChoices("top_p", "topP"))
    top_k: int | None = Field(default=None, ge=1, validation_alias=AliasChoices("top_k", "topK"))
    max_output_tokens: int | None = Field(
        default=None,
        ge=1,
        le=2048,
        validation_alias=AliasChoices("max_output_tokens", "maxOutputTokens"),
    )


class ChatRequest(BaseModel):
    """Request body for the chat proxy.

    Accepts both client shapes: ``{message, history}`` and
    ``{prompt, generationConfig}``.
    """

    message: str | None = Field(default=None, validation_alias=AliasChoices("message", "prompt"))
    history: list[ChatTurn] = []
    generation_config: GenerationConfig | None = Field(
        default=None,
        validation_alias=AliasChoices("generation_config", "generationConfig"),
    )


class ChatResponse(BaseModel):
    """Reply from the chat proxy."""

    text: str
    model: str
    topic: str
