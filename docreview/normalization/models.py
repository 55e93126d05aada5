from dataclasses import asdict, dataclass, field
from typing import Any

Scalar = str | int | float | None


@dataclass(frozen=True)
class PersonalInfo:
    name: Scalar = None
    ssn: Scalar = None  # last 4 only
    date_of_birth: Scalar = None
    current_address: Scalar = None
    previous_addresses: list[Scalar] = field(default_factory=list)
    employment_info: Scalar = None


@dataclass(frozen=True)
class CreditSummary:
    credit_score: Scalar = None
    score_date: Scalar = None
    total_accounts: Scalar = None
    open_accounts: Scalar = None
    closed_accounts: Scalar = None
    derogatory_marks: Scalar = None
    total_inquiries: Scalar = None
    oldest_account: Scalar = None
    average_account_age: Scalar = None
    total_credit_limit: Scalar = None
    total_balance: Scalar = None
    credit_utilization: Scalar = None


@dataclass(frozen=True)
class CreditAccount:
    creditor_name: Scalar = None
    account_type: Scalar = None
    account_number: Scalar = None  # last 4 only
    status: Scalar = None
    balance: Scalar = None
    credit_limit: Scalar = None
    monthly_payment: Scalar = None
    opened_date: Scalar = None
    last_reported: Scalar = None
    payment_history: Scalar = None


@dataclass(frozen=True)
class PaymentHistory:
    on_time_payments: Scalar = None
    late_payments_30_days: Scalar = None
    late_payments_60_days: Scalar = None
    late_payments_90_days: Scalar = None
    total_missed_payments: Scalar = None


@dataclass(frozen=True)
class CreditInquiry:
    creditor: Scalar = None
    date: Scalar = None
    type: Scalar = None  # Hard/Soft


@dataclass(frozen=True)
class PublicRecord:
    type: Scalar = None
    date: Scalar = None
    amount: Scalar = None
    status: Scalar = None
    court_info: Scalar = None


@dataclass(frozen=True)
class Collection:
    creditor: Scalar = None
    collection_agency: Scalar = None
    amount: Scalar = None
    date: Scalar = None
    status: Scalar = None


@dataclass(frozen=True)
class ValidationIssue:
    section: Scalar = None
    issue: Scalar = None
    severity: Scalar = None  # High/Medium/Low
    recommendation: Scalar = None


@dataclass(frozen=True)
class CreditReport:
    """Structured credit report analysis."""

    personal_info: PersonalInfo
    credit_summary: CreditSummary
    payment_history: PaymentHistory
    credit_accounts: list[CreditAccount] = field(default_factory=list)
    credit_inquiries: list[CreditInquiry] = field(default_factory=list)
    public_records: list[PublicRecord] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)
    validation_issues: list[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class PropertyDetails:
    address: Scalar = None
    property_type: Scalar = None
    square_footage: Scalar = None
    lot_size: Scalar = None
    year_built: Scalar = None
    bedrooms: Scalar = None
    bathrooms: Scalar = None
    garage_spaces: Scalar = None


@dataclass(frozen=True)
class Valuation:
    appraised_value: Scalar = None
    appraisal_date: Scalar = None
    effective_date: Scalar = None
    purchase_price: Scalar = None
    price_per_sq_ft: Scalar = None
    market_trend: Scalar = None
    days_on_market: Scalar = None


@dataclass(frozen=True)
class Comparable:
    address: Scalar = None
    sale_price: Scalar = None
    sale_date: Scalar = None
    square_footage: Scalar = None
    bedrooms: Scalar = None
    bathrooms: Scalar = None
    price_per_sq_ft: Scalar = None
    proximity: Scalar = None
    adjustments: Scalar = None


@dataclass(frozen=True)
class ConditionAssessment:
    overall_condition: Scalar = None
    exterior_condition: Scalar = None
    interior_condition: Scalar = None
    roof_condition: Scalar = None
    foundation_condition: Scalar = None
    repairs_needed: list[Scalar] = field(default_factory=list)
    estimated_repair_cost: Scalar = None


@dataclass(frozen=True)
class RiskFactor:
    factor: Scalar = None
    severity: Scalar = None
    description: Scalar = None


@dataclass(frozen=True)
class RiskAssessment:
    overall_risk: Scalar = None
    risk_factors: list[RiskFactor] = field(default_factory=list)


@dataclass(frozen=True)
class MarketAnalysis:
    market_conditions: Scalar = None
    supply_demand: Scalar = None
    median_sale_price: Scalar = None
    average_days_on_market: Scalar = None
    price_appreciation: Scalar = None
    inventory: Scalar = None


@dataclass(frozen=True)
class AppraisalReport:
    """Structured appraisal analysis."""

    property_details: PropertyDetails
    valuation: Valuation
    condition_assessment: ConditionAssessment
    risk_assessment: RiskAssessment
    market_analysis: MarketAnalysis
    comparables: list[Comparable] = field(default_factory=list)
    recommendations: list[Scalar] = field(default_factory=list)


@dataclass(frozen=True)
class TitleValidationReport:
    """Narrative title validation returned verbatim by the model."""

    text: str


NormalizedResult = CreditReport | AppraisalReport | TitleValidationReport


def camel_case(name: str) -> str:
    """``late_payments_30_days`` -> ``latePayments30Days``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _camel_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {camel_case(key): value for key, value in items}


def to_payload(report: NormalizedResult) -> dict[str, Any]:
    """Convert a report back to the camelCase JSON shape the model returns."""
    return asdict(report, dict_factory=_camel_dict)
