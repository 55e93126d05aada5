"""Validates parsed model output against the credit and appraisal report schemas."""

from collections.abc import Callable
from typing import Any, TypeVar

from docreview.normalization.exceptions import ResponseValidationError
from docreview.normalization.models import (
    AppraisalReport,
    Collection,
    Comparable,
    ConditionAssessment,
    CreditAccount,
    CreditInquiry,
    CreditReport,
    CreditSummary,
    MarketAnalysis,
    PaymentHistory,
    PersonalInfo,
    PropertyDetails,
    PublicRecord,
    RiskAssessment,
    RiskFactor,
    Scalar,
    Valuation,
    ValidationIssue,
)

T = TypeVar("T")


def validate_credit_report(data: dict[str, Any]) -> CreditReport:
    """Validate raw parsed JSON and build a CreditReport.

    Object sections are required; list sections default to empty.

    Raises:
        ResponseValidationError: on any schema violation.
    """
    return CreditReport(
        personal_info=_build_personal_info(_section(data, "personalInfo")),
        credit_summary=_build_credit_summary(_section(data, "creditSummary")),
        payment_history=_build_payment_history(_section(data, "paymentHistory")),
        credit_accounts=_object_list(data, "creditAccounts", "", _build_credit_account),
        credit_inquiries=_object_list(data, "creditInquiries", "", _build_credit_inquiry),
        public_records=_object_list(data, "publicRecords", "", _build_public_record),
        collections=_object_list(data, "collections", "", _build_collection),
        validation_issues=_object_list(
            data, "validationIssues", "", _build_validation_issue
        ),
    )


def validate_appraisal_report(data: dict[str, Any]) -> AppraisalReport:
    """Validate raw parsed JSON and build an AppraisalReport.

    Raises:
        ResponseValidationError: on any schema violation.
    """
    return AppraisalReport(
        property_details=_build_property_details(_section(data, "propertyDetails")),
        valuation=_build_valuation(_section(data, "valuation")),
        condition_assessment=_build_condition_assessment(
            _section(data, "conditionAssessment")
        ),
        risk_assessment=_build_risk_assessment(_section(data, "riskAssessment")),
        market_analysis=_build_market_analysis(_section(data, "marketAnalysis")),
        comparables=_object_list(data, "comparables", "", _build_comparable),
        recommendations=_scalar_list(data, "recommendations", ""),
    )


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    if key not in data:
        raise ResponseValidationError(f"Missing required section: {key}")
    raw = data[key]
    if not isinstance(raw, dict):
        raise ResponseValidationError(f"'{key}' must be an object")
    return raw


def _path(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _scalar(data: dict[str, Any], key: str, prefix: str) -> Scalar:
    value = data.get(key)
    if value is not None and not isinstance(value, (str, int, float)):
        raise ResponseValidationError(
            f"'{_path(prefix, key)}' must be a string, number or null"
        )
    return value


def _scalar_list(data: dict[str, Any], key: str, prefix: str) -> list[Scalar]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ResponseValidationError(f"'{_path(prefix, key)}' must be a list")
    for i, item in enumerate(raw):
        if item is not None and not isinstance(item, (str, int, float)):
            raise ResponseValidationError(
                f"'{_path(prefix, key)}[{i}]' must be a string, number or null"
            )
    return list(raw)


def _object_list(
    data: dict[str, Any],
    key: str,
    prefix: str,
    build: Callable[[dict[str, Any], str], T],
) -> list[T]:
    raw = data.get(key)
    if raw is None:
        return []
    path = _path(prefix, key)
    if not isinstance(raw, list):
        raise ResponseValidationError(f"'{path}' must be a list")
    items: list[T] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ResponseValidationError(f"'{path}[{i}]' must be an object")
        items.append(build(item, f"{path}[{i}]"))
    return items


def _build_personal_info(raw: dict[str, Any]) -> PersonalInfo:
    p = "personalInfo"
    return PersonalInfo(
        name=_scalar(raw, "name", p),
        ssn=_scalar(raw, "ssn", p),
        date_of_birth=_scalar(raw, "dateOfBirth", p),
        current_address=_scalar(raw, "currentAddress", p),
        previous_addresses=_scalar_list(raw, "previousAddresses", p),
        employment_info=_scalar(raw, "employmentInfo", p),
    )


def _build_credit_summary(raw: dict[str, Any]) -> CreditSummary:
    p = "creditSummary"
    return CreditSummary(
        credit_score=_scalar(raw, "creditScore", p),
        score_date=_scalar(raw, "scoreDate", p),
        total_accounts=_scalar(raw, "totalAccounts", p),
        open_accounts=_scalar(raw, "openAccounts", p),
        closed_accounts=_scalar(raw, "closedAccounts", p),
        derogatory_marks=_scalar(raw, "derogatoryMarks", p),
        total_inquiries=_scalar(raw, "totalInquiries", p),
        oldest_account=_scalar(raw, "oldestAccount", p),
        average_account_age=_scalar(raw, "averageAccountAge", p),
        total_credit_limit=_scalar(raw, "totalCreditLimit", p),
        total_balance=_scalar(raw, "totalBalance", p),
        credit_utilization=_scalar(raw, "creditUtilization", p),
    )


def _build_payment_history(raw: dict[str, Any]) -> PaymentHistory:
    p = "paymentHistory"
    return PaymentHistory(
        on_time_payments=_scalar(raw, "onTimePayments", p),
        late_payments_30_days=_scalar(raw, "latePayments30Days", p),
        late_payments_60_days=_scalar(raw, "latePayments60Days", p),
        late_payments_90_days=_scalar(raw, "latePayments90Days", p),
        total_missed_payments=_scalar(raw, "totalMissedPayments", p),
    )


def _build_credit_account(raw: dict[str, Any], p: str) -> CreditAccount:
    return CreditAccount(
        creditor_name=_scalar(raw, "creditorName", p),
        account_type=_scalar(raw, "accountType", p),
        account_number=_scalar(raw, "accountNumber", p),
        status=_scalar(raw, "status", p),
        balance=_scalar(raw, "balance", p),
        credit_limit=_scalar(raw, "creditLimit", p),
        monthly_payment=_scalar(raw, "monthlyPayment", p),
        opened_date=_scalar(raw, "openedDate", p),
        last_reported=_scalar(raw, "lastReported", p),
        payment_history=_scalar(raw, "paymentHistory", p),
    )


def _build_credit_inquiry(raw: dict[str, Any], p: str) -> CreditInquiry:
    return CreditInquiry(
        creditor=_scalar(raw, "creditor", p),
        date=_scalar(raw, "date", p),
        type=_scalar(raw, "type", p),
    )


def _build_public_record(raw: dict[str, Any], p: str) -> PublicRecord:
    return PublicRecord(
        type=_scalar(raw, "type", p),
        date=_scalar(raw, "date", p),
        amount=_scalar(raw, "amount", p),
        status=_scalar(raw, "status", p),
        court_info=_scalar(raw, "courtInfo", p),
    )


def _build_collection(raw: dict[str, Any], p: str) -> Collection:
    return Collection(
        creditor=_scalar(raw, "creditor", p),
        collection_agency=_scalar(raw, "collectionAgency", p),
        amount=_scalar(raw, "amount", p),
        date=_scalar(raw, "date", p),
        status=_scalar(raw, "status", p),
    )


def _build_validation_issue(raw: dict[str, Any], p: str) -> ValidationIssue:
    return ValidationIssue(
        section=_scalar(raw, "section", p),
        issue=_scalar(raw, "issue", p),
        severity=_scalar(raw, "severity", p),
        recommendation=_scalar(raw, "recommendation", p),
    )


def _build_property_details(raw: dict[str, Any]) -> PropertyDetails:
    p = "propertyDetails"
    return PropertyDetails(
        address=_scalar(raw, "address", p),
        property_type=_scalar(raw, "propertyType", p),
        square_footage=_scalar(raw, "squareFootage", p),
        lot_size=_scalar(raw, "lotSize", p),
        year_built=_scalar(raw, "yearBuilt", p),
        bedrooms=_scalar(raw, "bedrooms", p),
        bathrooms=_scalar(raw, "bathrooms", p),
        garage_spaces=_scalar(raw, "garageSpaces", p),
    )


def _build_valuation(raw: dict[str, Any]) -> Valuation:
    p = "valuation"
    return Valuation(
        appraised_value=_scalar(raw, "appraisedValue", p),
        appraisal_date=_scalar(raw, "appraisalDate", p),
        effective_date=_scalar(raw, "effectiveDate", p),
        purchase_price=_scalar(raw, "purchasePrice", p),
        price_per_sq_ft=_scalar(raw, "pricePerSqFt", p),
        market_trend=_scalar(raw, "marketTrend", p),
        days_on_market=_scalar(raw, "daysOnMarket", p),
    )


def _build_comparable(raw: dict[str, Any], p: str) -> Comparable:
    return Comparable(
        address=_scalar(raw, "address", p),
        sale_price=_scalar(raw, "salePrice", p),
        sale_date=_scalar(raw, "saleDate", p),
        square_footage=_scalar(raw, "squareFootage", p),
        bedrooms=_scalar(raw, "bedrooms", p),
        bathrooms=_scalar(raw, "bathrooms", p),
        price_per_sq_ft=_scalar(raw, "pricePerSqFt", p),
        proximity=_scalar(raw, "proximity", p),
        adjustments=_scalar(raw, "adjustments", p),
    )


def _build_condition_assessment(raw: dict[str, Any]) -> ConditionAssessment:
    p = "conditionAssessment"
    return ConditionAssessment(
        overall_condition=_scalar(raw, "overallCondition", p),
        exterior_condition=_scalar(raw, "exteriorCondition", p),
        interior_condition=_scalar(raw, "interiorCondition", p),
        roof_condition=_scalar(raw, "roofCondition", p),
        foundation_condition=_scalar(raw, "foundationCondition", p),
        repairs_needed=_scalar_list(raw, "repairsNeeded", p),
        estimated_repair_cost=_scalar(raw, "estimatedRepairCost", p),
    )


def _build_risk_factor(raw: dict[str, Any], p: str) -> RiskFactor:
    return RiskFactor(
        factor=_scalar(raw, "factor", p),
        severity=_scalar(raw, "severity", p),
        description=_scalar(raw, "description", p),
    )


def _build_risk_assessment(raw: dict[str, Any]) -> RiskAssessment:
    p = "riskAssessment"
    return RiskAssessment(
        overall_risk=_scalar(raw, "overallRisk", p),
        risk_factors=_object_list(raw, "riskFactors", p, _build_risk_factor),
    )


def _build_market_analysis(raw: dict[str, Any]) -> MarketAnalysis:
    p = "marketAnalysis"
    return MarketAnalysis(
        market_conditions=_scalar(raw, "marketConditions", p),
        supply_demand=_scalar(raw, "supplyDemand", p),
        median_sale_price=_scalar(raw, "medianSalePrice", p),
        average_days_on_market=_scalar(raw, "averageDaysOnMarket", p),
        price_appreciation=_scalar(raw, "priceAppreciation", p),
        inventory=_scalar(raw, "inventory", p),
    )
