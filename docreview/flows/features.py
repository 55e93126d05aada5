from dataclasses import dataclass

from docreview.documents.models import DocumentClass
from docreview.normalization.base import ResponseMode


@dataclass(frozen=True)
class Feature:
    """Static description of one document-analysis feature."""

    document_class: DocumentClass
    title: str
    description: str
    response_mode: ResponseMode
    transport_error_message: str
    parse_error_message: str


CREDIT_VALIDATOR = Feature(
    document_class=DocumentClass.CREDIT_REPORT,
    title="Credit Validator",
    description=(
        "Upload a credit report to validate and analyze all sections including "
        "personal information, accounts, payment history, and more."
    ),
    response_mode=ResponseMode.STRUCTURED,
    transport_error_message="Failed to validate credit report. Please try again.",
    parse_error_message=(
        "Failed to validate credit report. Please ensure the file is a valid "
        "credit report and try again."
    ),
)

APPRAISAL_ANALYSIS = Feature(
    document_class=DocumentClass.APPRAISAL,
    title="Appraisal Analysis",
    description=(
        "Upload an appraisal document to get a comprehensive analysis including "
        "property details, valuation, comparables, and risk factors."
    ),
    response_mode=ResponseMode.STRUCTURED,
    transport_error_message="Failed to analyze appraisal document. Please try again.",
    parse_error_message=(
        "Failed to analyze appraisal document. Please ensure the file is a valid "
        "appraisal and try again."
    ),
)

TITLE_VALIDATION = Feature(
    document_class=DocumentClass.TITLE,
    title="Title Validation",
    description=(
        "Upload a title document or commitment to get a detailed validation "
        "including ownership, liens, encumbrances, and risk assessment."
    ),
    response_mode=ResponseMode.FREE_TEXT,
    transport_error_message="Sorry, an error occurred while validating the title document.",
    parse_error_message="Sorry, an error occurred while validating the title document.",
)

FEATURES: dict[DocumentClass, Feature] = {
    feature.document_class: feature
    for feature in (CREDIT_VALIDATOR, APPRAISAL_ANALYSIS, TITLE_VALIDATION)
}
