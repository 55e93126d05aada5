from docreview.documents.models import DocumentClass
from docreview.normalization.base import BaseResponseNormalizer
from docreview.normalization.normalizer import StructuredNormalizer, TextNormalizer
from docreview.normalization.validator import (
    validate_appraisal_report,
    validate_credit_report,
)


class NormalizerFactory:
    """Creates the response normalizer for a document class."""

    @classmethod
    def create(cls, document_class: DocumentClass) -> BaseResponseNormalizer:
        if document_class is DocumentClass.CREDIT_REPORT:
            return StructuredNormalizer(validate_credit_report)
        if document_class is DocumentClass.APPRAISAL:
            return StructuredNormalizer(validate_appraisal_report)
        if document_class is DocumentClass.TITLE:
            return TextNormalizer()
        raise ValueError(f"Unknown document class '{document_class}'")
