from docreview.normalization.base import BaseResponseNormalizer, ResponseMode
from docreview.normalization.factory import NormalizerFactory
from docreview.normalization.normalizer import StructuredNormalizer, TextNormalizer

__all__ = [
    "BaseResponseNormalizer",
    "NormalizerFactory",
    "ResponseMode",
    "StructuredNormalizer",
    "TextNormalizer",
]
