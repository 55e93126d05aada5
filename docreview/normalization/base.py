from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from docreview.normalization.models import NormalizedResult


class ResponseMode(str, Enum):
    STRUCTURED = "structured"
    FREE_TEXT = "free_text"


class BaseResponseNormalizer(ABC):
    """Contract for turning raw model text into a display-ready result."""

    mode: ClassVar[ResponseMode]

    @abstractmethod
    def normalize(self, raw: str) -> NormalizedResult:
        """Transform raw model output into a normalized result.

        Args:
            raw: Text returned by the analysis client.

        Returns:
            A typed report, or the narrative text wrapped as a report.

        Raises:
            ResponseParseError: in structured mode, when the text is not
                valid structured data of the expected shape.
        """
