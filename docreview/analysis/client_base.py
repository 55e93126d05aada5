from abc import ABC, abstractmethod

from docreview.analysis.models import AnalysisRequest


class BaseAnalysisClient(ABC):
    """Contract for provider-specific document analysis clients."""

    @abstractmethod
    def generate_content(self, *, model: str, request: AnalysisRequest) -> str:
        """Send the document and prompt to the provider and return its text.

        Raises:
            AnalysisError: on any provider failure or a reply with no text.
        """
