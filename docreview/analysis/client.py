"""Single-call document analysis client."""

from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.exceptions import AnalysisError
from docreview.analysis.models import AnalysisRequest
from docreview.documents.models import EncodedPayload
from docreview.logging.logger import Log


class AnalysisClient:
    """Sends one document and one prompt to the configured model.

    Exactly one provider call per ``analyze``. No retries, caching or
    deduplication. Every failure surfaces as ``AnalysisError``.
    """

    def __init__(self, *, adapter: BaseAnalysisClient, model: str) -> None:
        self._adapter = adapter
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def analyze(self, prompt_text: str, payload: EncodedPayload) -> str:
        """Return the model's raw text for the given prompt and document."""
        request = AnalysisRequest(prompt=prompt_text, payload=payload)
        Log.info(
            f"Sending {payload.file_name} ({payload.mime_type}) to model {self._model}"
        )
        try:
            text = self._adapter.generate_content(model=self._model, request=request)
        except AnalysisError as exc:
            Log.error(f"Analysis request failed: {exc}")
            raise
        except Exception as exc:
            Log.error(f"Analysis request failed: {exc}")
            raise AnalysisError(f"Analysis request failed: {exc}") from exc

        if text is None:
            raise AnalysisError("AI returned no response text")
        Log.debug(f"AI raw response:\n{text}")
        return text
