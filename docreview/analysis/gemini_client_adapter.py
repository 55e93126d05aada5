import httpx
from google import genai
from google.genai import errors, types

from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.exceptions import AnalysisError, AnalysisNetworkError
from docreview.analysis.models import AnalysisRequest


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on the Google GenAI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def generate_content(self, *, model: str, request: AnalysisRequest) -> str:
        payload = request.payload
        contents = types.Content(
            role="user",
            parts=[
                types.Part.from_bytes(data=payload.to_bytes(), mime_type=payload.mime_type),
                types.Part.from_text(text=request.prompt),
            ],
        )
        try:
            response = self._client.models.generate_content(model=model, contents=contents)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        text = response.text
        if text is None:
            raise AnalysisError("AI returned no text part")
        return text
