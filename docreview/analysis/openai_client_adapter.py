import httpx
import openai

from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.exceptions import AnalysisError, AnalysisNetworkError
from docreview.analysis.models import AnalysisRequest
from docreview.documents.models import EncodedPayload


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_content(self, *, model: str, request: AnalysisRequest) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._document_part(request.payload),
                            {"type": "text", "text": request.prompt},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisError("AI returned no message content")
        return content

    @staticmethod
    def _document_part(payload: EncodedPayload) -> dict[str, object]:
        # Chat models only take PDFs as file parts; XML goes in as text.
        if payload.mime_type == "application/pdf":
            return {
                "type": "file",
                "file": {"filename": payload.file_name, "file_data": payload.data_url},
            }
        text = payload.to_bytes().decode("utf-8", errors="replace")
        return {"type": "text", "text": text}
