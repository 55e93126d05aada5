from dataclasses import dataclass

from docreview.documents.models import EncodedPayload


@dataclass(frozen=True)
class AnalysisRequest:
    """Instruction prompt plus the document it applies to."""

    prompt: str
    payload: EncodedPayload
