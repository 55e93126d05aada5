"""Response normalizers for structured (JSON) and free-text model output."""

import json
import re
from collections.abc import Callable
from typing import Any

from docreview.logging.logger import Log
from docreview.normalization.base import BaseResponseNormalizer, ResponseMode
from docreview.normalization.exceptions import ResponseParseError
from docreview.normalization.models import (
    AppraisalReport,
    CreditReport,
    TitleValidationReport,
)

_OPENING_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """Remove a wrapping markdown code fence, tagged (```json) or not.

    Text that does not start with a fence is returned unchanged.
    """
    stripped = text.strip()
    if not stripped.startswith("```"):
        return text
    body = _OPENING_FENCE.sub("", stripped, count=1)
    return _CLOSING_FENCE.sub("", body, count=1)


def parse_json_response(raw: str) -> dict[str, Any]:
    """Parse model output as a JSON object, tolerating a code fence.

    Raises:
        ResponseParseError: if the text is not a JSON object.
    """
    cleaned = strip_code_fences(raw.strip())
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ResponseParseError("JSON response must be an object")
    return parsed


class StructuredNormalizer(BaseResponseNormalizer):
    """Parses JSON output and validates it into a typed report."""

    mode = ResponseMode.STRUCTURED

    def __init__(
        self,
        validator: Callable[[dict[str, Any]], CreditReport | AppraisalReport],
    ) -> None:
        self._validator = validator

    def normalize(self, raw: str) -> CreditReport | AppraisalReport:
        parsed = parse_json_response(raw)
        report = self._validator(parsed)
        Log.info(f"Normalized structured response into {type(report).__name__}")
        return report


class TextNormalizer(BaseResponseNormalizer):
    """Passes narrative output through untouched."""

    mode = ResponseMode.FREE_TEXT

    def normalize(self, raw: str) -> TitleValidationReport:
        return TitleValidationReport(text=raw)
