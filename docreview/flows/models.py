from dataclasses import dataclass
from enum import Enum

from docreview.documents.models import EncodedPayload, UploadedDocument
from docreview.normalization.models import NormalizedResult


class FlowStatus(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorKind(str, Enum):
    TRANSPORT = "transport"  # the remote call failed
    PARSE = "parse"  # the reply was not the expected structured data


@dataclass(frozen=True)
class SubmissionError:
    """User-facing failure of a single submission."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class SubmissionState:
    """Snapshot of one flow's submission. Replaced wholesale on every transition."""

    status: FlowStatus = FlowStatus.IDLE
    document: UploadedDocument | None = None
    payload: EncodedPayload | None = None
    result: NormalizedResult | None = None
    error: SubmissionError | None = None

    @property
    def in_flight(self) -> bool:
        return self.status is FlowStatus.IN_FLIGHT

    @property
    def can_submit(self) -> bool:
        return self.payload is not None and not self.in_flight
