import base64
import binascii
from dataclasses import dataclass
from enum import Enum

ACCEPTED_MIME_TYPES: tuple[str, ...] = ("application/pdf", "text/xml", "application/xml")


class DocumentClass(str, Enum):
    """Kinds of lending documents the analyzer understands."""

    CREDIT_REPORT = "credit_report"
    APPRAISAL = "appraisal"
    TITLE = "title"


@dataclass(frozen=True)
class UploadedDocument:
    """A user-selected file held in memory."""

    content: bytes
    mime_type: str
    file_name: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class EncodedPayload:
    """Transport-ready form of an UploadedDocument."""

    mime_type: str
    data: str  # base64
    file_name: str = "document"

    def to_bytes(self) -> bytes:
        """Decode the payload back to the original document bytes."""
        return base64.b64decode(self.data, validate=True)

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    @classmethod
    def from_data_url(cls, data_url: str, file_name: str = "document") -> "EncodedPayload":
        """Build a payload from a ``data:<mime>;base64,<data>`` URL.

        Raises:
            ValueError: if the URL is not a base64 data URL.
        """
        header, sep, data = data_url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise ValueError("Expected a base64 data URL")
        mime_type = header[len("data:"):-len(";base64")]
        try:
            base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 data: {exc}") from exc
        return cls(mime_type=mime_type, data=data, file_name=file_name)
