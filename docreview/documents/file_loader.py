import mimetypes
from pathlib import Path

from docreview.documents.exceptions import DocumentReadError
from docreview.documents.models import UploadedDocument

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Path) -> str:
    """Guess a MIME type from the file name, falling back to octet-stream."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


class FileLoader:
    """Reads a user-selected file from disk into an UploadedDocument."""

    def load(self, path: Path, mime_type: str | None = None) -> UploadedDocument:
        """Read document bytes from disk.

        Args:
            path: File to read.
            mime_type: MIME type declared by the caller. Guessed from the
                       file name when omitted.

        Raises:
            DocumentReadError: if the file cannot be read.
        """
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise DocumentReadError(f"Failed to read {path}: {exc}") from exc
        return UploadedDocument(
            content=content,
            mime_type=mime_type or guess_mime_type(path),
            file_name=path.name,
        )
