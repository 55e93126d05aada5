import asyncio
import base64
from pathlib import Path

from docreview.documents.exceptions import DocumentReadError
from docreview.documents.file_loader import FileLoader
from docreview.documents.models import EncodedPayload, UploadedDocument
from docreview.logging.logger import Log


class DocumentEncoder:
    """Turns uploaded documents into base64 payloads for the analysis client."""

    def __init__(self, file_loader: FileLoader | None = None) -> None:
        self._file_loader = file_loader if file_loader is not None else FileLoader()

    def encode(self, document: UploadedDocument) -> EncodedPayload:
        return EncodedPayload(
            mime_type=document.mime_type,
            data=base64.b64encode(document.content).decode("ascii"),
            file_name=document.file_name,
        )

    async def read_and_encode(
        self,
        path: Path,
        mime_type: str | None = None,
    ) -> tuple[UploadedDocument, EncodedPayload]:
        """Read a file off the event loop and encode it.

        Raises:
            DocumentReadError: if the file cannot be read. Nothing is encoded.
        """
        document = await asyncio.to_thread(self._file_loader.load, path, mime_type)
        Log.info(
            f"Read {document.size_bytes} bytes from {document.file_name} "
            f"({document.mime_type})"
        )
        return document, self.encode(document)

    async def read_data_url(self, path: Path) -> tuple[UploadedDocument, EncodedPayload]:
        """Read a file holding a ``data:<mime>;base64,...`` URL.

        The document is named after the file with its last suffix dropped,
        so ``report.pdf.txt`` becomes ``report.pdf``.

        Raises:
            DocumentReadError: if the file cannot be read or is not a data URL.
        """
        saved = await asyncio.to_thread(self._file_loader.load, path, "text/plain")
        try:
            payload = EncodedPayload.from_data_url(
                saved.content.decode("ascii").strip(), file_name=path.stem
            )
        except ValueError as exc:
            raise DocumentReadError(f"{path} does not hold a base64 data URL: {exc}") from exc
        document = UploadedDocument(
            content=payload.to_bytes(),
            mime_type=payload.mime_type,
            file_name=payload.file_name,
        )
        Log.info(
            f"Decoded {document.size_bytes} bytes of {document.mime_type} from {path.name}"
        )
        return document, payload
