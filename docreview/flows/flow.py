"""Generic document-analysis flow shared by the credit, appraisal and title features."""

import asyncio
from dataclasses import replace
from pathlib import Path

from docreview.analysis.client import AnalysisClient
from docreview.analysis.exceptions import AnalysisError
from docreview.documents.encoder import DocumentEncoder
from docreview.documents.models import EncodedPayload, UploadedDocument
from docreview.flows.features import Feature
from docreview.flows.models import ErrorKind, FlowStatus, SubmissionError, SubmissionState
from docreview.logging.logger import Log
from docreview.normalization.base import BaseResponseNormalizer
from docreview.normalization.exceptions import ResponseParseError


class DocumentAnalysisFlow:
    """Owns the submission state for one feature.

    States: idle -> file_selected -> in_flight -> succeeded | failed, with
    ``clear`` returning to idle from anywhere. At most one submission is in
    flight per flow.
    """

    def __init__(
        self,
        *,
        feature: Feature,
        prompt: str,
        client: AnalysisClient,
        normalizer: BaseResponseNormalizer,
        encoder: DocumentEncoder | None = None,
    ) -> None:
        if normalizer.mode is not feature.response_mode:
            raise ValueError(
                f"{feature.title} expects a {feature.response_mode.value} normalizer, "
                f"got {normalizer.mode.value}"
            )
        self._feature = feature
        self._prompt = prompt
        self._client = client
        self._normalizer = normalizer
        self._encoder = encoder if encoder is not None else DocumentEncoder()
        self._state = SubmissionState()
        # Bumped on clear so a late completion cannot overwrite a cleared flow.
        self._generation = 0
        # Set while a model call runs, including one orphaned by clear.
        self._call_pending = False

    @property
    def feature(self) -> Feature:
        return self._feature

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def call_pending(self) -> bool:
        """True while a model call from this flow has not returned yet."""
        return self._call_pending

    def select_document(self, document: UploadedDocument) -> SubmissionState:
        """Store a newly selected document, discarding any previous result."""
        if self._reject_selection():
            return self._state
        return self._store_selection(document, self._encoder.encode(document))

    async def select_file(self, path: Path, mime_type: str | None = None) -> SubmissionState:
        """Read and select a file from disk.

        Raises:
            DocumentReadError: if the file cannot be read; the state is unchanged.
        """
        if self._reject_selection():
            return self._state
        document, payload = await self._encoder.read_and_encode(path, mime_type)
        return self._store_selection(document, payload)

    async def select_data_url(self, path: Path) -> SubmissionState:
        """Select a document saved as a ``data:<mime>;base64,...`` URL.

        Raises:
            DocumentReadError: if the file cannot be read or holds no data URL.
        """
        if self._reject_selection():
            return self._state
        document, payload = await self._encoder.read_data_url(path)
        return self._store_selection(document, payload)

    def _reject_selection(self) -> bool:
        if not self._state.in_flight:
            return False
        Log.warning(
            "selection ignored while a submission is running",
            feature=self._feature.title,
        )
        return True

    def _store_selection(
        self, document: UploadedDocument, payload: EncodedPayload
    ) -> SubmissionState:
        if self._state.in_flight:
            return self._state
        self._state = SubmissionState(
            status=FlowStatus.FILE_SELECTED,
            document=document,
            payload=payload,
        )
        Log.info(f"selected {document.file_name}", feature=self._feature.title)
        return self._state

    async def submit(self) -> SubmissionState:
        """Analyze the selected document.

        A no-op without a selected document. Rejected while an earlier call
        from this flow is still running, even if the flow was cleared since.
        """
        if self._call_pending:
            Log.warning("submission already in flight", feature=self._feature.title)
            return self._state
        payload = self._state.payload
        if payload is None:
            Log.debug("submit ignored, no document selected", feature=self._feature.title)
            return self._state

        generation = self._generation
        document = self._state.document
        self._state = replace(
            self._state, status=FlowStatus.IN_FLIGHT, result=None, error=None
        )
        Log.info(f"submitting {payload.file_name}", feature=self._feature.title)

        self._call_pending = True
        try:
            raw = await asyncio.to_thread(self._client.analyze, self._prompt, payload)
            result = self._normalizer.normalize(raw)
        except AnalysisError as exc:
            Log.error(f"analysis failed: {exc}", feature=self._feature.title)
            outcome = SubmissionState(
                status=FlowStatus.FAILED,
                document=document,
                payload=payload,
                error=SubmissionError(
                    ErrorKind.TRANSPORT, self._feature.transport_error_message
                ),
            )
        except ResponseParseError as exc:
            Log.error(f"could not parse response: {exc}", feature=self._feature.title)
            outcome = SubmissionState(
                status=FlowStatus.FAILED,
                document=document,
                payload=payload,
                error=SubmissionError(ErrorKind.PARSE, self._feature.parse_error_message),
            )
        else:
            Log.info("analysis succeeded", feature=self._feature.title)
            outcome = SubmissionState(
                status=FlowStatus.SUCCEEDED,
                document=document,
                payload=payload,
                result=result,
            )
        finally:
            self._call_pending = False

        if generation != self._generation:
            Log.info(
                "discarding result of a cleared submission", feature=self._feature.title
            )
            return self._state
        self._state = outcome
        return self._state

    def clear(self) -> SubmissionState:
        """Drop the document, payload, result and error.

        A model call already running is not cancelled; its result is
        discarded and `submit` stays blocked until it returns.
        """
        self._generation += 1
        self._state = SubmissionState()
        Log.info("cleared", feature=self._feature.title)
        return self._state
