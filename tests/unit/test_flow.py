"""State machine tests for DocumentAnalysisFlow."""

import asyncio
import json
import threading
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from docreview.analysis.client import AnalysisClient
from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.example_client_adapter import ExampleClientAdapter
from docreview.analysis.exceptions import AnalysisNetworkError
from docreview.analysis.models import AnalysisRequest
from docreview.documents.exceptions import DocumentReadError
from docreview.documents.models import DocumentClass, UploadedDocument
from docreview.flows.features import CREDIT_VALIDATOR, TITLE_VALIDATION
from docreview.flows.flow import DocumentAnalysisFlow
from docreview.flows.models import ErrorKind, FlowStatus, SubmissionState
from docreview.normalization import NormalizerFactory
from docreview.normalization.models import CreditReport, TitleValidationReport

PROMPT = "credit prompt"
DOCUMENT = UploadedDocument(content=b"%PDF-1.4", mime_type="application/pdf", file_name="r.pdf")


class BlockingAdapter(BaseAnalysisClient):
    """Holds every call until released, then returns a fixed reply."""

    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.release = threading.Event()
        self.calls = 0
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def generate_content(self, *, model: str, request: AnalysisRequest) -> str:
        with self._lock:
            self.calls += 1
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        self.release.wait(timeout=5)
        with self._lock:
            self.active -= 1
        return self.reply


def _credit_flow(adapter: BaseAnalysisClient) -> DocumentAnalysisFlow:
    return DocumentAnalysisFlow(
        feature=CREDIT_VALIDATOR,
        prompt=PROMPT,
        client=AnalysisClient(adapter=adapter, model="test-model"),
        normalizer=NormalizerFactory.create(DocumentClass.CREDIT_REPORT),
    )


def _answering(reply: str) -> ExampleClientAdapter:
    return ExampleClientAdapter(responses={PROMPT: reply})


class TestConstruction:
    def test_starts_idle(self) -> None:
        flow = _credit_flow(MagicMock())
        assert flow.state == SubmissionState()
        assert flow.state.status is FlowStatus.IDLE

    def test_rejects_normalizer_of_wrong_mode(self) -> None:
        with pytest.raises(ValueError, match="expects a free_text normalizer"):
            DocumentAnalysisFlow(
                feature=TITLE_VALIDATION,
                prompt="title prompt",
                client=AnalysisClient(adapter=MagicMock(), model="m"),
                normalizer=NormalizerFactory.create(DocumentClass.CREDIT_REPORT),
            )


class TestSelection:
    def test_select_document_stores_document_and_payload(self) -> None:
        flow = _credit_flow(MagicMock())
        state = flow.select_document(DOCUMENT)

        assert state.status is FlowStatus.FILE_SELECTED
        assert state.document == DOCUMENT
        assert state.payload is not None
        assert state.payload.to_bytes() == DOCUMENT.content
        assert state.can_submit

    def test_reselect_clears_previous_error(self) -> None:
        flow = _credit_flow(_answering("not json"))
        flow.select_document(DOCUMENT)
        asyncio.run(flow.submit())
        assert flow.state.error is not None

        state = flow.select_document(DOCUMENT)
        assert state.status is FlowStatus.FILE_SELECTED
        assert state.error is None
        assert state.result is None

    def test_select_file_reads_from_disk(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        path = tmp_path / "report.pdf"
        path.write_bytes(sample_pdf_bytes)
        flow = _credit_flow(MagicMock())

        state = asyncio.run(flow.select_file(path))

        assert state.status is FlowStatus.FILE_SELECTED
        assert state.document.file_name == "report.pdf"
        assert state.document.mime_type == "application/pdf"
        assert state.payload.to_bytes() == sample_pdf_bytes

    def test_unreadable_file_leaves_state_unchanged(self, tmp_path: Path) -> None:
        flow = _credit_flow(MagicMock())
        flow.select_document(DOCUMENT)
        before = flow.state

        with pytest.raises(DocumentReadError):
            asyncio.run(flow.select_file(tmp_path / "missing.pdf"))

        assert flow.state is before

    def test_select_data_url_decodes_saved_url(self, tmp_path: Path) -> None:
        path = tmp_path / "r.pdf.txt"
        path.write_text("data:application/pdf;base64,JVBERi0xLjQ=\n", encoding="ascii")
        flow = _credit_flow(MagicMock())

        state = asyncio.run(flow.select_data_url(path))

        assert state.status is FlowStatus.FILE_SELECTED
        assert state.document == DOCUMENT
        assert state.payload.data_url == "data:application/pdf;base64,JVBERi0xLjQ="


class TestSubmit:
    def test_success_stores_typed_result(self, credit_report_data: dict[str, Any]) -> None:
        flow = _credit_flow(_answering("```json\n" + json.dumps(credit_report_data) + "\n```"))
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.SUCCEEDED
        assert isinstance(state.result, CreditReport)
        assert state.error is None
        assert state.document == DOCUMENT

    def test_transport_failure_sets_transport_error(self) -> None:
        adapter = MagicMock()
        adapter.generate_content.side_effect = AnalysisNetworkError("connection reset")
        flow = _credit_flow(adapter)
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.FAILED
        assert state.result is None
        assert state.error.kind is ErrorKind.TRANSPORT
        assert state.error.message == "Failed to validate credit report. Please try again."

    def test_unparseable_reply_sets_parse_error(self) -> None:
        flow = _credit_flow(_answering("I could not read this document."))
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.FAILED
        assert state.error.kind is ErrorKind.PARSE
        assert "valid credit report" in state.error.message

    def test_wrong_schema_sets_parse_error(self) -> None:
        flow = _credit_flow(_answering('{"propertyDetails": {}}'))
        flow.select_document(DOCUMENT)

        assert asyncio.run(flow.submit()).error.kind is ErrorKind.PARSE

    def test_submit_without_document_is_noop(self) -> None:
        adapter = MagicMock()
        flow = _credit_flow(adapter)

        state = asyncio.run(flow.submit())

        assert state == SubmissionState()
        adapter.generate_content.assert_not_called()

    def test_resubmit_after_failure_makes_new_call(self) -> None:
        adapter = MagicMock()
        adapter.generate_content.side_effect = AnalysisNetworkError("down")
        flow = _credit_flow(adapter)
        flow.select_document(DOCUMENT)
        asyncio.run(flow.submit())
        asyncio.run(flow.submit())

        assert adapter.generate_content.call_count == 2

    def test_title_flow_returns_text_verbatim(self) -> None:
        flow = DocumentAnalysisFlow(
            feature=TITLE_VALIDATION,
            prompt="title prompt",
            client=AnalysisClient(
                adapter=ExampleClientAdapter(responses={"title prompt": "Risk: LOW\n"}),
                model="m",
            ),
            normalizer=NormalizerFactory.create(DocumentClass.TITLE),
        )
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.SUCCEEDED
        assert state.result == TitleValidationReport(text="Risk: LOW\n")

    def test_title_flow_accepts_empty_reply(self) -> None:
        flow = DocumentAnalysisFlow(
            feature=TITLE_VALIDATION,
            prompt="title prompt",
            client=AnalysisClient(
                adapter=ExampleClientAdapter(responses={"title prompt": ""}),
                model="m",
            ),
            normalizer=NormalizerFactory.create(DocumentClass.TITLE),
        )
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.SUCCEEDED
        assert state.error is None
        assert state.result == TitleValidationReport(text="")

    def test_empty_reply_is_a_parse_error_for_structured_flow(self) -> None:
        flow = _credit_flow(_answering(""))
        flow.select_document(DOCUMENT)

        state = asyncio.run(flow.submit())

        assert state.status is FlowStatus.FAILED
        assert state.error.kind is ErrorKind.PARSE


class TestInFlight:
    def test_second_submit_is_rejected(self, credit_report_data: dict[str, Any]) -> None:
        adapter = BlockingAdapter(json.dumps(credit_report_data))
        flow = _credit_flow(adapter)
        flow.select_document(DOCUMENT)

        async def scenario() -> tuple[SubmissionState, SubmissionState]:
            first = asyncio.create_task(flow.submit())
            await asyncio.sleep(0)
            assert flow.state.status is FlowStatus.IN_FLIGHT
            assert not flow.state.can_submit
            second = await flow.submit()
            adapter.release.set()
            return await first, second

        final, rejected = asyncio.run(scenario())

        assert rejected.status is FlowStatus.IN_FLIGHT
        assert final.status is FlowStatus.SUCCEEDED
        assert adapter.calls == 1

    def test_selection_ignored_while_in_flight(self, credit_report_data: dict[str, Any]) -> None:
        adapter = BlockingAdapter(json.dumps(credit_report_data))
        flow = _credit_flow(adapter)
        flow.select_document(DOCUMENT)
        other = UploadedDocument(content=b"<a/>", mime_type="text/xml", file_name="o.xml")

        async def scenario() -> SubmissionState:
            task = asyncio.create_task(flow.submit())
            await asyncio.sleep(0)
            during = flow.select_document(other)
            assert during.document == DOCUMENT
            adapter.release.set()
            return await task

        final = asyncio.run(scenario())

        assert final.document == DOCUMENT

    def test_clear_does_not_unblock_submit_until_call_returns(
        self, credit_report_data: dict[str, Any]
    ) -> None:
        adapter = BlockingAdapter(json.dumps(credit_report_data))
        flow = _credit_flow(adapter)
        flow.select_document(DOCUMENT)
        other = UploadedDocument(content=b"%PDF-1.7", mime_type="application/pdf", file_name="o.pdf")

        async def scenario() -> tuple[SubmissionState, SubmissionState, SubmissionState]:
            first = asyncio.create_task(flow.submit())
            await asyncio.sleep(0)
            flow.clear()
            flow.select_document(other)
            assert flow.call_pending
            blocked = await flow.submit()
            adapter.release.set()
            late = await first
            retried = await flow.submit()
            return blocked, late, retried

        blocked, late, retried = asyncio.run(scenario())

        assert blocked.status is FlowStatus.FILE_SELECTED
        assert blocked.document == other
        assert late.status is FlowStatus.FILE_SELECTED
        assert late.result is None
        assert retried.status is FlowStatus.SUCCEEDED
        assert retried.document == other
        assert adapter.calls == 2
        assert adapter.max_active == 1
        assert not flow.call_pending


class TestClear:
    def test_clear_from_file_selected(self) -> None:
        flow = _credit_flow(MagicMock())
        flow.select_document(DOCUMENT)
        assert flow.clear() == SubmissionState()

    def test_clear_from_succeeded(self, credit_report_data: dict[str, Any]) -> None:
        flow = _credit_flow(_answering(json.dumps(credit_report_data)))
        flow.select_document(DOCUMENT)
        asyncio.run(flow.submit())
        assert flow.clear() == SubmissionState()

    def test_clear_from_failed(self) -> None:
        flow = _credit_flow(_answering("nope"))
        flow.select_document(DOCUMENT)
        asyncio.run(flow.submit())
        assert flow.clear() == SubmissionState()

    def test_clear_from_idle(self) -> None:
        flow = _credit_flow(MagicMock())
        assert flow.clear() == SubmissionState()

    def test_flows_are_independent(self) -> None:
        first = _credit_flow(MagicMock())
        second = _credit_flow(MagicMock())
        first.select_document(DOCUMENT)
        assert second.state == SubmissionState()
