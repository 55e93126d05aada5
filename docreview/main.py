import argparse
import asyncio
import json
import sys
from pathlib import Path

from docreview.config.settings import Settings
from docreview.documents.exceptions import DocumentReadError
from docreview.documents.models import DocumentClass
from docreview.flows.factory import FlowFactory
from docreview.flows.flow import DocumentAnalysisFlow
from docreview.flows.models import FlowStatus, SubmissionState
from docreview.logging.logger import Log
from docreview.normalization.models import TitleValidationReport, to_payload
from docreview.rendering.renderer import render_result
from docreview.rendering.text_formatter import format_panels

COMMANDS: dict[str, DocumentClass] = {
    "credit": DocumentClass.CREDIT_REPORT,
    "appraisal": DocumentClass.APPRAISAL,
    "title": DocumentClass.TITLE,
}

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNREADABLE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docreview",
        description="Analyze a credit report, appraisal, or title document with an AI model.",
    )
    parser.add_argument("feature", choices=sorted(COMMANDS), help="Document type to analyze")
    parser.add_argument("file", type=Path, help="PDF or XML document")
    parser.add_argument(
        "--mime-type",
        default=None,
        help="MIME type of the file (guessed from the file name by default)",
    )
    parser.add_argument(
        "--data-url",
        action="store_true",
        help="FILE holds a data:<mime>;base64,... URL instead of the raw document",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the normalized result instead of rendered panels",
    )
    return parser


async def run_flow(
    flow: DocumentAnalysisFlow,
    path: Path,
    mime_type: str | None = None,
    data_url: bool = False,
) -> SubmissionState:
    """Select the file, submit it once, and return the final state."""
    if data_url:
        await flow.select_data_url(path)
    else:
        await flow.select_file(path, mime_type)
    return await flow.submit()


def format_state(state: SubmissionState, as_json: bool) -> str:
    if state.error is not None:
        return state.error.message
    if state.result is None:
        return ""
    if as_json:
        if isinstance(state.result, TitleValidationReport):
            return state.result.text
        return json.dumps(to_payload(state.result), indent=2, ensure_ascii=False)
    return format_panels(render_result(state.result))


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> flows -> one submission."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    flows = FlowFactory.create(settings)
    flow = flows[COMMANDS[args.feature]]
    print(flow.feature.title)

    try:
        state = asyncio.run(run_flow(flow, args.file, args.mime_type, args.data_url))
    except DocumentReadError as exc:
        Log.error(str(exc))
        print(f"Could not read {args.file}", file=sys.stderr)
        return EXIT_UNREADABLE

    output = format_state(state, args.json)
    if state.status is FlowStatus.FAILED:
        print(output, file=sys.stderr)
        return EXIT_FAILED
    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
