from collections.abc import Generator
from pathlib import Path

import pytest

from docreview.config.settings import Settings


@pytest.fixture()
def test_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[Settings, None, None]:
    """Settings for the offline example provider, isolated from any local .env."""
    monkeypatch.chdir(tmp_path)
    yield Settings(_env_file=None, analysis_provider="example", log_level="DEBUG")


@pytest.fixture()
def credit_pdf_on_disk(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "credit_report.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture()
def appraisal_xml_on_disk(tmp_path: Path) -> Path:
    path = tmp_path / "appraisal.xml"
    path.write_text(
        '<?xml version="1.0"?><VALUATION_RESPONSE><PROPERTY City="Springfield"/></VALUATION_RESPONSE>',
        encoding="utf-8",
    )
    return path
