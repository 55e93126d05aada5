from docreview.normalization.models import (
    AppraisalReport,
    CreditReport,
    NormalizedResult,
    TitleValidationReport,
)
from docreview.rendering.appraisal_renderer import render_appraisal_report
from docreview.rendering.credit_renderer import render_credit_report
from docreview.rendering.models import Panel


def render_title_validation(report: TitleValidationReport) -> list[Panel]:
    return [Panel(title="Validation Results", icon="📄", text=report.text)]


def render_result(result: NormalizedResult) -> list[Panel]:
    """Dispatch a normalized result to the renderer for its type."""
    if isinstance(result, CreditReport):
        return render_credit_report(result)
    if isinstance(result, AppraisalReport):
        return render_appraisal_report(result)
    if isinstance(result, TitleValidationReport):
        return render_title_validation(result)
    raise TypeError(f"No renderer for {type(result).__name__}")
