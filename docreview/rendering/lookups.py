from docreview.normalization.models import Scalar
from docreview.rendering.models import NOT_AVAILABLE

SEVERITY_EMPHASIS: dict[str, str] = {
    "High": "error",
    "Medium": "warning",
    "Low": "info",
}


def display(value: Scalar) -> str:
    """Format a report value, falling back to a placeholder when blank."""
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def severity_emphasis(severity: Scalar) -> str:
    return SEVERITY_EMPHASIS.get(str(severity), "secondary")
