from pathlib import Path

from docreview.documents.models import DocumentClass
from docreview.prompts.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "templates"


def load_prompt(document_class: DocumentClass, prompt_dir: Path | None = None) -> str:
    """Load the instruction prompt for a document class.

    Args:
        document_class: Which prompt to load.
        prompt_dir: Directory holding ``<document_class>.txt`` files.
                    Defaults to the bundled templates.

    Returns:
        The prompt text. Templates are sent verbatim, not formatted.

    Raises:
        PromptLoadError: if the file cannot be read or is empty.
    """
    if prompt_dir is None:
        prompt_dir = _DEFAULT_PROMPT_DIR
    path = prompt_dir / f"{document_class.value}.txt"
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc
    if not text:
        raise PromptLoadError(f"Prompt template is empty: {path}")
    return text
