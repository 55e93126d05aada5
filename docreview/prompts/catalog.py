from pathlib import Path

from docreview.documents.models import DocumentClass
from docreview.prompts.prompt_loader import load_prompt


class PromptCatalog:
    """Read-only lookup of the instruction prompt for each document class."""

    def __init__(self, prompt_dir: Path | None = None) -> None:
        self._prompt_dir = prompt_dir
        self._prompts: dict[DocumentClass, str] = {}

    def get(self, document_class: DocumentClass) -> str:
        if document_class not in self._prompts:
            self._prompts[document_class] = load_prompt(document_class, self._prompt_dir)
        return self._prompts[document_class]
