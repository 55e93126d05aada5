class DocumentError(Exception):
    """Base exception for document intake errors."""


class DocumentReadError(DocumentError):
    """Raised when a selected file cannot be read."""
