class PromptLoadError(Exception):
    """Raised when a bundled prompt template cannot be loaded."""
