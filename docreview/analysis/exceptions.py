class AnalysisError(Exception):
    """Raised when the remote analysis call fails."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
