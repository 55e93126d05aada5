class ResponseParseError(Exception):
    """Raised when the model response is not the expected structured data."""


class ResponseValidationError(ResponseParseError):
    """Raised when parsed data does not match the report schema."""
