class FieldExtractionError(Exception):
    """Raised when the extraction service call produces no usable reply."""


class FieldExtractionNetworkError(FieldExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
