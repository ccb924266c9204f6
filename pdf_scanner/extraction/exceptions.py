class ExtractionError(Exception):
    """Raised when text cannot be obtained from a document."""


class RemoteOcrError(ExtractionError):
    """Raised when the remote OCR service rejects or fails a request."""
