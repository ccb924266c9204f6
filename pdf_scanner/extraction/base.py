from abc import ABC, abstractmethod
from dataclasses import dataclass

PAGE_BREAK = "\f"


@dataclass(frozen=True)
class ExtractedText:
    """Text of one document plus the optional structured OCR annotation."""

    text: str
    annotation: dict[str, object] | None = None


class BaseTextExtractor(ABC):
    """Contract for all text extraction strategies."""

    name: str = ""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        """Extract text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            ExtractedText whose pages are separated by PAGE_BREAK where the
            strategy knows page boundaries.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
