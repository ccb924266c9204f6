from abc import ABC, abstractmethod

from pdf_scanner.fields.models import InvoiceFields


class BaseFieldExtractor(ABC):
    """Contract for structured invoice field extraction."""

    @abstractmethod
    def extract_fields(self, text: str) -> InvoiceFields | None:
        """Derive invoice fields from extracted document text.

        Returns:
            InvoiceFields, or None when the service produced no parseable data.
            None is a recoverable outcome and is never raised as an error.
        """
