from pdf_scanner.fields.base import BaseFieldExtractor
from pdf_scanner.fields.extractor import FieldExtractor
from pdf_scanner.fields.factory import FieldExtractorFactory
from pdf_scanner.fields.models import NOT_AVAILABLE, InvoiceFields

__all__ = [
    "NOT_AVAILABLE",
    "BaseFieldExtractor",
    "FieldExtractor",
    "FieldExtractorFactory",
    "InvoiceFields",
]
