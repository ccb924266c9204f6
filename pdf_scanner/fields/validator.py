"""Builds InvoiceFields from the raw JSON object returned by the model."""

from typing import Any

from pdf_scanner.fields.models import NOT_AVAILABLE, InvoiceFields

FIELD_NAMES: tuple[str, ...] = ("invoice_number", "date", "total_amount", "sender")


def build_fields(data: dict[str, Any]) -> InvoiceFields:
    """Coerce each known field to a string; absent or blank values become N/A."""
    return InvoiceFields(**{name: _coerce(data.get(name)) for name in FIELD_NAMES})


def _coerce(raw: Any) -> str:
    if raw is None or isinstance(raw, (bool, dict, list)):
        return NOT_AVAILABLE
    text = str(raw).strip()
    return text or NOT_AVAILABLE
