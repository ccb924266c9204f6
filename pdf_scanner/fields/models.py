from dataclasses import dataclass

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class InvoiceFields:
    """Invoice fields read from a document; NOT_AVAILABLE marks a missing value."""

    invoice_number: str = NOT_AVAILABLE
    date: str = NOT_AVAILABLE
    total_amount: str = NOT_AVAILABLE
    sender: str = NOT_AVAILABLE
