from dataclasses import dataclass
from pathlib import Path

from pdf_scanner.fields.models import InvoiceFields


@dataclass(frozen=True)
class InputDocument:
    """A document found in the input directory at run start."""

    name: str
    path: Path


@dataclass(frozen=True)
class DocumentSuccess:
    original_name: str
    resolved_name: str
    was_renamed: bool
    fields: InvoiceFields
    candidate_name: str = ""


@dataclass(frozen=True)
class DocumentFailure:
    original_name: str
    error_message: str


Outcome = DocumentSuccess | DocumentFailure


@dataclass(frozen=True)
class LedgerRow:
    """One ledger line; column order matches LEDGER_HEADER."""

    run_date: str
    original_name: str
    resolved_name: str
    invoice_number: str
    invoice_date: str
    amount: str
    sender: str

    @classmethod
    def from_success(cls, outcome: DocumentSuccess, run_date: str) -> "LedgerRow":
        return cls(
            run_date=run_date,
            original_name=outcome.original_name,
            resolved_name=outcome.resolved_name,
            invoice_number=outcome.fields.invoice_number,
            invoice_date=outcome.fields.date,
            amount=outcome.fields.total_amount,
            sender=outcome.fields.sender,
        )

    def as_list(self) -> list[str]:
        return [
            self.run_date,
            self.original_name,
            self.resolved_name,
            self.invoice_number,
            self.invoice_date,
            self.amount,
            self.sender,
        ]
