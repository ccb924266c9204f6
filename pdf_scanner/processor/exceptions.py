from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdf_scanner.processor.models import Outcome


class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentEnumerationError(ProcessorError):
    """Raised when the input directory cannot be listed."""


class RelocationError(ProcessorError):
    """Raised when a document cannot be copied, verified or removed."""


class LedgerError(ProcessorError):
    """Raised when the ledger cannot be read or written.

    Carries the outcomes of the run so they are not lost with the ledger.
    """

    def __init__(self, message: str, outcomes: Sequence["Outcome"] = ()) -> None:
        super().__init__(message)
        self.outcomes = list(outcomes)
