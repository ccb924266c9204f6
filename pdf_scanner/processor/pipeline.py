from abc import ABC, abstractmethod
from dataclasses import dataclass

from pdf_scanner.extraction.base import ExtractedText
from pdf_scanner.fields.models import InvoiceFields
from pdf_scanner.naming.collision import ResolvedFilename
from pdf_scanner.processor.models import DocumentFailure, InputDocument, Outcome
from pdf_scanner.processor.progress import ProgressKind, ProgressReporter


@dataclass(slots=True)
class DocumentContext:
    """State of one document as it moves through the steps.

    Setting ``outcome`` ends the document; later steps are skipped.
    """

    document: InputDocument
    index: int
    total: int
    reporter: ProgressReporter
    raw_bytes: bytes = b""
    extracted: ExtractedText | None = None
    fields: InvoiceFields | None = None
    candidate_name: str = ""
    resolved: ResolvedFilename | None = None
    outcome: Outcome | None = None

    def report(self, kind: ProgressKind, message: str) -> None:
        self.reporter.emit(kind, self.index, self.total, message, file_name=self.document.name)

    def fail(self, error_message: str) -> None:
        self.outcome = DocumentFailure(
            original_name=self.document.name,
            error_message=error_message,
        )


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: DocumentContext) -> DocumentContext:
        raise NotImplementedError
