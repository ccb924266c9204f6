from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path

from pdf_scanner.config.exceptions import ConfigurationError
from pdf_scanner.config.settings import Settings
from pdf_scanner.extraction.factory import TextExtractorFactory
from pdf_scanner.fields.factory import FieldExtractorFactory
from pdf_scanner.logging.logger import Log
from pdf_scanner.processor.annotation_writer import AnnotationWriter
from pdf_scanner.processor.document_loader import DocumentLoader
from pdf_scanner.processor.exceptions import LedgerError
from pdf_scanner.processor.ledger import LedgerAppender
from pdf_scanner.processor.models import (
    DocumentFailure,
    DocumentSuccess,
    InputDocument,
    LedgerRow,
    Outcome,
)
from pdf_scanner.processor.pipeline import DocumentContext, PipelineStep
from pdf_scanner.processor.progress import ProgressKind, ProgressReporter, ProgressSink
from pdf_scanner.processor.relocator import FileRelocator
from pdf_scanner.processor.steps import (
    ExtractFieldsStep,
    ExtractTextStep,
    ReadDocumentStep,
    RelocateStep,
    WriteAnnotationStep,
)


class Processor:
    """Runs the pipeline over every document of the input directory.

    Pipeline per document: read -> extract text -> annotation -> fields ->
    rename + relocate. Documents are processed one at a time in listing order;
    a failing document is recorded and the run moves on. The ledger is
    appended once, after the last document.
    """

    def __init__(
        self,
        *,
        loader: DocumentLoader,
        steps: Sequence[PipelineStep],
        ledger: LedgerAppender,
        ledger_path: Path,
        output_dir: Path,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._loader = loader
        self._steps = list(steps)
        self._ledger = ledger
        self._ledger_path = ledger_path
        self._output_dir = output_dir
        self._today = today

    def run(self, sink: ProgressSink | None = None) -> list[Outcome]:
        """Process all documents and return one outcome per document, in order.

        Raises:
            ConfigurationError: if the output directory cannot be created.
            DocumentEnumerationError: if the input directory cannot be listed.
            LedgerError: if the ledger update fails; ``exc.outcomes`` holds the results.
        """
        reporter = ProgressReporter(sink)
        self._ensure_output_dir()
        documents = self._loader.list_documents()
        total = len(documents)
        Log.info(f"Found {total} documents to process")
        reporter.emit(
            ProgressKind.RUN_START, 0, total, f"Starting processing of {total} PDF files..."
        )

        outcomes = [
            self._process_document(document, index, total, reporter)
            for index, document in enumerate(documents, start=1)
        ]
        successes = [o for o in outcomes if isinstance(o, DocumentSuccess)]

        reporter.emit(ProgressKind.LOG_UPDATE, total, total, "Updating ledger...")
        self._update_ledger(successes, outcomes)

        reporter.emit(
            ProgressKind.RUN_COMPLETE,
            total,
            total,
            f"Processing complete! Successfully processed {len(successes)}/{total} files.",
        )
        return outcomes

    def _process_document(
        self,
        document: InputDocument,
        index: int,
        total: int,
        reporter: ProgressReporter,
    ) -> Outcome:
        context = DocumentContext(document=document, index=index, total=total, reporter=reporter)
        context.report(
            ProgressKind.FILE_START, f"Processing file {index}/{total}: {document.name}"
        )
        try:
            for step in self._steps:
                context = step.run(context)
                if context.outcome is not None:
                    break
        except Exception as exc:
            Log.exception(f"Error processing {document.name}")
            context.fail(str(exc) or type(exc).__name__)

        outcome = context.outcome
        if outcome is None:
            outcome = DocumentFailure(
                original_name=document.name,
                error_message="Pipeline finished without an outcome",
            )

        if isinstance(outcome, DocumentSuccess):
            reporter.emit(
                ProgressKind.FILE_SUCCESS,
                index,
                total,
                f"Successfully processed {document.name} -> {outcome.resolved_name}",
                file_name=document.name,
                new_file_name=outcome.resolved_name,
            )
        else:
            Log.error(f"Failed to process {document.name}: {outcome.error_message}")
            reporter.emit(
                ProgressKind.FILE_ERROR,
                index,
                total,
                f"Failed to process {document.name}: {outcome.error_message}",
                file_name=document.name,
            )
        return outcome

    def _update_ledger(
        self,
        successes: list[DocumentSuccess],
        outcomes: list[Outcome],
    ) -> None:
        run_date = self._today().strftime("%d.%m.%Y")
        rows = [LedgerRow.from_success(outcome, run_date) for outcome in successes]
        try:
            self._ledger.append_rows(self._ledger_path, rows)
        except Exception as exc:
            Log.error(f"Ledger update failed: {exc}")
            raise LedgerError(str(exc) or type(exc).__name__, outcomes) from exc

    def _ensure_output_dir(self) -> None:
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot create output directory {self._output_dir}: {exc}"
            ) from exc


def _require_path(value: str, setting: str) -> Path:
    if not value.strip():
        raise ConfigurationError(f"{setting} is required")
    return Path(value).expanduser()


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters.

    Raises:
        ConfigurationError: on missing paths, unknown strategies or missing
            credentials; nothing has been read or moved at that point.
    """
    input_dir = _require_path(settings.input_dir, "input_dir")
    output_dir = _require_path(settings.output_dir, "output_dir")
    ledger_path = _require_path(settings.ledger_path, "ledger_path")

    text_extractor = TextExtractorFactory.create(settings)
    field_extractor = FieldExtractorFactory.create(settings)
    loader = DocumentLoader(input_dir, extension=settings.file_extension)

    steps: list[PipelineStep] = [
        ReadDocumentStep(loader),
        ExtractTextStep(text_extractor),
        WriteAnnotationStep(AnnotationWriter(output_dir)),
        ExtractFieldsStep(field_extractor),
        RelocateStep(FileRelocator(), output_dir, currency=settings.filename_currency),
    ]
    return Processor(
        loader=loader,
        steps=steps,
        ledger=LedgerAppender(),
        ledger_path=ledger_path,
        output_dir=output_dir,
    )
