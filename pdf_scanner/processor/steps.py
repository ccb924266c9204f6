from collections.abc import Callable
from datetime import date
from pathlib import Path

from pdf_scanner.extraction.base import BaseTextExtractor
from pdf_scanner.fields.base import BaseFieldExtractor
from pdf_scanner.logging.logger import Log
from pdf_scanner.naming.codec import derive_filename
from pdf_scanner.naming.collision import resolve_filename
from pdf_scanner.processor.annotation_writer import AnnotationWriter
from pdf_scanner.processor.document_loader import DocumentLoader
from pdf_scanner.processor.exceptions import RelocationError
from pdf_scanner.processor.models import DocumentSuccess
from pdf_scanner.processor.pipeline import DocumentContext, PipelineStep
from pdf_scanner.processor.progress import ProgressKind
from pdf_scanner.processor.relocator import FileRelocator

NO_DATA_MESSAGE = "Could not extract information"


class ReadDocumentStep(PipelineStep):
    def __init__(self, loader: DocumentLoader) -> None:
        self._loader = loader

    def run(self, context: DocumentContext) -> DocumentContext:
        context.raw_bytes = self._loader.load(context.document)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes from {context.document.name}")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: BaseTextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: DocumentContext) -> DocumentContext:
        name = context.document.name
        context.report(
            ProgressKind.TEXT_EXTRACTION,
            f"Extracting text from {name} using {self._extractor.name}...",
        )
        context.extracted = self._extractor.extract(context.raw_bytes)
        Log.info(f"Extracted {len(context.extracted.text)} chars from {name}")
        return context


class WriteAnnotationStep(PipelineStep):
    """Persists the OCR annotation; a write failure never fails the document."""

    def __init__(self, writer: AnnotationWriter) -> None:
        self._writer = writer

    def run(self, context: DocumentContext) -> DocumentContext:
        if context.extracted is None or context.extracted.annotation is None:
            return context
        try:
            path = self._writer.write(context.document.name, context.extracted.annotation)
        except OSError as exc:
            Log.error(f"Failed to write annotation for {context.document.name}: {exc}")
            return context
        Log.info(f"Created annotation file {path.name}")
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, field_extractor: BaseFieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: DocumentContext) -> DocumentContext:
        if context.extracted is None:
            raise ValueError("DocumentContext.extracted must be set before field extraction")
        context.report(
            ProgressKind.FIELD_EXTRACTION,
            f"Extracting invoice information from {context.document.name}...",
        )
        context.fields = self._field_extractor.extract_fields(context.extracted.text)
        if context.fields is None:
            context.fail(NO_DATA_MESSAGE)
        return context


class RelocateStep(PipelineStep):
    def __init__(
        self,
        relocator: FileRelocator,
        output_dir: Path,
        currency: str = "EUR",
        today: Callable[[], date] = date.today,
    ) -> None:
        self._relocator = relocator
        self._output_dir = output_dir
        self._currency = currency
        self._today = today

    def run(self, context: DocumentContext) -> DocumentContext:
        if context.fields is None:
            raise ValueError("DocumentContext.fields must be set before relocation")
        name = context.document.name
        context.report(ProgressKind.RELOCATION, f"Creating new filename and moving {name}...")

        context.candidate_name = derive_filename(
            context.fields, name, currency=self._currency, today=self._today()
        )
        context.resolved = resolve_filename(self._output_dir, context.candidate_name)
        if context.resolved.was_renamed:
            Log.info(
                f"Filename collision detected: {context.candidate_name} -> "
                f"{context.resolved.name}"
            )

        try:
            self._relocator.relocate(
                context.document.path,
                self._output_dir / context.resolved.name,
            )
        except RelocationError as exc:
            context.fail(f"Copy failed: {exc}")
            return context

        context.outcome = DocumentSuccess(
            original_name=name,
            resolved_name=context.resolved.name,
            was_renamed=context.resolved.was_renamed,
            fields=context.fields,
            candidate_name=context.candidate_name,
        )
        return context
