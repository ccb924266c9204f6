import json
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from pdf_scanner.extraction.pymupdf_adapter import PyMuPdfAdapter
from pdf_scanner.fields.client_base import BaseCompletionClient
from pdf_scanner.fields.extractor import FieldExtractor
from pdf_scanner.processor.annotation_writer import AnnotationWriter
from pdf_scanner.processor.document_loader import DocumentLoader
from pdf_scanner.processor.ledger import LedgerAppender
from pdf_scanner.processor.processor import Processor
from pdf_scanner.processor.relocator import FileRelocator
from pdf_scanner.processor.steps import (
    ExtractFieldsStep,
    ExtractTextStep,
    ReadDocumentStep,
    RelocateStep,
    WriteAnnotationStep,
)

RUN_DATE = date(2024, 6, 1)


class KeywordClient(BaseCompletionClient):
    """Answers with the payload whose keyword appears in the prompt; prose otherwise."""

    def __init__(self, payloads: dict[str, dict[str, object]]) -> None:
        self._payloads = payloads

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        for keyword, payload in self._payloads.items():
            if keyword in user_prompt:
                return f"Sure, here it is: {json.dumps(payload)}"
        return "Sorry, this does not look like an invoice."


@pytest.fixture
def workspace(tmp_path: Path) -> dict[str, Path]:
    paths = {
        "input": tmp_path / "in",
        "output": tmp_path / "out",
        "ledger": tmp_path / "log.xlsx",
    }
    paths["input"].mkdir()
    return paths


@pytest.fixture
def make_processor(
    workspace: dict[str, Path],
) -> Callable[[dict[str, dict[str, object]]], Processor]:
    def factory(payloads: dict[str, dict[str, object]]) -> Processor:
        loader = DocumentLoader(workspace["input"])
        field_extractor = FieldExtractor(client=KeywordClient(payloads), model="stub")
        steps = [
            ReadDocumentStep(loader),
            ExtractTextStep(PyMuPdfAdapter()),
            WriteAnnotationStep(AnnotationWriter(workspace["output"])),
            ExtractFieldsStep(field_extractor),
            RelocateStep(FileRelocator(), workspace["output"], today=lambda: RUN_DATE),
        ]
        return Processor(
            loader=loader,
            steps=steps,
            ledger=LedgerAppender(),
            ledger_path=workspace["ledger"],
            output_dir=workspace["output"],
            today=lambda: RUN_DATE,
        )

    return factory
