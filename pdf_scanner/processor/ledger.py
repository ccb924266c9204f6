"""Append-only audit log of relocated documents, stored as an .xlsx workbook."""

import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.worksheet.worksheet import Worksheet

from pdf_scanner.logging.logger import Log
from pdf_scanner.processor.exceptions import LedgerError
from pdf_scanner.processor.models import LedgerRow

LEDGER_HEADER: tuple[str, ...] = (
    "Date",
    "Original File",
    "New File",
    "Invoice Number",
    "Invoice Date",
    "Amount",
    "Sender",
)
SHEET_TITLE = "PDF Log"


def clean_cell_text(value: str) -> str:
    """Replace control characters a worksheet cannot hold with spaces."""
    return ILLEGAL_CHARACTERS_RE.sub(" ", value)


class LedgerAppender:
    """Adds rows to the first sheet of the ledger and rewrites the file atomically.

    Existing rows are never reordered or removed, and rows are not
    deduplicated: re-processing a document logs it again. Every value is
    stored as a plain text cell, so extracted text beginning with "=" is
    never evaluated as a formula.
    """

    def append_rows(self, ledger_path: Path, rows: Sequence[LedgerRow]) -> None:
        workbook = self._open(ledger_path)
        try:
            sheet = workbook.worksheets[0]
            for row in rows:
                self._append_text_row(sheet, row.as_list())
        except Exception as exc:
            raise LedgerError(f"Cannot add rows to ledger {ledger_path}: {exc}") from exc
        self._save_atomically(workbook, ledger_path)
        Log.info(f"Ledger {ledger_path} updated with {len(rows)} rows")

    @staticmethod
    def _append_text_row(sheet: Worksheet, values: list[str]) -> None:
        sheet.append([clean_cell_text(value) for value in values])
        for cell in sheet[sheet.max_row]:
            if isinstance(cell.value, str):
                cell.data_type = "s"

    @staticmethod
    def _open(ledger_path: Path) -> Workbook:
        if not ledger_path.exists():
            workbook = Workbook()
            sheet = workbook.active
            sheet.title = SHEET_TITLE
            sheet.append(list(LEDGER_HEADER))
            return workbook
        try:
            return load_workbook(ledger_path)
        except Exception as exc:
            raise LedgerError(f"Cannot read ledger {ledger_path}: {exc}") from exc

    @staticmethod
    def _save_atomically(workbook: Workbook, ledger_path: Path) -> None:
        tmp_name = ""
        try:
            ledger_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=ledger_path.parent,
                prefix=f".{ledger_path.stem}-",
                suffix=".xlsx",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                workbook.save(tmp)
            if ledger_path.exists():
                shutil.copymode(ledger_path, tmp_name)
            os.replace(tmp_name, ledger_path)
        except Exception as exc:
            if tmp_name:
                Path(tmp_name).unlink(missing_ok=True)
            raise LedgerError(f"Cannot write ledger {ledger_path}: {exc}") from exc
