import stat
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

import pytest
from openpyxl import Workbook, load_workbook

from pdf_scanner.processor.exceptions import LedgerError
from pdf_scanner.processor.ledger import LEDGER_HEADER, SHEET_TITLE, LedgerAppender
from pdf_scanner.processor.models import LedgerRow


def _row(original: str, new: str = "n.pdf") -> LedgerRow:
    return LedgerRow(
        run_date="01.06.2024",
        original_name=original,
        resolved_name=new,
        invoice_number="R-1",
        invoice_date="05.03.2024",
        amount="119.00",
        sender="ACME",
    )


def _read_rows(path: Path) -> list[tuple[object, ...]]:
    sheet = load_workbook(path).worksheets[0]
    return list(sheet.iter_rows(values_only=True))


class TestAppendRows:
    def test_creates_ledger_with_header(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        LedgerAppender().append_rows(path, [_row("a.pdf")])

        rows = _read_rows(path)
        assert rows[0] == LEDGER_HEADER
        assert rows[1] == tuple(_row("a.pdf").as_list())
        assert load_workbook(path).worksheets[0].title == SHEET_TITLE

    def test_appends_after_existing_rows_in_order(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        appender = LedgerAppender()
        appender.append_rows(path, [_row("a.pdf")])
        appender.append_rows(path, [_row("b.pdf"), _row("c.pdf")])

        originals = [row[1] for row in _read_rows(path)[1:]]
        assert originals == ["a.pdf", "b.pdf", "c.pdf"]

    def test_does_not_deduplicate(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        appender = LedgerAppender()
        appender.append_rows(path, [_row("a.pdf")])
        appender.append_rows(path, [_row("a.pdf")])
        assert len(_read_rows(path)) == 3

    def test_empty_batch_leaves_rows_untouched(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        appender = LedgerAppender()
        appender.append_rows(path, [_row("a.pdf")])
        before = _read_rows(path)
        appender.append_rows(path, [])
        assert _read_rows(path) == before

    def test_uses_first_sheet_of_foreign_workbook(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        workbook = Workbook()
        workbook.active.title = "Mine"
        workbook.active.append(["custom", "header"])
        workbook.create_sheet("Other").append(["untouched"])
        workbook.save(path)

        LedgerAppender().append_rows(path, [_row("a.pdf")])

        reloaded = load_workbook(path)
        assert reloaded.sheetnames == ["Mine", "Other"]
        rows = list(reloaded["Mine"].iter_rows(values_only=True))
        assert rows[0][:2] == ("custom", "header")
        assert rows[1][1] == "a.pdf"
        assert list(reloaded["Other"].iter_rows(values_only=True)) == [("untouched",)]

    def test_unreadable_ledger_is_not_overwritten(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        path.write_bytes(b"not a workbook")
        with pytest.raises(LedgerError, match="Cannot read ledger"):
            LedgerAppender().append_rows(path, [_row("a.pdf")])
        assert path.read_bytes() == b"not a workbook"

    def test_leaves_no_temp_files(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        LedgerAppender().append_rows(path, [_row("a.pdf")])
        assert [p.name for p in tmp_path.iterdir()] == ["log.xlsx"]

    def test_control_characters_are_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        row = replace(_row("a.pdf"), sender="ACME\x0cGmbH", invoice_number="R\x00-1")

        LedgerAppender().append_rows(path, [row])

        written = _read_rows(path)[1]
        assert written[6] == "ACME GmbH"
        assert written[3] == "R -1"

    def test_formula_like_values_are_stored_as_text(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        row = replace(_row("a.pdf"), amount="=1+1", sender='=HYPERLINK("http://x")')

        LedgerAppender().append_rows(path, [row])

        sheet = load_workbook(path).worksheets[0]
        amount, sender = sheet.cell(row=2, column=6), sheet.cell(row=2, column=7)
        assert (amount.value, amount.data_type) == ("=1+1", "s")
        assert (sender.value, sender.data_type) == ('=HYPERLINK("http://x")', "s")

    def test_existing_ledger_keeps_its_permissions(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        appender = LedgerAppender()
        appender.append_rows(path, [_row("a.pdf")])
        path.chmod(0o644)

        appender.append_rows(path, [_row("b.pdf")])

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_save_failure_is_ledger_error(self, tmp_path: Path) -> None:
        path = tmp_path / "log.xlsx"
        with (
            patch("pdf_scanner.processor.ledger.os.replace", side_effect=PermissionError("locked")),
            pytest.raises(LedgerError, match="Cannot write ledger"),
        ):
            LedgerAppender().append_rows(path, [_row("a.pdf")])
        assert list(tmp_path.iterdir()) == []
