from unittest.mock import MagicMock, patch

import pytest

from pdf_scanner.config.exceptions import ConfigurationError
from pdf_scanner.fields.models import InvoiceFields
from pdf_scanner.main import main
from pdf_scanner.processor.exceptions import LedgerError
from pdf_scanner.processor.models import DocumentFailure, DocumentSuccess

_SUCCESS = DocumentSuccess("a.pdf", "x.pdf", False, InvoiceFields())


def _run_main(processor: MagicMock | None = None, build_error: Exception | None = None) -> int:
    with (
        patch("pdf_scanner.main.Settings") as mock_settings,
        patch("pdf_scanner.main.Log"),
        patch("pdf_scanner.main.build_processor") as mock_build,
    ):
        mock_settings.return_value.log_level = "INFO"
        if build_error is not None:
            mock_build.side_effect = build_error
        else:
            mock_build.return_value = processor
        return main()


class TestMain:
    def test_returns_zero_when_all_documents_succeed(self) -> None:
        processor = MagicMock()
        processor.run.return_value = [_SUCCESS]
        assert _run_main(processor) == 0

    def test_returns_one_when_a_document_fails(self) -> None:
        processor = MagicMock()
        processor.run.return_value = [_SUCCESS, DocumentFailure("b.pdf", "boom")]
        assert _run_main(processor) == 1

    def test_returns_two_on_configuration_error(self) -> None:
        assert _run_main(build_error=ConfigurationError("input_dir is required")) == 2

    def test_returns_two_on_ledger_error(self) -> None:
        processor = MagicMock()
        processor.run.side_effect = LedgerError("locked", [_SUCCESS])
        assert _run_main(processor) == 2

    def test_returns_two_on_malformed_setting(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELD_TIMEOUT_SECONDS", "abc")
        with (
            patch("pdf_scanner.main.Log") as mock_log,
            patch("pdf_scanner.main.build_processor") as mock_build,
        ):
            assert main() == 2
        mock_build.assert_not_called()
        assert "Invalid configuration" in mock_log.error.call_args.args[0]
