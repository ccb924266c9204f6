import pytest
from pydantic import ValidationError

from pdf_scanner.config.settings import Settings


def _settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        assert _settings().app_env == "dev"

    def test_default_extraction_engine(self) -> None:
        assert _settings().extraction_engine == "pymupdf"

    def test_default_field_provider(self) -> None:
        s = _settings()
        assert s.field_provider == "openai"
        assert s.field_model_name == "gpt-4.1-mini"
        assert s.field_temperature == 0.1

    def test_default_naming(self) -> None:
        s = _settings()
        assert s.file_extension == ".pdf"
        assert s.filename_currency == "EUR"

    def test_default_mistral_model(self) -> None:
        assert _settings().mistral_ocr_model == "mistral-ocr-latest"


class TestSettingsFromEnv:
    def test_loads_paths(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_DIR", "/scans/in")
        monkeypatch.setenv("OUTPUT_DIR", "/scans/out")
        monkeypatch.setenv("LEDGER_PATH", "/scans/log.xlsx")
        s = _settings()
        assert (s.input_dir, s.output_dir, s.ledger_path) == (
            "/scans/in",
            "/scans/out",
            "/scans/log.xlsx",
        )

    def test_loads_extraction_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_ENGINE", "mistral")
        assert _settings().extraction_engine == "mistral"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert _settings().log_level == "DEBUG"


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELD_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            _settings()

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELD_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            _settings()
