from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    input_dir: str = ""
    output_dir: str = ""
    ledger_path: str = ""
    file_extension: str = ".pdf"
    filename_currency: str = "EUR"

    extraction_engine: str = "pymupdf"

    mistral_api_key: str = ""
    mistral_ocr_model: str = "mistral-ocr-latest"
    mistral_base_url: str = "https://api.mistral.ai/v1"
    mistral_timeout_seconds: int = 120

    field_provider: str = "openai"
    field_api_key: str = ""
    field_model_name: str = "gpt-4.1-mini"
    field_base_url: str = ""
    field_timeout_seconds: int = 60
    field_temperature: float = 0.1
