from typing import ClassVar

from pdf_scanner.config.exceptions import ConfigurationError
from pdf_scanner.config.settings import Settings
from pdf_scanner.fields.base import BaseFieldExtractor
from pdf_scanner.fields.example_client_adapter import ExampleClientAdapter
from pdf_scanner.fields.extractor import FieldExtractor
from pdf_scanner.fields.openai_client_adapter import OpenAIClientAdapter


class FieldExtractorFactory:
    """Creates the configured field extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseFieldExtractor:
        """Create a field extractor from application settings.

        Raises:
            ConfigurationError: unknown provider, or a required key/URL is missing.
        """
        provider = settings.field_provider.strip().lower()
        if provider == "example":
            return FieldExtractor(client=ExampleClientAdapter(), model="example", temperature=0.0)

        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.field_timeout_seconds,
            base_url=base_url,
        )
        return FieldExtractor(
            client=client,
            model=settings.field_model_name,
            temperature=settings.field_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.field_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ConfigurationError(
                    "field_base_url is required for field_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is None:
            raise ConfigurationError(
                f"Unknown field provider '{provider}'. Choose from: {cls.supported_providers()}"
            )
        return override or default_base_url

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key = settings.field_api_key.strip()
        if key:
            return key
        if provider in cls.KEYLESS_PROVIDERS:
            # the OpenAI SDK refuses an empty key even when the server ignores it
            return provider
        raise ConfigurationError(f"field_api_key is required for field_provider={provider}")
