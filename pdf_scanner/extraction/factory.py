from pdf_scanner.config.exceptions import ConfigurationError
from pdf_scanner.config.settings import Settings
from pdf_scanner.extraction.base import BaseTextExtractor
from pdf_scanner.extraction.mistral_ocr_adapter import MistralOcrAdapter
from pdf_scanner.extraction.pdfplumber_adapter import PdfPlumberAdapter
from pdf_scanner.extraction.pymupdf_adapter import PyMuPdfAdapter


class TextExtractorFactory:
    """Creates the text extraction strategy selected in settings."""

    ENGINES: tuple[str, ...] = ("pdfplumber", "pymupdf", "mistral")

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.extraction_engine.strip().lower()
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        if engine == "pymupdf":
            return PyMuPdfAdapter()
        if engine == "mistral":
            return cls._create_mistral(settings)
        raise ConfigurationError(
            f"Unknown extraction engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )

    @staticmethod
    def _create_mistral(settings: Settings) -> MistralOcrAdapter:
        api_key = settings.mistral_api_key.strip()
        if not api_key:
            raise ConfigurationError(
                "mistral_api_key is required for extraction_engine=mistral"
            )
        return MistralOcrAdapter(
            api_key=api_key,
            model=settings.mistral_ocr_model,
            base_url=settings.mistral_base_url,
            timeout_seconds=settings.mistral_timeout_seconds,
        )
