"""LLM-backed invoice field extractor."""

import json
from pathlib import Path

from pdf_scanner.fields.base import BaseFieldExtractor
from pdf_scanner.fields.client_base import BaseCompletionClient
from pdf_scanner.fields.exceptions import FieldExtractionError
from pdf_scanner.fields.models import NOT_AVAILABLE, InvoiceFields
from pdf_scanner.fields.prompt_loader import load_json_schema, load_prompt_template
from pdf_scanner.fields.validator import build_fields
from pdf_scanner.logging.logger import Log

_decoder = json.JSONDecoder()


class FieldExtractor(BaseFieldExtractor):
    """Asks a completion client for the invoice fields of one document."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.1,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def extract_fields(self, text: str) -> InvoiceFields | None:
        prompt = self._build_prompt(text)
        Log.debug(f"Field extraction prompt:\n{prompt}")

        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema,
            )
        except FieldExtractionError as exc:
            Log.warning(f"Field extraction call failed: {exc}")
            return None
        Log.debug(f"AI raw response:\n{raw_response}")

        payload = find_json_object(raw_response)
        if payload is None:
            Log.warning("Field extraction reply contained no JSON object")
            return None

        fields = build_fields(payload)
        Log.info(f"Field extraction complete: invoice {fields.invoice_number}")
        return fields

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            document_text=text,
            not_available=NOT_AVAILABLE,
        )


def find_json_object(raw: str) -> dict[str, object] | None:
    """Return the first well-formed JSON object embedded in ``raw``.

    Prose or code fences around the object are skipped.
    """
    start = raw.find("{")
    while start != -1:
        try:
            parsed, _ = _decoder.raw_decode(raw, start)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return parsed
        start = raw.find("{", start + 1)
    return None
