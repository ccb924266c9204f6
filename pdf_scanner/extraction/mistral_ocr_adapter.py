"""Remote OCR strategy backed by the Mistral OCR HTTP API."""

import base64
import json
from pathlib import Path

import httpx

from pdf_scanner.extraction.base import PAGE_BREAK, BaseTextExtractor, ExtractedText
from pdf_scanner.extraction.exceptions import ExtractionError, RemoteOcrError
from pdf_scanner.logging.logger import Log

_DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "annotation_schema.json"


class MistralOcrAdapter(BaseTextExtractor):
    """Sends the whole PDF as a data URL and joins page markdown with page breaks.

    The service is also asked for a document annotation in the invoice schema;
    when one comes back it is returned alongside the text, never in place of it.
    """

    name = "mistral"

    def __init__(
        self,
        *,
        api_key: str,
        model: str = "mistral-ocr-latest",
        base_url: str = "https://api.mistral.ai/v1",
        timeout_seconds: int = 120,
        annotation_schema_path: Path | None = None,
    ) -> None:
        self._model = model
        self._annotation_schema = self._load_schema(annotation_schema_path or _DEFAULT_SCHEMA_PATH)
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._headers = {"Authorization": f"Bearer {api_key}"}

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        payload = self._post_ocr(self._build_request(pdf_bytes))
        pages = payload.get("pages") or []
        if not isinstance(pages, list):
            raise RemoteOcrError("OCR response 'pages' must be a list")
        text = PAGE_BREAK.join(
            str(page.get("markdown") or "") for page in pages if isinstance(page, dict)
        )
        return ExtractedText(
            text=text,
            annotation=self._parse_annotation(payload.get("document_annotation")),
        )

    def _build_request(self, pdf_bytes: bytes) -> dict[str, object]:
        encoded = base64.b64encode(pdf_bytes).decode("ascii")
        return {
            "model": self._model,
            "include_image_base64": False,
            "document": {
                "type": "document_url",
                "document_url": f"data:application/pdf;base64,{encoded}",
            },
            "document_annotation_format": {
                "type": "json_schema",
                "json_schema": {
                    "name": "invoice_annotation",
                    "strict": True,
                    "schema": self._annotation_schema,
                },
            },
        }

    def _post_ocr(self, body: dict[str, object]) -> dict[str, object]:
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout_seconds,
                headers=self._headers,
            ) as client:
                response = client.post("/ocr", json=body)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteOcrError(
                f"OCR service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteOcrError(f"OCR service network error: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteOcrError(f"OCR service returned invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise RemoteOcrError("OCR response must be an object")
        return payload

    @staticmethod
    def _parse_annotation(raw: object) -> dict[str, object] | None:
        if raw is None or raw == "":
            return None
        if isinstance(raw, dict):
            return raw
        try:
            parsed = json.loads(str(raw))
        except json.JSONDecodeError as exc:
            Log.warning(f"Ignoring unparseable OCR annotation: {exc}")
            return None
        return parsed if isinstance(parsed, dict) else None

    @staticmethod
    def _load_schema(path: Path) -> dict[str, object]:
        try:
            schema = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ExtractionError(f"Failed to load annotation schema: {exc}") from exc
        if not isinstance(schema, dict):
            raise ExtractionError("Annotation schema must be a JSON object")
        return schema
