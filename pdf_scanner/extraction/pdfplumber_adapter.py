import io

import pdfplumber

from pdf_scanner.extraction.base import BaseTextExtractor, ExtractedText
from pdf_scanner.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Library parse: one pass over the whole document with pdfplumber."""

    name = "pdfplumber"

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return ExtractedText(text="\n".join(pages).strip())
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
