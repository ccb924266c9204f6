from collections.abc import Iterator
from dataclasses import dataclass

import pymupdf

from pdf_scanner.extraction.base import PAGE_BREAK, BaseTextExtractor, ExtractedText
from pdf_scanner.extraction.exceptions import ExtractionError

_TEXT_BLOCK = 0


@dataclass(frozen=True)
class PageItem:
    number: int


@dataclass(frozen=True)
class TextItem:
    text: str


ReaderItem = PageItem | TextItem


class PyMuPdfAdapter(BaseTextExtractor):
    """Rule-based reader: streams page and text-block items from PyMuPDF.

    A page-break marker is inserted before every page after the first and all
    items are joined with single spaces once the stream is exhausted.
    """

    name = "pymupdf"

    def extract(self, pdf_bytes: bytes) -> ExtractedText:
        try:
            parts: list[str] = []
            for item in self._iter_items(pdf_bytes):
                if isinstance(item, PageItem):
                    if item.number > 1:
                        parts.append(PAGE_BREAK)
                elif item.text:
                    parts.append(item.text)
            return ExtractedText(text=" ".join(parts))
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc

    @staticmethod
    def _iter_items(pdf_bytes: bytes) -> Iterator[ReaderItem]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            for index, page in enumerate(doc, start=1):
                yield PageItem(number=index)
                for block in page.get_text("blocks"):
                    if block[6] != _TEXT_BLOCK:
                        continue
                    text = " ".join(block[4].split())
                    if text:
                        yield TextItem(text=text)
