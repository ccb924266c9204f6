import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def build_pdf(pages: list[list[str]]) -> bytes:
    """Render one PDF page per entry, one drawn line per string."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    for lines in pages:
        y = 780
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pdf_factory() -> Callable[[list[list[str]]], bytes]:
    return build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    return build_pdf([["Rechnung Nr. 2024-001", "Datum: 05.03.2024", "Endbetrag: 119,00 EUR"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return build_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF whose only page carries no text."""
    return build_pdf([[]])
