"""Filesystem-safe tokens and output filenames derived from invoice fields.

Everything here is pure: no filesystem access, no clock unless ``today`` is
left for ``derive_filename`` to fill in.
"""

import re
from datetime import date
from pathlib import PurePath

from pdf_scanner.fields.models import NOT_AVAILABLE, InvoiceFields

PLACEHOLDER = "NA"
MAX_TOKEN_LENGTH = 50
OUTPUT_EXTENSION = ".pdf"

_FORBIDDEN = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")
_DOTS = re.compile(r"\.+")
_UNDERSCORES = re.compile(r"_+")

_DAY_FIRST = re.compile(r"^(\d{1,2})([./])(\d{1,2})\2(\d{4})$")
_YEAR_FIRST = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def _is_missing(value: object) -> bool:
    return value is None or str(value).strip() in ("", NOT_AVAILABLE)


def sanitize(value: object) -> str:
    """Map a field value to a token safe to embed in a filename."""
    if _is_missing(value):
        return PLACEHOLDER
    token = _FORBIDDEN.sub("_", str(value))
    token = _WHITESPACE.sub("_", token)
    token = _DOTS.sub("_", token)
    token = _UNDERSCORES.sub("_", token).strip("_")
    token = token[:MAX_TOKEN_LENGTH].rstrip("_")
    return token or PLACEHOLDER


def normalize_date(value: object) -> str:
    """Render a date as YYYY-MM-DD, or fall back to ``sanitize``."""
    if _is_missing(value):
        return PLACEHOLDER
    cleaned = str(value).strip()

    match = _DAY_FIRST.match(cleaned)
    if match:
        day, _, month, year = match.groups()
    else:
        match = _YEAR_FIRST.match(cleaned)
        if not match:
            return sanitize(value)
        year, month, day = match.groups()

    if _valid_parts(int(day), int(month), int(year)):
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
    return sanitize(value)


def _valid_parts(day: int, month: int, year: int) -> bool:
    return 1 <= day <= 31 and 1 <= month <= 12 and 1900 <= year <= 2100


def derive_filename(
    fields: InvoiceFields,
    original_name: str,
    currency: str = "EUR",
    today: date | None = None,
) -> str:
    """Build ``date_number_CURRENCY_amount_sender.pdf`` from invoice fields.

    When no field could be read, the original stem is kept and tagged with
    today's date and ``_unprocessed`` so the document stays traceable.
    """
    invoice_date = normalize_date(fields.date)
    invoice_number = sanitize(fields.invoice_number)
    amount = sanitize(fields.total_amount)
    sender = sanitize(fields.sender)

    if all(token == PLACEHOLDER for token in (invoice_date, invoice_number, amount, sender)):
        stamp = (today or date.today()).isoformat()
        return f"{PurePath(original_name).stem}_{stamp}_unprocessed{OUTPUT_EXTENSION}"

    return f"{invoice_date}_{invoice_number}_{currency}_{amount}_{sender}{OUTPUT_EXTENSION}"
