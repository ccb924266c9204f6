from pdf_scanner.naming.codec import derive_filename, normalize_date, sanitize
from pdf_scanner.naming.collision import ResolvedFilename, resolve_filename

__all__ = [
    "ResolvedFilename",
    "derive_filename",
    "normalize_date",
    "resolve_filename",
    "sanitize",
]
