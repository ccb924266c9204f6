from pathlib import Path

from pdf_scanner.processor.exceptions import DocumentEnumerationError
from pdf_scanner.processor.models import InputDocument


class DocumentLoader:
    """Lists the input directory once per run and reads document bytes."""

    def __init__(self, input_dir: Path, extension: str = ".pdf") -> None:
        self._input_dir = input_dir
        self._extension = extension.lower()

    def list_documents(self) -> list[InputDocument]:
        """Return documents with the configured extension, sorted by name.

        Raises:
            DocumentEnumerationError: if the directory cannot be listed.
        """
        try:
            entries = list(self._input_dir.iterdir())
        except OSError as exc:
            raise DocumentEnumerationError(
                f"Cannot list input directory {self._input_dir}: {exc}"
            ) from exc
        documents = [
            InputDocument(name=entry.name, path=entry)
            for entry in entries
            if entry.suffix.lower() == self._extension and entry.is_file()
        ]
        return sorted(documents, key=lambda document: document.name)

    def load(self, document: InputDocument) -> bytes:
        """Read document bytes from disk.

        Raises:
            FileNotFoundError: if the document was removed after enumeration.
        """
        if not document.path.exists():
            raise FileNotFoundError(f"File not found: {document.path}")
        return document.path.read_bytes()
