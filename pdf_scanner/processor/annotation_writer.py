import json
from pathlib import Path, PurePath


class AnnotationWriter:
    """Writes an OCR document annotation next to the relocated documents."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def write(self, source_name: str, annotation: dict[str, object]) -> Path:
        """Write ``<stem>.json`` into the output directory and return its path.

        Raises:
            OSError: if the file cannot be written.
        """
        path = self._output_dir / f"{PurePath(source_name).stem}.json"
        path.write_text(
            json.dumps(annotation, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        return path
