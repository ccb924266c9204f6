import shutil
from pathlib import Path

from pdf_scanner.logging.logger import Log
from pdf_scanner.processor.exceptions import RelocationError


class FileRelocator:
    """Moves a document by copy, verify, then delete.

    The source is only removed once a non-empty copy exists at the
    destination, so an interrupted move leaves the original in place.
    """

    def relocate(self, source: Path, destination: Path) -> None:
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise RelocationError(str(exc)) from exc

        self._verify(destination)

        try:
            source.unlink()
        except OSError as exc:
            raise RelocationError(f"Copied but could not remove source: {exc}") from exc
        Log.debug(f"Relocated {source} -> {destination}")

    @staticmethod
    def _verify(destination: Path) -> None:
        try:
            size = destination.stat().st_size
        except OSError as exc:
            raise RelocationError(f"Cannot verify copy: {exc}") from exc
        if size == 0:
            try:
                destination.unlink(missing_ok=True)
            except OSError as exc:
                Log.warning(f"Could not remove empty copy {destination}: {exc}")
            raise RelocationError("Copied file is empty")
