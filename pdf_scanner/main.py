import sys

from pydantic import ValidationError

from pdf_scanner.config.exceptions import ConfigurationError
from pdf_scanner.config.settings import Settings
from pdf_scanner.logging.logger import Log
from pdf_scanner.processor.exceptions import LedgerError, ProcessorError
from pdf_scanner.processor.models import DocumentFailure, DocumentSuccess, Outcome
from pdf_scanner.processor.processor import build_processor
from pdf_scanner.processor.progress import LoggingProgressSink


def _log_summary(outcomes: list[Outcome]) -> None:
    for outcome in outcomes:
        if isinstance(outcome, DocumentSuccess):
            suffix = " (renamed to avoid a collision)" if outcome.was_renamed else ""
            Log.info(f"OK    {outcome.original_name} -> {outcome.resolved_name}{suffix}")
        elif isinstance(outcome, DocumentFailure):
            Log.info(f"FAIL  {outcome.original_name}: {outcome.error_message}")


def main() -> int:
    """Entry point: load settings -> build processor -> run once -> summarize."""
    try:
        settings = Settings()
    except ValidationError as exc:
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        return 2
    Log.configure(settings.log_level)

    try:
        processor = build_processor(settings)
        outcomes = processor.run(LoggingProgressSink())
    except LedgerError as exc:
        _log_summary(exc.outcomes)
        Log.error(f"Documents processed but ledger not updated: {exc}")
        return 2
    except (ConfigurationError, ProcessorError) as exc:
        Log.error(f"Run aborted: {exc}")
        return 2

    _log_summary(outcomes)
    return 0 if all(isinstance(o, DocumentSuccess) for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
