"""Progress events pushed from a run to an external observer.

Delivery is one-way and fire-and-forget. Events of one run arrive in the
order they were emitted; nothing is replayed or persisted.
"""

import queue
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pdf_scanner.logging.logger import Log


class ProgressKind(str, Enum):
    RUN_START = "run-start"
    FILE_START = "file-start"
    TEXT_EXTRACTION = "text-extraction"
    FIELD_EXTRACTION = "field-extraction"
    RELOCATION = "relocation"
    FILE_SUCCESS = "file-success"
    FILE_ERROR = "file-error"
    LOG_UPDATE = "log-update"
    RUN_COMPLETE = "run-complete"


@dataclass(frozen=True)
class ProgressEvent:
    kind: ProgressKind
    current: int
    total: int
    message: str
    file_name: str | None = None
    new_file_name: str | None = None


ProgressSink = Callable[[ProgressEvent], None]


class ProgressReporter:
    """Builds events and hands them to the sink; a failing sink never stops a run."""

    def __init__(self, sink: ProgressSink | None = None) -> None:
        self._sink = sink

    def emit(
        self,
        kind: ProgressKind,
        current: int,
        total: int,
        message: str,
        file_name: str | None = None,
        new_file_name: str | None = None,
    ) -> None:
        if self._sink is None:
            return
        event = ProgressEvent(
            kind=kind,
            current=current,
            total=total,
            message=message,
            file_name=file_name,
            new_file_name=new_file_name,
        )
        try:
            self._sink(event)
        except Exception as exc:
            Log.warning(f"Progress sink rejected {kind.value} event: {exc}")


class LoggingProgressSink:
    """Writes every event message to the application log."""

    def __call__(self, event: ProgressEvent) -> None:
        if event.kind is ProgressKind.FILE_ERROR:
            Log.error(event.message)
        else:
            Log.info(event.message)


class QueueProgressSink:
    """Pushes events onto an unbounded queue for a consumer on another thread."""

    def __init__(self, events: "queue.SimpleQueue[ProgressEvent] | None" = None) -> None:
        self.events: queue.SimpleQueue[ProgressEvent] = (
            events if events is not None else queue.SimpleQueue()
        )

    def __call__(self, event: ProgressEvent) -> None:
        self.events.put_nowait(event)

    def drain(self) -> list[ProgressEvent]:
        drained: list[ProgressEvent] = []
        while True:
            try:
                drained.append(self.events.get_nowait())
            except queue.Empty:
                return drained
