"""In-memory pub/sub bus for session notifications."""
from __future__ import annotations

from typing import Any, Callable

STATE_CHANGED = "state_changed"
COUNTDOWN = "countdown"
TIME_CHANGED = "time_changed"
PROGRESS_CHANGED = "progress_changed"
FINISHED = "finished"

SIGNALS = (STATE_CHANGED, COUNTDOWN, TIME_CHANGED, PROGRESS_CHANGED, FINISHED)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals until the owner calls ``flush``.

    TraceSession flushes once at the end of every entry point (start,
    restart, pointer events, clock tick), so handlers only ever observe a
    session that has finished processing its input.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        for name in SIGNALS:
            self.subscribe(name, handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        # Signals a handler publishes wait for the next entry point's flush.
        queued, self._queue = self._queue, []
        for signal_name, data in queued:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
