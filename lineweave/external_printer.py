"""A thread-safe queue of messages to print while a line is being edited."""

from __future__ import annotations

import queue
from typing import Generic, TypeVar

EXTERNAL_PRINTER_DEFAULT_CAPACITY = 20

T = TypeVar("T")


class ExternalPrinter(Generic[T]):
    """Collects lines from other threads; each is shown above the edited line."""

    def __init__(self, max_cap: int = EXTERNAL_PRINTER_DEFAULT_CAPACITY) -> None:
        self._queue: queue.Queue[T] = queue.Queue(maxsize=max_cap)

    @property
    def max_cap(self) -> int:
        return self._queue.maxsize

    def print(self, line: T) -> None:
        """Queue a line, blocking while the queue is full."""
        self._queue.put(line)

    def get_line(self) -> T | None:
        """Return the next queued line, or None if there is none; never blocks."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None