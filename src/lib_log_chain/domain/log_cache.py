"""In-memory cache of recently logged entries.

Purpose
-------
Keep the messages logged during the current process so debug panels and
diagnostic tooling can display them without an external sink.

Contents
--------
* :class:`LogCache` with thread-safe append and snapshot helpers.

System Role
-----------
Owned by a single :class:`~lib_log_chain.runtime.Logger`. The cache is
unbounded unless ``max_entries`` is given; appends happen under a lock so a
logger shared between threads never loses entries.
"""

from __future__ import annotations

from collections import deque
from threading import Lock
from typing import Deque, Iterable, Iterator

from .entries import LogEntry


class LogCache:
    """Ordered collection of :class:`LogEntry` objects, oldest first."""

    def __init__(self, *, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._lock = Lock()

    @property
    def max_entries(self) -> int | None:
        """Return the configured size limit (``None`` means unbounded)."""

        return self._max_entries

    def append(self, entry: LogEntry) -> None:
        """Append ``entry``, evicting the oldest one when a limit is set."""

        with self._lock:
            self._entries.append(entry)

    def extend(self, entries: Iterable[LogEntry]) -> None:
        """Append a sequence of entries preserving their order."""
        for entry in entries:
            self.append(entry)

    def snapshot(self) -> list[LogEntry]:
        """Return a copy of the cached entries."""

        with self._lock:
            return list(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        """Iterate over a snapshot from oldest to newest."""
        return iter(self.snapshot())

    def __len__(self) -> int:
        """Return the number of cached entries."""
        with self._lock:
            return len(self._entries)


__all__ = ["LogCache"]
