"""Handler collecting messages in memory.

Registered as ``"memory"``. Records are appended to the list passed as the
``sink`` option (or to a list owned by the handler), which makes the handler
useful for tests and for debug panels that render recent messages.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence
from dataclasses import dataclass
from typing import Any

from lib_log_chain.domain.levels import Severity

from ._base import BaseHandler


@dataclass(slots=True, frozen=True)
class MemoryRecord:
    """Message captured by :class:`MemoryHandler`."""

    level: Severity
    timestamp: str
    message: str


class MemoryHandler(BaseHandler):
    """Append :class:`MemoryRecord` objects to a sink."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        sink = self._options.get("sink")
        self._records: MutableSequence[MemoryRecord] = sink if sink is not None else []

    @property
    def records(self) -> MutableSequence[MemoryRecord]:
        """Return the sink holding the captured records."""

        return self._records

    def write(self, level: Severity, message: str) -> None:
        self._records.append(MemoryRecord(level=level, timestamp=self.timestamp(), message=message))


__all__ = ["MemoryHandler", "MemoryRecord"]
