"""Cached log entry recorded while debug caching is enabled."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .levels import Severity


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Interpolated message together with the severity it was logged at."""

    level: Severity
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry using the lowercase level name."""

        return {"level": self.level.label, "message": self.message}

    def to_json(self) -> str:
        """Serialize the entry to JSON with sorted keys."""

        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "LogEntry":
        """Reconstruct an entry from :meth:`to_dict` output."""

        return cls(level=Severity.from_name(payload["level"]), message=payload["message"])


__all__ = ["LogEntry"]
