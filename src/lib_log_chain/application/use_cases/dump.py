"""Render cached log entries for debug panels and the CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence

from lib_log_chain.domain.dump import DumpFormat
from lib_log_chain.domain.entries import LogEntry
from lib_log_chain.domain.levels import Severity


def dump_cache(
    entries: Sequence[LogEntry],
    *,
    dump_format: DumpFormat = DumpFormat.TEXT,
    levels: frozenset[Severity] | None = None,
) -> str:
    """Return ``entries`` rendered as text lines or a JSON array.

    Parameters
    ----------
    entries:
        Snapshot taken from a :class:`~lib_log_chain.domain.log_cache.LogCache`.
    dump_format:
        :attr:`DumpFormat.TEXT` yields ``"LEVEL: message"`` lines,
        :attr:`DumpFormat.JSON` a JSON array of ``{"level", "message"}`` objects.
    levels:
        Optional severity filter; ``None`` keeps every entry.

    Examples
    --------
    >>> entries = [LogEntry(Severity.ERROR, "boom"), LogEntry(Severity.INFO, "ok")]
    >>> print(dump_cache(entries))
    ERROR: boom
    INFO: ok
    >>> dump_cache(entries, dump_format=DumpFormat.JSON, levels=frozenset({Severity.INFO}))
    '[{"level": "info", "message": "ok"}]'
    """

    selected = [entry for entry in entries if levels is None or entry.level in levels]
    if dump_format is DumpFormat.JSON:
        return json.dumps([entry.to_dict() for entry in selected])
    return "\n".join(f"{entry.level.name}: {entry.message}" for entry in selected)


__all__ = ["dump_cache"]
