"""Handler port describing the sinks a logger dispatches to.

Purpose
-------
Define the three-method contract every output handler honours so the
dispatcher never depends on a concrete sink.

Contents
--------
* :class:`HandlerPort` - runtime-checkable protocol.
* :data:`HandlerFactory` - callable turning a descriptor payload into a handler.

System Role
-----------
A handler first filters by level (``can_handle``), then receives the logger's
date format and the interpolated message. ``handle`` returning ``False`` stops
the chain; ``True`` lets the next handler run.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from lib_log_chain.domain.levels import Severity


@runtime_checkable
class HandlerPort(Protocol):
    """Write log messages to a sink.

    Examples
    --------
    >>> class Recorder:
    ...     def can_handle(self, level):
    ...         return True
    ...     def set_date_format(self, date_format):
    ...         return self
    ...     def handle(self, level, message):
    ...         return True
    >>> isinstance(Recorder(), HandlerPort)
    True
    """

    def can_handle(self, level: Severity) -> bool:
        """Return ``True`` when this handler writes messages at ``level``."""

    def set_date_format(self, date_format: str) -> "HandlerPort":
        """Store the date pattern used for timestamps and return ``self``."""

    def handle(self, level: Severity, message: str) -> bool:
        """Write ``message``; return ``False`` to stop further handlers."""


HandlerFactory = Callable[[Mapping[str, Any]], HandlerPort]


__all__ = ["HandlerFactory", "HandlerPort"]
