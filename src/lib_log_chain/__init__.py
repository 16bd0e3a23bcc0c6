"""Leveled logging with placeholder interpolation and a chain of handlers.

Purpose
-------
Offer a small logger whose messages are filtered by a severity threshold,
enriched with request and environment placeholders, and handed to an ordered
chain of handlers where any handler may stop further propagation.

Contents
--------
* :func:`init`, :func:`get`, :func:`log_message`, :func:`request_scope`,
  :func:`dump`, :func:`shutdown` - process-wide runtime façade.
* :func:`create_logger`, :class:`Logger`, :class:`LoggerConfig` - explicit
  logger instances.
* :class:`Severity`, :class:`DumpFormat`, :class:`HandlerRegistry` and the
  error types raised by the package.

System Role
-----------
Top-level import surface re-exporting the runtime layer so host applications
never reach into the inner packages.
"""

from __future__ import annotations

from .application.registry import HandlerRegistry
from .domain import DumpFormat, Severity
from .errors import ConfigurationError, InvalidSeverityError, LogChainError, UnknownHandlerError
from .runtime import (
    Logger,
    LoggerConfig,
    RuntimeSnapshot,
    create_logger,
    dump,
    get,
    init,
    inspect_runtime,
    is_initialised,
    log_message,
    request_scope,
    shutdown,
    summary_info,
)

__all__ = [
    "ConfigurationError",
    "DumpFormat",
    "HandlerRegistry",
    "InvalidSeverityError",
    "LogChainError",
    "Logger",
    "LoggerConfig",
    "RuntimeSnapshot",
    "Severity",
    "UnknownHandlerError",
    "create_logger",
    "dump",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "log_message",
    "request_scope",
    "shutdown",
    "summary_info",
]
