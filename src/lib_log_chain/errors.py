"""Exception hierarchy shared by every layer of the logging chain.

Purpose
-------
Give callers a small set of typed failures to catch: configuration problems
detected while a logger is assembled, and programmer errors detected while a
message is logged.

Contents
--------
* :class:`LogChainError` - common base class.
* :class:`ConfigurationError` - invalid or incomplete logger configuration.
* :class:`UnknownHandlerError` - handler id without a registered factory.
* :class:`InvalidSeverityError` - level that does not resolve to a severity.
"""

from __future__ import annotations


class LogChainError(Exception):
    """Base class for all errors raised by :mod:`lib_log_chain`."""


class ConfigurationError(LogChainError):
    """Raised when a logger cannot be built from the supplied configuration."""


class UnknownHandlerError(ConfigurationError):
    """Raised when a handler descriptor names an id missing from the registry."""

    def __init__(self, handler_id: str, known: tuple[str, ...] = ()) -> None:
        self.handler_id = handler_id
        self.known = known
        hint = f" (known: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown handler id: {handler_id!r}{hint}")


class InvalidSeverityError(LogChainError, ValueError):
    """Raised when a log call names a level outside the severity table."""

    def __init__(self, level: object) -> None:
        self.level = level
        super().__init__(f"{level!r} is an invalid log level.")


__all__ = [
    "ConfigurationError",
    "InvalidSeverityError",
    "LogChainError",
    "UnknownHandlerError",
]
