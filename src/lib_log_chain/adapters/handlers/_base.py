"""Shared behaviour for the handlers shipped with the package.

Every bundled handler understands two options besides its own:

``handles``
    Level names or ranks this handler writes (default: every level).
``stop_propagation``
    When true, :meth:`BaseHandler.handle` returns ``False`` after writing so
    later handlers in the chain are skipped.

Subclasses implement :meth:`BaseHandler.write`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from lib_log_chain.application.ports.handler import HandlerPort
from lib_log_chain.domain.date_format import DEFAULT_DATE_FORMAT, format_date
from lib_log_chain.domain.levels import Severity
from lib_log_chain.errors import ConfigurationError, InvalidSeverityError

Clock = Callable[[], datetime]
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class BaseHandler(HandlerPort):
    """Level filtering, date formatting and propagation control."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        opts = dict(options or {})
        self._options = opts
        self._handles = _parse_handles(opts.get("handles"))
        self._stop_propagation = self.flag("stop_propagation")
        self._clock: Clock = opts.get("clock") or datetime.now
        self._date_format = DEFAULT_DATE_FORMAT

    def flag(self, name: str, default: bool = False) -> bool:
        """Return the boolean option ``name``; strings such as ``"false"`` are parsed."""

        raw = self._options.get(name)
        return default if raw is None else parse_flag(name, raw)

    @property
    def handles(self) -> frozenset[Severity]:
        """Return the severities this handler writes."""

        return self._handles

    @property
    def date_format(self) -> str:
        """Return the date pattern set by the logger."""

        return self._date_format

    def can_handle(self, level: Severity) -> bool:
        """Return ``True`` when ``level`` is one of :attr:`handles`."""

        return level in self._handles

    def set_date_format(self, date_format: str) -> "BaseHandler":
        """Store ``date_format`` for :meth:`timestamp` and return ``self``."""

        self._date_format = date_format
        return self

    def timestamp(self) -> str:
        """Return the current time rendered with :attr:`date_format`."""

        return format_date(self._date_format, self._clock())

    def handle(self, level: Severity, message: str) -> bool:
        """Write ``message`` and report whether later handlers should run."""

        self.write(level, message)
        return not self._stop_propagation

    def write(self, level: Severity, message: str) -> None:
        raise NotImplementedError


def parse_flag(name: str, raw: Any) -> bool:
    """Interpret a handler option as a boolean.

    Examples
    --------
    >>> parse_flag("stop_propagation", "false"), parse_flag("stop_propagation", "Yes"), parse_flag("x", 1)
    (False, True, True)
    """

    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
    raise ConfigurationError(f"option {name!r} must be a boolean flag (1/0, true/false, yes/no, on/off), got {raw!r}")


def _parse_handles(raw: Any) -> frozenset[Severity]:
    if raw is None:
        return frozenset(Severity)
    if isinstance(raw, (str, int, Severity)):
        raw = [raw]
    if not isinstance(raw, Iterable):
        raise ConfigurationError(f"handles must be a list of level names or ranks, got {raw!r}")
    try:
        return frozenset(Severity.parse(item) for item in raw)
    except InvalidSeverityError as exc:
        raise ConfigurationError(f"handles contains an unknown level: {exc.level!r}") from exc


__all__ = ["BaseHandler", "Clock", "parse_flag"]
