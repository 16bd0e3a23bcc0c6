"""Logger façade exposing one method per severity.

Purpose
-------
Give application code the familiar ``logger.error(...)`` surface while the
threshold check, interpolation, caching and handler dispatch stay in the
collaborators assembled by :func:`~lib_log_chain.runtime.create_logger`.

Contents
--------
* :class:`Logger` - severity methods, :meth:`Logger.log`,
  :meth:`Logger.log_with_result` and :meth:`Logger.determine_file`.

System Role
-----------
``log`` parses the level once, returns ``False`` for levels outside the
threshold set without touching the message, interpolates, appends to the cache
when debug caching is on and hands the message to the handler chain.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.pretty import pretty_repr

from lib_log_chain.application.use_cases.dispatch import DispatchResult, HandlerChain
from lib_log_chain.application.use_cases.interpolate import Interpolator
from lib_log_chain.domain.entries import LogEntry
from lib_log_chain.domain.levels import Severity
from lib_log_chain.domain.log_cache import LogCache

Context = Mapping[str, Any] | None


class Logger:
    """Leveled logger dispatching to an ordered handler chain."""

    def __init__(
        self,
        *,
        threshold: frozenset[Severity],
        chain: HandlerChain,
        interpolator: Interpolator,
        cache: LogCache | None = None,
    ) -> None:
        self._threshold = frozenset(threshold)
        self._chain = chain
        self._interpolator = interpolator
        self._cache = cache

    @property
    def threshold(self) -> frozenset[Severity]:
        """Return the severities this logger records."""

        return self._threshold

    @property
    def handler_ids(self) -> tuple[str, ...]:
        """Return the configured handler ids in dispatch order."""

        return self._chain.handler_ids

    @property
    def chain(self) -> HandlerChain:
        return self._chain

    @property
    def log_cache(self) -> LogCache | None:
        """Return the cache of logged entries, or ``None`` when caching is off."""

        return self._cache

    def emergency(self, message: Any, context: Context = None) -> bool:
        """System is unusable."""
        return self.log(Severity.EMERGENCY, message, context)

    def alert(self, message: Any, context: Context = None) -> bool:
        """Action must be taken immediately (site down, database unavailable)."""
        return self.log(Severity.ALERT, message, context)

    def critical(self, message: Any, context: Context = None) -> bool:
        """Critical conditions such as an unavailable component."""
        return self.log(Severity.CRITICAL, message, context)

    def error(self, message: Any, context: Context = None) -> bool:
        """Runtime errors that should be logged and monitored."""
        return self.log(Severity.ERROR, message, context)

    def warning(self, message: Any, context: Context = None) -> bool:
        """Exceptional occurrences that are not errors."""
        return self.log(Severity.WARNING, message, context)

    def notice(self, message: Any, context: Context = None) -> bool:
        """Normal but significant events."""
        return self.log(Severity.NOTICE, message, context)

    def info(self, message: Any, context: Context = None) -> bool:
        """Interesting events (user logins, SQL statements)."""
        return self.log(Severity.INFO, message, context)

    def debug(self, message: Any, context: Context = None) -> bool:
        """Detailed debug information."""
        return self.log(Severity.DEBUG, message, context)

    def log(self, level: Severity | str | int, message: Any, context: Context = None) -> bool:
        """Log ``message`` at ``level``.

        Parameters
        ----------
        level:
            :class:`Severity`, level name or numeric rank.
        message:
            Text with optional ``{placeholders}``; other objects are logged as
            a pretty dump.
        context:
            Placeholder values for this call.

        Returns
        -------
        bool
            ``False`` when ``level`` is outside the threshold set, ``True``
            once the message went through the handler chain.

        Raises
        ------
        InvalidSeverityError
            When ``level`` does not name a severity.
        """

        return self.log_with_result(level, message, context) is not None

    def log_with_result(self, level: Severity | str | int, message: Any, context: Context = None) -> DispatchResult | None:
        """Log like :meth:`log` and return what the handler chain did.

        Returns ``None`` when ``level`` is outside the threshold set, otherwise
        the :class:`~lib_log_chain.application.use_cases.dispatch.DispatchResult`
        naming the handlers that ran and the one that stopped the chain.
        """

        severity = Severity.parse(level)
        if severity not in self._threshold:
            return None

        rendered = self._interpolator.interpolate(message, context)
        if not isinstance(rendered, str):
            rendered = pretty_repr(rendered)

        if self._cache is not None:
            self._cache.append(LogEntry(level=severity, message=rendered))

        return self._chain.dispatch(severity, rendered)

    def determine_file(self) -> tuple[str, int | str]:
        """Return the ``(file, line)`` of the code that called into the logger."""

        return self._interpolator.determine_file()


__all__ = ["Logger"]
