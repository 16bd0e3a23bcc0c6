"""Severity table mapping level names to their numeric ranks.

Purpose
-------
Hold the closed set of severities together with the fixed rank each one
carries in threshold configuration.

Contents
--------
* :class:`Severity` enum with rank lookups and boundary parsing.
* ``_PYTHON_LEVELS`` constant mapping severities to :mod:`logging` levels.

System Role
-----------
Threshold resolution (:mod:`lib_log_chain.domain.thresholds`) works on ranks,
while every other layer handles :class:`Severity` members only. Ranks are not
ordered by conventional importance: ``debug`` (5) ranks ahead of ``warning``
(6), ``notice`` (7) and ``info`` (8), and that order is kept as-is so existing
threshold settings keep selecting the same levels.
"""

from __future__ import annotations

import logging
from enum import Enum

from lib_log_chain.errors import InvalidSeverityError


class Severity(Enum):
    """Enumerated log severities; the value is the configuration rank."""

    EMERGENCY = 1
    ALERT = 2
    CRITICAL = 3
    ERROR = 4
    DEBUG = 5
    WARNING = 6
    NOTICE = 7
    INFO = 8

    @property
    def rank(self) -> int:
        """Return the numeric rank used by threshold configuration."""

        return self.value

    @property
    def label(self) -> str:
        """Return the lowercase level name used in messages and configuration."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the closest :mod:`logging` constant for this severity."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_rank(cls, rank: int) -> "Severity | None":
        """Return the severity carrying ``rank`` or ``None`` when no level has it.

        Examples
        --------
        >>> Severity.from_rank(5)
        <Severity.DEBUG: 5>
        >>> Severity.from_rank(9) is None
        True
        """

        try:
            return cls(rank)
        except ValueError:
            return None

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Return the severity called ``name`` (case-insensitive)."""

        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise InvalidSeverityError(name) from exc

    @classmethod
    def parse(cls, level: "Severity | str | int") -> "Severity":
        """Convert external input (member, name or numeric rank) into a severity.

        Numeric strings are treated as ranks so values read from configuration
        files behave like integers.

        Examples
        --------
        >>> Severity.parse("error")
        <Severity.ERROR: 4>
        >>> Severity.parse(7)
        <Severity.NOTICE: 7>
        >>> Severity.parse("8")
        <Severity.INFO: 8>
        >>> Severity.parse("verbose")
        Traceback (most recent call last):
        ...
        lib_log_chain.errors.InvalidSeverityError: 'verbose' is an invalid log level.
        """

        if isinstance(level, cls):
            return level
        if isinstance(level, bool):
            raise InvalidSeverityError(level)
        if isinstance(level, int):
            resolved = cls.from_rank(level)
            if resolved is None:
                raise InvalidSeverityError(level)
            return resolved
        if isinstance(level, str):
            text = level.strip()
            if text.isascii() and text.isdigit():
                return cls.parse(int(text))
            return cls.from_name(text)
        raise InvalidSeverityError(level)


_PYTHON_LEVELS = {
    Severity.EMERGENCY: logging.CRITICAL,
    Severity.ALERT: logging.CRITICAL,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.DEBUG: logging.DEBUG,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: logging.INFO,
    Severity.INFO: logging.INFO,
}
# Stdlib levels used when forwarding to :mod:`logging`.


__all__ = ["Severity"]
