"""Threshold resolution turning configuration values into loggable severities.

Purpose
-------
Translate the user-facing ``threshold`` setting into the frozen set of
severities a logger records.

Contents
--------
* :func:`resolve_threshold` - ceiling or explicit rank list to severity set.
* :func:`parse_threshold` - boundary parser for textual settings.

System Role
-----------
A ceiling ``N`` selects the ranks ``1..N`` and maps each rank back through the
severity table, so ``N=5`` includes ``debug`` and excludes ``warning``. Explicit
lists select exactly the listed ranks; ranks without a severity are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable

from lib_log_chain.errors import ConfigurationError

from .levels import Severity

ThresholdValue = int | Iterable[int]


def resolve_threshold(value: ThresholdValue) -> frozenset[Severity]:
    """Return the severities selected by ``value``.

    Examples
    --------
    >>> sorted(level.label for level in resolve_threshold(3))
    ['alert', 'critical', 'emergency']
    >>> sorted(level.rank for level in resolve_threshold([1, 4, 42]))
    [1, 4]
    """

    if isinstance(value, bool):
        raise ConfigurationError(f"threshold must be an integer or a list of integers, got {value!r}")
    if isinstance(value, int):
        ranks: Iterable[int] = range(1, value + 1)
    elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        ranks = [_coerce_rank(item) for item in value]
    else:
        raise ConfigurationError(f"threshold must be an integer or a list of integers, got {value!r}")

    resolved: set[Severity] = set()
    for rank in ranks:
        severity = Severity.from_rank(rank)
        if severity is not None:
            resolved.add(severity)
    return frozenset(resolved)


def parse_threshold(raw: str) -> int | list[int]:
    """Parse a textual threshold (``"5"`` or ``"1,2,8"``) from configuration.

    Examples
    --------
    >>> parse_threshold(" 4 ")
    4
    >>> parse_threshold("1, 2,8")
    [1, 2, 8]
    """

    text = raw.strip()
    if not text:
        raise ConfigurationError("threshold must not be empty")
    parts = [part.strip() for part in text.split(",")]
    try:
        numbers = [int(part) for part in parts]
    except ValueError as exc:
        raise ConfigurationError(f"threshold must be an integer or a comma separated list of integers, got {raw!r}") from exc
    if len(numbers) == 1 and "," not in text:
        return numbers[0]
    return numbers


def _coerce_rank(item: object) -> int:
    try:
        return int(item)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"threshold ranks must be integers, got {item!r}") from exc


__all__ = ["ThresholdValue", "parse_threshold", "resolve_threshold"]
