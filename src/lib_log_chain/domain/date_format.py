"""Rendering of PHP-style date patterns such as ``"Y-m-d H:i:s"``.

Handlers receive the logger's date format as a pattern of single-letter codes
(``Y`` four-digit year, ``m`` zero-padded month, ``H`` 24h hour, ...). This
module renders such a pattern for a :class:`~datetime.datetime`. Characters
without a meaning are copied verbatim; a backslash escapes the next character.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

DEFAULT_DATE_FORMAT = "Y-m-d H:i:s"

_CODES: dict[str, Callable[[datetime], str]] = {
    "d": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: dt.strftime("%a"),
    "j": lambda dt: str(dt.day),
    "l": lambda dt: dt.strftime("%A"),
    "N": lambda dt: str(dt.isoweekday()),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    "F": lambda dt: dt.strftime("%B"),
    "M": lambda dt: dt.strftime("%b"),
    "m": lambda dt: f"{dt.month:02d}",
    "n": lambda dt: str(dt.month),
    "Y": lambda dt: f"{dt.year:04d}",
    "y": lambda dt: f"{dt.year % 100:02d}",
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "g": lambda dt: str(dt.hour % 12 or 12),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: f"{dt.hour % 12 or 12:02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    "e": lambda dt: dt.tzname() or "",
    "T": lambda dt: dt.tzname() or "",
    "O": lambda dt: dt.strftime("%z"),
    "P": lambda dt: _colon_offset(dt),
    "U": lambda dt: str(int(dt.timestamp())),
    "c": lambda dt: dt.isoformat(),
}


def format_date(pattern: str, when: datetime) -> str:
    """Render ``when`` according to the PHP-style ``pattern``.

    Examples
    --------
    >>> format_date("Y-m-d H:i:s", datetime(2025, 3, 7, 9, 5, 2))
    '2025-03-07 09:05:02'
    >>> format_date(r"j/n/y \\a\\t g:i A", datetime(2025, 3, 7, 21, 5))
    '7/3/25 at 9:05 PM'
    """

    parts: list[str] = []
    escaped = False
    for char in pattern:
        if escaped:
            parts.append(char)
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        render = _CODES.get(char)
        parts.append(render(when) if render is not None else char)
    return "".join(parts)


def _colon_offset(dt: datetime) -> str:
    raw = dt.strftime("%z")
    return f"{raw[:3]}:{raw[3:]}" if raw else ""


__all__ = ["DEFAULT_DATE_FORMAT", "format_date"]
