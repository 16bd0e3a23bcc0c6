"""Dump format enumeration for log cache exports.

The cache can be rendered as plain text lines or as a JSON array; both formats
are requested by name from the CLI and the runtime façade.
"""

from __future__ import annotations

from enum import Enum


class DumpFormat(Enum):
    """Supported export targets for log cache dumps.

    Examples
    --------
    >>> DumpFormat.TEXT.value
    'text'
    >>> DumpFormat.JSON.name
    'JSON'
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_name(cls, name: str) -> "DumpFormat":
        """Return the matching enum member for a case-insensitive name.

        Examples
        --------
        >>> DumpFormat.from_name('  JSON ') is DumpFormat.JSON
        True
        >>> DumpFormat.from_name('yaml')
        Traceback (most recent call last):
        ...
        ValueError: Unsupported dump format: 'yaml'
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported dump format: {name!r}")


__all__ = ["DumpFormat"]
