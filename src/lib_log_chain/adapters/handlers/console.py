"""Rich-powered console handler.

Purpose
-------
Print messages to the terminal with a per-level colour, in the classic
``LEVEL - date --> message`` line layout.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleHandler` - registered as ``"console"``.

Options
-------
``console``
    Pre-built :class:`rich.console.Console` (tests use a recording console).
``stderr`` / ``force_color`` / ``no_color``
    Passed to the console the handler builds when none is given.
``styles``
    Mapping of level name to Rich style overriding the defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console

from lib_log_chain.domain.levels import Severity

from ._base import BaseHandler

_STYLE_MAP: Mapping[Severity, str] = {
    Severity.EMERGENCY: "bold white on red",
    Severity.ALERT: "bold red",
    Severity.CRITICAL: "red",
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.NOTICE: "cyan",
    Severity.INFO: "green",
    Severity.DEBUG: "dim",
}

#: Default Rich styles keyed by :class:`Severity`.


class RichConsoleHandler(BaseHandler):
    """Render messages with Rich, honouring colour overrides."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        opts = self._options
        console = opts.get("console")
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                stderr=self.flag("stderr"),
                force_terminal=True if self.flag("force_color") else None,
                no_color=self.flag("no_color"),
            )
        self._no_color = self.flag("no_color")
        merged = dict(_STYLE_MAP)
        for key, value in (opts.get("styles") or {}).items():
            merged[Severity.parse(key)] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        """Return the Rich console messages are printed to."""

        return self._console

    def write(self, level: Severity, message: str) -> None:
        """Print one formatted line for ``message``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> handler = RichConsoleHandler({"console": console})
        >>> handler.set_date_format("Y").handle(Severity.INFO, "ready [ok]")
        True
        >>> text = console.export_text()
        >>> "INFO - " in text and "--> ready [ok]" in text
        True
        """

        style = "" if self._no_color else self._style_map.get(level, "")
        self._console.print(self.format_line(level, message), style=style, markup=False, highlight=False)

    def format_line(self, level: Severity, message: str) -> str:
        """Return the console line for ``message`` without styling."""

        return f"{level.name} - {self.timestamp()} --> {message}"


__all__ = ["RichConsoleHandler"]
