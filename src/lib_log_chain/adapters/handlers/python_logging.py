"""Handler forwarding messages to the stdlib :mod:`logging` tree.

Registered as ``"python"``. The ``logger_name`` option selects the target
logger (default ``"lib_log_chain.messages"``); severities are mapped with
:meth:`Severity.to_python_level` and the original level name travels in the
record's ``severity`` attribute.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_log_chain.domain.levels import Severity

from ._base import BaseHandler

DEFAULT_LOGGER_NAME = "lib_log_chain.messages"


class PythonLoggingHandler(BaseHandler):
    """Bridge messages into :mod:`logging` so existing log setups receive them."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self._logger = logging.getLogger(str(self._options.get("logger_name") or DEFAULT_LOGGER_NAME))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write(self, level: Severity, message: str) -> None:
        self._logger.log(level.to_python_level(), message, extra={"severity": level.label})


__all__ = ["DEFAULT_LOGGER_NAME", "PythonLoggingHandler"]
