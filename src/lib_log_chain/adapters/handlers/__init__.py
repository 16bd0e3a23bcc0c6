"""Handlers shipped with the package and the default registry."""

from __future__ import annotations

from lib_log_chain.application.registry import HandlerRegistry

from ._base import BaseHandler
from .console import RichConsoleHandler
from .memory import MemoryHandler, MemoryRecord
from .python_logging import PythonLoggingHandler

BUILTIN_HANDLERS = {
    "console": RichConsoleHandler,
    "memory": MemoryHandler,
    "python": PythonLoggingHandler,
}
"""Handler ids available without registration."""


def default_registry() -> HandlerRegistry:
    """Return a fresh registry holding :data:`BUILTIN_HANDLERS`."""

    return HandlerRegistry(BUILTIN_HANDLERS)


__all__ = [
    "BUILTIN_HANDLERS",
    "BaseHandler",
    "MemoryHandler",
    "MemoryRecord",
    "PythonLoggingHandler",
    "RichConsoleHandler",
    "default_registry",
]
