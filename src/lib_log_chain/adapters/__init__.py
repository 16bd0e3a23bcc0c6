"""Adapter implementations for the logging chain ports."""

from __future__ import annotations

from .handlers import (
    BUILTIN_HANDLERS,
    BaseHandler,
    MemoryHandler,
    MemoryRecord,
    PythonLoggingHandler,
    RichConsoleHandler,
    default_registry,
)
from .runtime_context import ProcessRuntimeContext
from .stack import PACKAGE_ROOT, InspectStackInspector

__all__ = [
    "BUILTIN_HANDLERS",
    "BaseHandler",
    "InspectStackInspector",
    "MemoryHandler",
    "MemoryRecord",
    "PACKAGE_ROOT",
    "ProcessRuntimeContext",
    "PythonLoggingHandler",
    "RichConsoleHandler",
    "default_registry",
]
