"""Protocols connecting the application layer to its adapters."""

from __future__ import annotations

from .handler import HandlerFactory, HandlerPort
from .runtime_context import RuntimeContextPort
from .stack import StackInspectorPort

__all__ = [
    "HandlerFactory",
    "HandlerPort",
    "RuntimeContextPort",
    "StackInspectorPort",
]
