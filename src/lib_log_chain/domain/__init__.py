"""Domain entities and value objects used by the logging chain."""

from __future__ import annotations

from .context import RequestBinder, RequestData
from .date_format import DEFAULT_DATE_FORMAT, format_date
from .dump import DumpFormat
from .entries import LogEntry
from .frames import INTERNAL_FUNCTIONS, Frame, select_caller_frame
from .levels import Severity
from .log_cache import LogCache
from .paths import PathRoots, clean_path
from .thresholds import parse_threshold, resolve_threshold

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DumpFormat",
    "Frame",
    "INTERNAL_FUNCTIONS",
    "LogCache",
    "LogEntry",
    "PathRoots",
    "RequestBinder",
    "RequestData",
    "Severity",
    "clean_path",
    "format_date",
    "parse_threshold",
    "resolve_threshold",
    "select_caller_frame",
]
