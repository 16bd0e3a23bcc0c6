"""Runtime façade wiring the logging chain for a whole process.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``log_message``,
``request_scope``, ``dump``, ``shutdown``) that host applications use instead
of assembling the inner layers themselves.

Contents
--------
* ``init`` - composition root installing the process-wide logger.
* ``get`` / ``log_message`` - access to the installed logger.
* ``request_scope`` - bind POST/GET/session data for the current request.
* ``dump`` - render the debug log cache.
* ``shutdown`` - drop the installed runtime.
* ``create_logger`` / :class:`Logger` / :class:`LoggerConfig` for callers that
  manage logger instances themselves.

System Role
-----------
Outer shell of the package: configuration and adapter selection happen here,
policy stays in :mod:`lib_log_chain.domain` and
:mod:`lib_log_chain.application`.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from lib_log_chain.application.registry import HandlerRegistry
from lib_log_chain.application.use_cases.dump import dump_cache
from lib_log_chain.domain import DumpFormat, RequestBinder, RequestData, Severity

from ._composition import create_logger
from ._logger import Logger
from ._settings import LoggerConfig, LoggerSettings, build_logger_settings
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    threshold: frozenset[Severity]
    handlers: tuple[str, ...]
    date_format: str
    environment: str
    debug: bool
    cached_entries: int


def init(
    config: LoggerConfig,
    *,
    registry: HandlerRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> Logger:
    """Build the process-wide logger from ``config`` and install it.

    Environment overrides (``LOG_THRESHOLD``, ``LOG_DEBUG``...) are applied
    before the logger is assembled. Raises :class:`RuntimeError` when a
    runtime is already active and :class:`~lib_log_chain.errors.ConfigurationError`
    when the configuration is unusable.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_chain.init() cannot be called twice without shutdown(); call lib_log_chain.shutdown() first",
        )

    env = os.environ if environ is None else environ
    settings = build_logger_settings(config, environ=env)
    binder = RequestBinder()
    logger = create_logger(settings, registry=registry, binder=binder, environ=env)
    set_runtime(LoggingRuntime(logger=logger, binder=binder, settings=settings))
    return logger


def get() -> Logger:
    """Return the logger installed by :func:`init`."""

    return current_runtime().logger


def log_message(level: Severity | str | int, message: Any, context: Mapping[str, Any] | None = None) -> bool:
    """Log through the process-wide logger; shorthand for ``get().log(...)``."""

    return current_runtime().logger.log(level, message, context)


@contextmanager
def request_scope(
    *,
    post: Mapping[str, Any] | None = None,
    get: Mapping[str, Any] | None = None,
    session: Mapping[str, Any] | None = None,
) -> Iterator[RequestData]:
    """Bind request data for ``{post_vars}``, ``{get_vars}`` and ``{session_vars}``.

    Nested scopes override only the payloads they pass.
    """

    runtime = current_runtime()
    with runtime.binder.bind(post=post, get=get, session=session) as data:
        yield data


def dump(
    *,
    dump_format: str | DumpFormat = DumpFormat.TEXT,
    levels: Iterable[Severity | str | int] | None = None,
) -> str:
    """Render the debug log cache as text or JSON.

    Raises :class:`RuntimeError` when the runtime was initialised without
    ``debug`` caching.
    """

    runtime = current_runtime()
    cache = runtime.logger.log_cache
    if cache is None:
        raise RuntimeError("log caching is disabled; initialise the runtime with debug=True to dump entries")
    fmt = dump_format if isinstance(dump_format, DumpFormat) else DumpFormat.from_name(dump_format)
    selected = frozenset(Severity.parse(level) for level in levels) if levels is not None else None
    return dump_cache(cache.snapshot(), dump_format=fmt, levels=selected)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    cache = runtime.logger.log_cache
    return RuntimeSnapshot(
        threshold=runtime.settings.threshold,
        handlers=runtime.logger.handler_ids,
        date_format=runtime.settings.date_format,
        environment=runtime.settings.environment,
        debug=cache is not None,
        cached_entries=len(cache) if cache is not None else 0,
    )


def shutdown() -> None:
    """Remove the process-wide logger; raises when none is installed."""

    current_runtime()
    clear_runtime()


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point."""

    from .. import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "Logger",
    "LoggerConfig",
    "LoggerSettings",
    "RuntimeSnapshot",
    "build_logger_settings",
    "create_logger",
    "dump",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "log_message",
    "request_scope",
    "shutdown",
    "summary_info",
]
