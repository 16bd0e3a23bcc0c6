"""Composition root turning configuration into a wired :class:`Logger`.

Purpose
-------
Resolve settings, pick adapters (runtime context, stack inspector, handler
registry) and assemble the threshold set, interpolator, cache and handler
chain. Callers may inject any collaborator; tests use this to supply fakes.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from lib_log_chain.adapters.handlers import default_registry
from lib_log_chain.adapters.runtime_context import ProcessRuntimeContext
from lib_log_chain.adapters.stack import PACKAGE_ROOT, InspectStackInspector
from lib_log_chain.application.ports import RuntimeContextPort, StackInspectorPort
from lib_log_chain.application.registry import HandlerRegistry
from lib_log_chain.application.use_cases.dispatch import HandlerChain
from lib_log_chain.application.use_cases.interpolate import Interpolator
from lib_log_chain.domain.context import RequestBinder
from lib_log_chain.domain.log_cache import LogCache

from ._logger import Logger
from ._settings import LoggerConfig, LoggerSettings, build_logger_settings


def create_logger(
    config: LoggerConfig | LoggerSettings,
    *,
    registry: HandlerRegistry | None = None,
    binder: RequestBinder | None = None,
    runtime_context: RuntimeContextPort | None = None,
    stack_inspector: StackInspectorPort | None = None,
    environ: Mapping[str, str] | None = None,
) -> Logger:
    """Build a :class:`Logger` from ``config``.

    Parameters
    ----------
    config:
        :class:`LoggerConfig` (environment overrides are applied) or already
        resolved :class:`LoggerSettings`.
    registry:
        Handler registry; defaults to the built-in handlers.
    binder:
        Request binder read by the default runtime context.
    runtime_context, stack_inspector:
        Adapters replacing the process-backed defaults.
    environ:
        Environment mapping for overrides and ``{env:NAME}`` lookups
        (defaults to ``os.environ``).

    Raises
    ------
    ConfigurationError
        When no handler is configured, a handler id is unknown or a setting
        is malformed.
    """

    env = os.environ if environ is None else environ
    settings = config if isinstance(config, LoggerSettings) else build_logger_settings(config, environ=env)

    chain = HandlerChain(
        settings.handlers,
        registry=registry if registry is not None else default_registry(),
        date_format=settings.date_format,
        isolate_faults=settings.isolate_handler_faults,
        diagnostic=settings.diagnostic_hook,
    )
    context = runtime_context if runtime_context is not None else ProcessRuntimeContext(
        binder=binder if binder is not None else RequestBinder(),
        environment=settings.environment,
        roots=settings.roots,
        environ=env,
    )
    interpolator = Interpolator(
        runtime_context=context,
        stack_inspector=stack_inspector if stack_inspector is not None else InspectStackInspector(),
        internal_paths=(PACKAGE_ROOT,),
    )
    cache = LogCache(max_entries=settings.cache_size) if settings.debug else None
    return Logger(threshold=settings.threshold, chain=chain, interpolator=interpolator, cache=cache)


__all__ = ["create_logger"]
