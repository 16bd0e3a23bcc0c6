"""Configuration inputs and their resolution into logger settings.

Purpose
-------
Validate :class:`LoggerConfig` values, apply environment overrides and freeze
the result into :class:`LoggerSettings` consumed by the composition root.

Environment overrides
---------------------
``LOG_THRESHOLD``
    ``"5"`` or ``"1,2,8"`` (see :func:`~lib_log_chain.domain.thresholds.parse_threshold`).
``LOG_DATE_FORMAT``
    PHP-style date pattern handed to handlers.
``LOG_DEBUG``
    Truthy values (``1``, ``true``, ``yes``, ``on``) enable the log cache.
``LOG_ENVIRONMENT``
    Runtime environment name for ``{env}``.
``LOG_APP_ROOT`` / ``LOG_FRAMEWORK_ROOT`` / ``LOG_PUBLIC_ROOT``
    Directory roots for path shortening.
``LOG_ISOLATE_HANDLER_FAULTS``
    Truthy values keep the chain running when a handler raises.

Environment values win over the values passed in code, matching how
deployments override packaged defaults.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from lib_log_chain.application.use_cases.dispatch import DiagnosticHook
from lib_log_chain.domain.date_format import DEFAULT_DATE_FORMAT
from lib_log_chain.domain.levels import Severity
from lib_log_chain.domain.paths import PathRoots
from lib_log_chain.domain.thresholds import parse_threshold, resolve_threshold
from lib_log_chain.errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(slots=True, frozen=True)
class LoggerConfig:
    """User-facing logger configuration.

    Attributes
    ----------
    handlers:
        Ordered mapping of handler id to option payload; dispatch follows
        this order. Must not be empty.
    threshold:
        Integer ceiling (ranks ``1..N``) or explicit list of ranks.
    date_format:
        PHP-style date pattern passed to every handler.
    debug:
        Enables the in-memory log cache.
    environment:
        Value of the ``{env}`` placeholder.
    app_root, framework_root, public_root:
        Directory roots rewritten as ``APPPATH/``, ``BASEPATH/``, ``FCPATH/``.
    isolate_handler_faults:
        Log and skip failing handlers instead of raising.
    diagnostic_hook:
        Optional callback receiving dispatch milestones.
    cache_size:
        Optional limit for the log cache (unbounded when ``None``).
    """

    handlers: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    threshold: int | Sequence[int] = 4
    date_format: str = DEFAULT_DATE_FORMAT
    debug: bool = False
    environment: str = "production"
    app_root: str | None = None
    framework_root: str | None = None
    public_root: str | None = None
    isolate_handler_faults: bool = False
    diagnostic_hook: DiagnosticHook = None
    cache_size: int | None = None


@dataclass(slots=True, frozen=True)
class LoggerSettings:
    """Resolved, immutable settings used to assemble a logger."""

    threshold: frozenset[Severity]
    date_format: str
    handlers: Mapping[str, Mapping[str, Any]]
    debug: bool
    environment: str
    roots: PathRoots
    isolate_handler_faults: bool
    diagnostic_hook: DiagnosticHook
    cache_size: int | None


def build_logger_settings(config: LoggerConfig, *, environ: Mapping[str, str] | None = None) -> LoggerSettings:
    """Validate ``config``, apply ``environ`` overrides and freeze the result."""

    env = environ or {}
    handlers = _validate_handlers(config.handlers)

    threshold_value: int | Sequence[int] = config.threshold
    raw_threshold = env.get("LOG_THRESHOLD")
    if raw_threshold is not None:
        threshold_value = parse_threshold(raw_threshold)

    date_format = env.get("LOG_DATE_FORMAT") or config.date_format
    if not date_format:
        raise ConfigurationError("date_format must not be empty")

    cache_size = config.cache_size
    if cache_size is not None and cache_size <= 0:
        raise ConfigurationError(f"cache_size must be positive, got {cache_size!r}")

    return LoggerSettings(
        threshold=resolve_threshold(threshold_value),
        date_format=date_format,
        handlers=handlers,
        debug=_env_bool(env, "LOG_DEBUG", config.debug),
        environment=env.get("LOG_ENVIRONMENT") or config.environment,
        roots=PathRoots(
            app_root=env.get("LOG_APP_ROOT") or config.app_root,
            framework_root=env.get("LOG_FRAMEWORK_ROOT") or config.framework_root,
            public_root=env.get("LOG_PUBLIC_ROOT") or config.public_root,
        ),
        isolate_handler_faults=_env_bool(env, "LOG_ISOLATE_HANDLER_FAULTS", config.isolate_handler_faults),
        diagnostic_hook=config.diagnostic_hook,
        cache_size=cache_size,
    )


def _validate_handlers(handlers: Any) -> Mapping[str, Mapping[str, Any]]:
    if not isinstance(handlers, Mapping) or not handlers:
        raise ConfigurationError("Logger configuration must provide at least one handler.")
    frozen: dict[str, Mapping[str, Any]] = {}
    for handler_id, options in handlers.items():
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise ConfigurationError(f"options for handler {handler_id!r} must be a mapping, got {type(options).__name__}")
        frozen[str(handler_id)] = MappingProxyType(dict(options))
    return MappingProxyType(frozen)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off), got {raw!r}")


__all__ = ["LoggerConfig", "LoggerSettings", "build_logger_settings"]
