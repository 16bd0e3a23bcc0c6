"""Use case delivering one interpolated message through the handler chain.

Purpose
-------
Walk the configured handler descriptors in declaration order, skip handlers
that do not accept the level and stop as soon as one handler asks for it.

Contents
--------
* :class:`DispatchResult` - what happened to one message.
* :class:`HandlerChain` - ordered dispatcher built from descriptors.
* :func:`build_diagnostic_emitter` - wraps the optional diagnostic hook.

System Role
-----------
Application-layer orchestrator invoked by the logger façade for every message
that passed the threshold check. Handlers are built on first use through the
:class:`~lib_log_chain.application.registry.HandlerRegistry` and reused for
later messages of the same chain.

Handler exceptions propagate by default. With ``isolate_faults=True`` a failing
handler is reported through :mod:`logging` and the diagnostic hook, then the
chain moves on to the next handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from threading import Lock
from types import MappingProxyType
from typing import Any

from lib_log_chain.application.ports.handler import HandlerPort
from lib_log_chain.application.registry import HandlerRegistry
from lib_log_chain.domain.date_format import DEFAULT_DATE_FORMAT
from lib_log_chain.domain.levels import Severity
from lib_log_chain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


@dataclass(slots=True, frozen=True)
class DispatchResult:
    """Outcome of dispatching one message.

    Attributes
    ----------
    invoked:
        Handler ids whose ``handle`` method ran, in order.
    stopped_by:
        Id of the handler that returned ``False``, if any.
    failed:
        Handler ids that raised while ``isolate_faults`` was enabled.
    """

    invoked: tuple[str, ...] = ()
    stopped_by: str | None = None
    failed: tuple[str, ...] = ()


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable forwarding milestones to ``diagnostic`` when provided.

    Errors raised by the hook itself are logged and swallowed so diagnostics
    never break message delivery.
    """

    if diagnostic is None:
        return lambda name, payload: None

    def emit(name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(name, payload)
        except Exception:  # noqa: BLE001
            logger.warning("diagnostic hook failed for %s", name, exc_info=True)

    return emit


class HandlerChain:
    """Ordered chain of handlers built from descriptors."""

    def __init__(
        self,
        descriptors: Mapping[str, Mapping[str, Any]],
        *,
        registry: HandlerRegistry,
        date_format: str = DEFAULT_DATE_FORMAT,
        isolate_faults: bool = False,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        if not isinstance(descriptors, Mapping) or not descriptors:
            raise ConfigurationError("Logger configuration must provide at least one handler.")
        registry.validate(descriptors)
        self._descriptors: Mapping[str, Mapping[str, Any]] = MappingProxyType(
            {handler_id: MappingProxyType(dict(options or {})) for handler_id, options in descriptors.items()}
        )
        self._registry = registry
        self._date_format = date_format
        self._isolate_faults = isolate_faults
        self._emit = build_diagnostic_emitter(diagnostic)
        self._instances: dict[str, HandlerPort] = {}
        self._lock = Lock()

    @property
    def handler_ids(self) -> tuple[str, ...]:
        """Return the configured handler ids in dispatch order."""

        return tuple(self._descriptors)

    @property
    def date_format(self) -> str:
        """Return the date pattern handed to every handler."""

        return self._date_format

    def handler(self, handler_id: str) -> HandlerPort:
        """Return the handler for ``handler_id``, building it on first use."""

        with self._lock:
            instance = self._instances.get(handler_id)
            if instance is None:
                instance = self._registry.create(handler_id, self._descriptors[handler_id])
                self._instances[handler_id] = instance
            return instance

    def dispatch(self, level: Severity, message: str) -> DispatchResult:
        """Deliver ``message`` to every accepting handler until one stops the chain."""

        invoked: list[str] = []
        failed: list[str] = []
        for handler_id in self._descriptors:
            try:
                handler = self.handler(handler_id)
                if not handler.can_handle(level):
                    continue
                invoked.append(handler_id)
                keep_going = handler.set_date_format(self._date_format).handle(level, message)
            except Exception as exc:
                if not self._isolate_faults:
                    raise
                failed.append(handler_id)
                logger.exception("handler %r failed while writing a %s message", handler_id, level.label)
                self._emit("handler_failed", {"handler": handler_id, "level": level.label, "error": repr(exc)})
                continue
            if not keep_going:
                self._emit("chain_stopped", {"handler": handler_id, "level": level.label})
                return DispatchResult(invoked=tuple(invoked), stopped_by=handler_id, failed=tuple(failed))
        return DispatchResult(invoked=tuple(invoked), failed=tuple(failed))


__all__ = ["DiagnosticHook", "DispatchResult", "HandlerChain", "build_diagnostic_emitter"]
