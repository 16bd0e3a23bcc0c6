"""Closed registry mapping handler ids to handler factories.

Purpose
-------
Resolve the ids used in handler descriptors (``"console"``, ``"memory"``...)
to callables that build handlers from their option payloads.

Contents
--------
* :class:`HandlerRegistry` - mutable during setup, consulted at construction.

System Role
-----------
Loggers validate every configured id against the registry while they are
built, so a typo in configuration fails at startup instead of on the first
log call.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from lib_log_chain.application.ports.handler import HandlerFactory, HandlerPort
from lib_log_chain.errors import UnknownHandlerError


class HandlerRegistry:
    """Map handler ids to factories.

    Examples
    --------
    >>> class Null:
    ...     def __init__(self, options):
    ...         self.options = options
    ...     def can_handle(self, level):
    ...         return False
    ...     def set_date_format(self, date_format):
    ...         return self
    ...     def handle(self, level, message):
    ...         return True
    >>> registry = HandlerRegistry({"null": Null})
    >>> registry.create("null", {"a": 1}).options
    {'a': 1}
    >>> "null" in registry
    True
    """

    def __init__(self, factories: Mapping[str, HandlerFactory] | None = None) -> None:
        self._factories: dict[str, HandlerFactory] = dict(factories or {})

    def register(self, handler_id: str, factory: HandlerFactory) -> None:
        """Register ``factory`` under ``handler_id``, replacing earlier entries."""

        if not handler_id or not handler_id.strip():
            raise ValueError("handler_id must not be empty")
        self._factories[handler_id] = factory

    def resolve(self, handler_id: str) -> HandlerFactory:
        """Return the factory registered for ``handler_id``."""

        try:
            return self._factories[handler_id]
        except KeyError as exc:
            raise UnknownHandlerError(handler_id, self.ids()) from exc

    def validate(self, handler_ids: Iterable[str]) -> None:
        """Raise :class:`UnknownHandlerError` for the first unregistered id."""

        for handler_id in handler_ids:
            self.resolve(handler_id)

    def create(self, handler_id: str, options: Mapping[str, Any]) -> HandlerPort:
        """Build a handler for ``handler_id`` from its option payload."""

        return self.resolve(handler_id)(options)

    def ids(self) -> tuple[str, ...]:
        """Return the registered ids in registration order."""

        return tuple(self._factories)

    def copy(self) -> "HandlerRegistry":
        """Return an independent registry with the same entries."""

        return HandlerRegistry(self._factories)

    def __contains__(self, handler_id: object) -> bool:
        return handler_id in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)


__all__ = ["HandlerRegistry"]
