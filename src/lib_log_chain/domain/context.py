"""Request-scoped data bound with :mod:`contextvars`.

Purpose
-------
Carry the current request's POST/GET payloads and session store so the
``{post_vars}``, ``{get_vars}`` and ``{session_vars}`` placeholders can be
expanded without reading global state.

Contents
--------
* :class:`RequestData` - immutable snapshot of one request's data.
* :class:`RequestBinder` - stack manager binding request data to the current
  execution context.

System Role
-----------
Host frameworks bind request data at the edge (middleware, request hooks); the
process runtime context adapter reads the innermost frame when a message is
interpolated. Threads and asyncio tasks each see their own stack.
"""

from __future__ import annotations

import contextvars
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterator

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze(values: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not values:
        return _EMPTY
    return MappingProxyType(dict(values))


@dataclass(slots=True, frozen=True)
class RequestData:
    """Immutable request payloads visible to the interpolator.

    Attributes
    ----------
    post, get:
        Form and query parameters of the request.
    session:
        Session store contents, or ``None`` when no session is active.
    """

    post: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    get: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    session: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "post", _freeze(self.post))
        object.__setattr__(self, "get", _freeze(self.get))
        if self.session is not None:
            object.__setattr__(self, "session", MappingProxyType(dict(self.session)))

    def merge(self, **overrides: Any) -> "RequestData":
        """Return a copy with the non-``None`` ``overrides`` applied."""

        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


class RequestBinder:
    """Manage :class:`RequestData` frames bound to the current execution flow."""

    _stack_var: contextvars.ContextVar[tuple[RequestData, ...]]

    def __init__(self) -> None:
        self._stack_var = contextvars.ContextVar("lib_log_chain_request_stack", default=())

    @contextmanager
    def bind(
        self,
        *,
        post: Mapping[str, Any] | None = None,
        get: Mapping[str, Any] | None = None,
        session: Mapping[str, Any] | None = None,
    ) -> Iterator[RequestData]:
        """Bind request data for the duration of the ``with`` block.

        Nested binds start from the enclosing frame and override only the
        payloads they pass.
        """

        stack = self._stack_var.get()
        base = stack[-1] if stack else None
        if base is None:
            data = RequestData(post=post or _EMPTY, get=get or _EMPTY, session=session)
        else:
            data = base.merge(post=post, get=get, session=session)

        token = self._stack_var.set(stack + (data,))
        try:
            yield data
        finally:
            self._stack_var.reset(token)

    def current(self) -> RequestData | None:
        """Return the request data bound to the current scope, if any."""

        stack = self._stack_var.get()
        return stack[-1] if stack else None

    def clear(self) -> None:
        """Remove all bound request data from the current context."""

        self._stack_var.set(())


__all__ = ["RequestBinder", "RequestData"]
