"""Runtime context backed by the process environment and the request binder.

Purpose
-------
Implement :class:`RuntimeContextPort` for real processes: environment
variables come from ``os.environ`` (or an injected mapping), request payloads
from the :class:`~lib_log_chain.domain.context.RequestBinder` frame bound to
the current execution context.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from lib_log_chain.application.ports.runtime_context import RuntimeContextPort
from lib_log_chain.domain.context import RequestBinder
from lib_log_chain.domain.paths import PathRoots

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class ProcessRuntimeContext(RuntimeContextPort):
    """Expose environment, request data and path roots to the interpolator.

    Parameters
    ----------
    binder:
        Request binder consulted for POST/GET/session data.
    environment:
        Runtime environment name returned for ``{env}``.
    roots:
        Directory roots used when shortening file names.
    environ:
        Mapping used for ``{env:NAME}`` lookups (defaults to ``os.environ``).

    Examples
    --------
    >>> ctx = ProcessRuntimeContext(binder=RequestBinder(), environment="testing", environ={"HOME": "/home/app"})
    >>> ctx.env_var("HOME"), ctx.env_var("MISSING"), ctx.session_data()
    ('/home/app', None, None)
    """

    def __init__(
        self,
        *,
        binder: RequestBinder,
        environment: str = "production",
        roots: PathRoots | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._binder = binder
        self._environment = environment
        self._roots = roots or PathRoots()
        self._environ = environ if environ is not None else os.environ

    def post_data(self) -> Mapping[str, Any]:
        data = self._binder.current()
        return data.post if data is not None else _EMPTY

    def get_data(self) -> Mapping[str, Any]:
        data = self._binder.current()
        return data.get if data is not None else _EMPTY

    def session_data(self) -> Mapping[str, Any] | None:
        data = self._binder.current()
        return data.session if data is not None else None

    def env_var(self, name: str) -> str | None:
        return self._environ.get(name)

    def environment(self) -> str:
        return self._environment

    def app_root(self) -> str | None:
        return self._roots.app_root

    def framework_root(self) -> str | None:
        return self._roots.framework_root

    def public_root(self) -> str | None:
        return self._roots.public_root


__all__ = ["ProcessRuntimeContext"]
