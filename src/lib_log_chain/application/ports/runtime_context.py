"""Port exposing the ambient runtime values used during interpolation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RuntimeContextPort(Protocol):
    """Read-only access to request data, environment and directory roots."""

    def post_data(self) -> Mapping[str, Any]:
        """Return the current request's form parameters."""

    def get_data(self) -> Mapping[str, Any]:
        """Return the current request's query parameters."""

    def session_data(self) -> Mapping[str, Any] | None:
        """Return the active session store, or ``None`` without a session."""

    def env_var(self, name: str) -> str | None:
        """Return the environment variable ``name`` or ``None`` when unset."""

    def environment(self) -> str:
        """Return the runtime environment name (``production``, ``testing``...)."""

    def app_root(self) -> str | None:
        """Return the application root directory."""

    def framework_root(self) -> str | None:
        """Return the framework root directory."""

    def public_root(self) -> str | None:
        """Return the public/front-controller root directory."""


__all__ = ["RuntimeContextPort"]
