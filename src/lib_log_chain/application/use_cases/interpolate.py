"""Placeholder expansion for log messages.

Purpose
-------
Replace ``{token}`` placeholders in a message with values from the call's
context mapping plus a handful of runtime-derived tokens.

Contents
--------
* :class:`Interpolator` - expands messages and resolves the call site.
* :func:`replace_tokens` - single-pass keyed replacement.

System Role
-----------
Invoked by the logger façade after the threshold check. Special tokens:

``{post_vars}`` / ``{get_vars}`` / ``{session_vars}``
    Pretty dumps of the current request's data (session only when active).
``{env}``
    Runtime environment name.
``{env:NAME}``
    Value of environment variable ``NAME`` or ``"n/a"``.
``{file}`` / ``{line}``
    Location of the code that issued the log call.
``{exception}``
    When the context value is an exception: ``"<message> <file>:<line>"``.

Only tokens with a replacement are touched; ``{unknown}`` stays verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from rich.pretty import pretty_repr

from lib_log_chain.application.ports.runtime_context import RuntimeContextPort
from lib_log_chain.application.ports.stack import StackInspectorPort
from lib_log_chain.domain.frames import INTERNAL_FUNCTIONS, select_caller_frame
from lib_log_chain.domain.paths import PathRoots, clean_path

_ENV_TOKEN = re.compile(r"\{(env:[^{}\s]+)\}")
_MISSING_ENV = "n/a"
_UNKNOWN = "unknown"


class Interpolator:
    """Expand message placeholders against context and runtime values."""

    def __init__(
        self,
        *,
        runtime_context: RuntimeContextPort,
        stack_inspector: StackInspectorPort,
        internal_paths: tuple[str, ...] = (),
        internal_functions: frozenset[str] = INTERNAL_FUNCTIONS,
    ) -> None:
        self._runtime = runtime_context
        self._stack = stack_inspector
        self._internal_paths = internal_paths
        self._internal_functions = internal_functions

    @property
    def roots(self) -> PathRoots:
        """Return the directory roots used to shorten file names."""

        return PathRoots(
            app_root=self._runtime.app_root(),
            framework_root=self._runtime.framework_root(),
            public_root=self._runtime.public_root(),
        )

    def interpolate(self, message: Any, context: Mapping[str, Any] | None = None) -> Any:
        """Return ``message`` with every known placeholder replaced.

        Non-string messages are returned unchanged.
        """

        if not isinstance(message, str):
            return message

        replacements: dict[str, Any] = {}
        for key, value in (context or {}).items():
            if key == "exception" and isinstance(value, BaseException):
                value = self.describe_exception(value)
            replacements["{" + str(key) + "}"] = value

        replacements["{post_vars}"] = "POST: " + _dump(self._runtime.post_data())
        replacements["{get_vars}"] = "GET: " + _dump(self._runtime.get_data())
        replacements["{env}"] = self._runtime.environment()

        if "{file}" in message:
            file, line = self.determine_file()
            replacements["{file}"] = file
            replacements["{line}"] = line

        if "env:" in message:
            for match in _ENV_TOKEN.findall(message):
                name = match[len("env:"):]
                value = self._runtime.env_var(name)
                replacements["{" + match + "}"] = _MISSING_ENV if value is None else value

        session = self._runtime.session_data()
        if session is not None:
            replacements["{session_vars}"] = "SESSION: " + _dump(session)

        return replace_tokens(message, replacements)

    def determine_file(self) -> tuple[str, int | str]:
        """Return ``(file, line)`` of the first frame outside the logging path."""

        frame = select_caller_frame(
            self._stack.caller_frames(),
            internal_functions=self._internal_functions,
            internal_paths=self._internal_paths,
        )
        if frame is None:
            return _UNKNOWN, _UNKNOWN
        return frame.file, frame.line

    def describe_exception(self, exc: BaseException) -> str:
        """Render ``exc`` as ``"<message> <cleaned file>:<line>"``."""

        origin = self._stack.exception_frame(exc)
        if origin is None:
            return f"{exc} {_UNKNOWN}:{_UNKNOWN}"
        return f"{exc} {clean_path(origin.file, self.roots)}:{origin.line}"


def replace_tokens(message: str, replacements: Mapping[str, Any]) -> str:
    """Replace every key of ``replacements`` found in ``message`` in one pass.

    Longer keys win over shorter ones starting at the same position and
    inserted text is never scanned again.

    Examples
    --------
    >>> replace_tokens("{a} {ab} {zz}", {"{a}": "{ab}", "{ab}": 2})
    '{ab} 2 {zz}'
    """

    if not replacements:
        return message
    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: _as_text(replacements[match.group(0)]), message)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _dump(values: Mapping[str, Any]) -> str:
    return pretty_repr(dict(values))


__all__ = ["Interpolator", "replace_tokens"]
