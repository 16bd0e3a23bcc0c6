"""Call-site selection over an already captured call stack.

Purpose
-------
Find the frame that issued a log call so ``{file}``/``{line}`` placeholders
point at application code instead of the logger itself.

Contents
--------
* :class:`Frame` - file/line/function triple.
* :data:`INTERNAL_FUNCTIONS` - function names that belong to the logging path.
* :func:`select_caller_frame` - pure filter returning the first external frame.

System Role
-----------
The stack itself is provided by :class:`~lib_log_chain.application.ports.stack.StackInspectorPort`
adapters; this module only decides which frame counts as the caller, which
keeps the rule testable with hand-built frame lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

INTERNAL_FUNCTIONS: frozenset[str] = frozenset({"interpolate", "determine_file", "log", "log_message"})
"""Function names skipped while searching for the caller."""


@dataclass(slots=True, frozen=True)
class Frame:
    """One entry of a call stack, innermost frames first."""

    file: str
    line: int
    function: str


def select_caller_frame(
    frames: Iterable[Frame],
    *,
    internal_functions: frozenset[str] = INTERNAL_FUNCTIONS,
    internal_paths: tuple[str, ...] = (),
) -> Frame | None:
    """Return the first frame outside the logging path, or ``None``.

    Parameters
    ----------
    frames:
        Call stack ordered from the innermost frame outwards.
    internal_functions:
        Function names treated as part of the logging path.
    internal_paths:
        Directory prefixes whose frames are skipped regardless of function name.

    Examples
    --------
    >>> stack = [Frame("/pkg/logger.py", 10, "log"), Frame("/app/views.py", 42, "index")]
    >>> select_caller_frame(stack)
    Frame(file='/app/views.py', line=42, function='index')
    >>> select_caller_frame([Frame("/app/a.py", 1, "log_message")]) is None
    True
    """

    for frame in frames:
        if frame.function in internal_functions:
            continue
        if internal_paths and frame.file.startswith(internal_paths):
            continue
        return frame
    return None


__all__ = ["Frame", "INTERNAL_FUNCTIONS", "select_caller_frame"]
