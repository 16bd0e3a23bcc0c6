"""Port for call-stack and exception origin inspection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from lib_log_chain.domain.frames import Frame


@runtime_checkable
class StackInspectorPort(Protocol):
    """Capture call-stack frames for call-site resolution."""

    def caller_frames(self) -> Sequence[Frame]:
        """Return the current call stack, innermost frame first."""

    def exception_frame(self, exc: BaseException) -> Frame | None:
        """Return the frame where ``exc`` was raised, if known."""


__all__ = ["StackInspectorPort"]
