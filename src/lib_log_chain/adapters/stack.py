"""Stack inspector built on :mod:`inspect` and :mod:`traceback`.

Purpose
-------
Provide live call-stack frames and exception origins to the interpolator.

Contents
--------
* :data:`PACKAGE_ROOT` - directory prefix of this package; frames below it are
  part of the logging path.
* :class:`InspectStackInspector` - :class:`StackInspectorPort` implementation.
"""

from __future__ import annotations

import inspect
import os
import traceback
from collections.abc import Sequence

from lib_log_chain.application.ports.stack import StackInspectorPort
from lib_log_chain.domain.frames import Frame

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class InspectStackInspector(StackInspectorPort):
    """Read frames from the running interpreter."""

    def caller_frames(self) -> Sequence[Frame]:
        """Return the frames above this call, innermost first."""

        frames: list[Frame] = []
        current = inspect.currentframe()
        try:
            frame = current.f_back if current is not None else None
            while frame is not None:
                frames.append(Frame(file=frame.f_code.co_filename, line=frame.f_lineno, function=frame.f_code.co_name))
                frame = frame.f_back
        finally:
            del current
        return frames

    def exception_frame(self, exc: BaseException) -> Frame | None:
        """Return the innermost traceback entry of ``exc``; ``None`` if never raised."""

        if exc.__traceback__ is None:
            return None
        summary = traceback.extract_tb(exc.__traceback__)[-1]
        return Frame(file=summary.filename, line=summary.lineno or 0, function=summary.name)


__all__ = ["InspectStackInspector", "PACKAGE_ROOT"]
