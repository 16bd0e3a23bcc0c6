from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_chain.runtime import _state


@pytest.fixture
def record_console() -> Console:
    """Recording Rich console for assertions on rendered output."""

    return Console(file=StringIO(), record=True, width=120, force_terminal=False, color_system=None)


@pytest.fixture(autouse=True)
def _clear_runtime() -> Iterator[None]:
    """Keep the process-wide runtime from leaking between tests."""

    _state.clear_runtime()
    yield
    _state.clear_runtime()
