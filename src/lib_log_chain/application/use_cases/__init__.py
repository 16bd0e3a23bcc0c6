"""Application use cases: interpolation, dispatch and cache dumps."""

from __future__ import annotations

from .dispatch import DispatchResult, HandlerChain
from .dump import dump_cache
from .interpolate import Interpolator, replace_tokens

__all__ = ["DispatchResult", "HandlerChain", "Interpolator", "dump_cache", "replace_tokens"]
