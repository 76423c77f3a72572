"""Delay

Timer primitive used for backoff between retry attempts."""

from __future__ import annotations

import asyncio

from .._helpers import is_number
from .._types import Async
from ..control.guard import must, preconditions

@preconditions(must(is_number, "the duration must be a number"))
def delay(seconds: float) -> Async[None]:
    """
    Awaitable that completes with None after `seconds`.
    
    Negative durations are treated as zero.
    """
    return asyncio.sleep(max(seconds, 0.0))

__all__ = ("delay",)
