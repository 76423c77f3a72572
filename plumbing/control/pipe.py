"""Pipe combinator

Async left-to-right composition."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable

from .._helpers import resolve
from .._types import Async, MaybeAwaitable
from ..lift.up import wrap

def pipe(
    *steps: Callable[..., MaybeAwaitable[typing.Any]],
) -> Callable[..., Async[typing.Any]]:
    """
    Compose steps left to right; each step gets the previous step's result.
    
    Arguments of the returned function may be awaitables. They are all
    resolved concurrently (in no particular order) before the first step
    runs, and passed to it positionally. The first failing argument or step
    ends the pipeline with that exception; later steps never run.
    
    Example:
        total = pipe(lambda a, b: a + b, lambda x: x * 2)
        await total(fetch_a(), 3)
    """
    normalized = [wrap(step) for step in steps]

    async def run(*args: MaybeAwaitable[typing.Any]) -> typing.Any:
        resolved = await asyncio.gather(*(resolve(arg) for arg in args))
        if not normalized:
            return resolved[0] if resolved else None

        first, *rest = normalized
        result = await first(*resolved)
        for step in rest:
            result = await step(result)
        return result

    return run

__all__ = ("pipe",)
