"""
Branch combinator
=================

Fan one input out to several callables and join their results.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable

from .._helpers import resolve
from .._types import Async, MaybeAwaitable
from ..lift.up import wrap


def branch[T](
    *branches: Callable[[T], MaybeAwaitable[typing.Any]],
) -> Callable[[MaybeAwaitable[T]], Async[list[typing.Any]]]:
    """
    Pass one value to every branch concurrently, collect results in order.
    
    The input may be an awaitable; it is resolved exactly once and every
    branch receives the resolved value. Result order follows branch order,
    not completion order. Fail-fast: the first branch exception propagates
    (only one, no aggregation); other branches are not cancelled.
    
    Example:
        stats = branch(count_rows, lambda df: df.columns)
        rows, columns = await stats(load_frame())
    """
    steps = [wrap(b) for b in branches]

    async def run(value: MaybeAwaitable[T]) -> list[typing.Any]:
        resolved = await resolve(value)
        return list(await asyncio.gather(*(step(resolved) for step in steps)))

    return run


__all__ = ("branch",)
