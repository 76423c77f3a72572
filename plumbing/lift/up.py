"""
Lifting callables into async context.

Functions for turning sync functions, async functions and functions that
raise into something that always returns an awaitable.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import resolve
from .._types import Async, MaybeAwaitable


def wrap[**P, T](func: Callable[P, MaybeAwaitable[T]]) -> Callable[P, Async[T]]:
    """
    Normalize func so that calling it always gives an awaitable.
    
    **When to use:** Anywhere a callable may be sync, async, or may raise,
    and the caller does not want to care which.
    
    - func returns a plain value -> awaitable resolves to that value
    - func returns an awaitable  -> awaitable adopts its outcome
    - func raises                -> awaitable raises the same exception
    
    Example:
        from plumbing import lift as L
        
        parse = L.wrap(int)
        await parse("42")    # 42
        await parse("nope")  # raises ValueError
    
    NOTE: Calling the result never raises. func itself runs when the
          returned coroutine is awaited.
    """
    @functools.wraps(func)
    async def normalized(*args: P.args, **kwargs: P.kwargs) -> T:
        return await resolve(func(*args, **kwargs))

    return normalized


def settle[**P, T](
    func: Callable[P, MaybeAwaitable[T]],
) -> Callable[P, LazyCoroResult[T, Exception]]:
    """
    Like wrap(), but the outcome is data: Ok(value) or Error(exception).
    
    **When to use:** When a failure has to be stored and inspected later
    instead of aborting the surrounding computation (retry history, for one).
    
    Example:
        from plumbing import lift as L
        
        outcome = await L.settle(int)("nope")()
        # Error(ValueError(...))
    
    NOTE: Only Exception subclasses are captured. Cancellation and other
          BaseExceptions propagate.
    """
    normalized = wrap(func)

    @functools.wraps(func)
    def settled(*args: P.args, **kwargs: P.kwargs) -> LazyCoroResult[T, Exception]:
        async def run() -> Result[T, Exception]:
            try:
                return Ok(await normalized(*args, **kwargs))
            except Exception as exc:
                return Error(exc)

        return LazyCoroResult(run)

    return settled


__all__ = (
    "wrap",
    "settle",
)
