"""
Composable continuations.

then_/catch_ are the point-free forms of "await and continue" and
"await and recover", usable as pipeline steps.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable

from .._types import Async, MaybeAwaitable
from .._helpers import resolve
from ..control.guard import must, preconditions
from .up import wrap

_is_handler = must(callable, "handler must be a function")


@preconditions(_is_handler)
def then_[A, B](
    handler: Callable[[A], MaybeAwaitable[B]],
) -> Callable[[MaybeAwaitable[A]], Async[B]]:
    """
    Resolve the input, then pass it to handler.
    
    Example:
        from plumbing import lift as L
        
        double = L.then_(lambda x: x * 2)
        await double(fetch_count())  # 2 * count
    
    **Grammar:** `L.then_(handler)(value)` reads as "then handle value"
    """
    step = wrap(handler)

    async def run(value: MaybeAwaitable[A]) -> B:
        return await step(await resolve(value))

    return run


@preconditions(_is_handler)
def catch_[A, B](
    handler: Callable[[Exception], MaybeAwaitable[B]],
) -> Callable[[MaybeAwaitable[A]], Async[A | B]]:
    """
    Resolve the input; if that raises, return handler(exception) instead.
    
    Successful values pass through unchanged.
    
    Example:
        from plumbing import lift as L
        
        safe = L.catch_(lambda exc: None)
        await safe(fetch_user(42))  # User or None
    """
    recover = wrap(handler)

    async def run(value: MaybeAwaitable[A]) -> A | B:
        try:
            return await resolve(value)
        except Exception as exc:
            return await recover(exc)

    return run


@preconditions(
    must(lambda name, obj: isinstance(name, str), "property must be a string"),
    must(lambda name, obj: obj is not None, "the object must be non-None"),
    must(lambda name, obj: callable(getattr(obj, name)), "the property must be a function"),
)
def bind_own(name: str, obj: object) -> Callable[..., typing.Any]:
    """
    Get obj.<name> bound to obj.
    
    Methods come back bound already; plain functions stored on the
    instance itself are bound here.
    """
    attr = getattr(obj, name)
    if isinstance(obj, types.ModuleType | type):
        return attr
    # A plain function in the instance __dict__ comes back unbound.
    if inspect.isfunction(attr) and getattr(obj, "__dict__", {}).get(name) is attr:
        return types.MethodType(attr, obj)
    return attr


__all__ = (
    "then_",
    "catch_",
    "bind_own",
)
