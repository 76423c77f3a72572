"""Internal helpers for plumbing.

Small functions used across several combinator modules."""

from __future__ import annotations

import inspect

from ._types import MaybeAwaitable

async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """
    Await value if it is awaitable, otherwise return it as is.
    
    This is what lets every combinator accept "value or future" uniformly.
    """
    if inspect.isawaitable(value):
        return await value
    return value

def is_number(value: object) -> bool:
    """int or float, but not bool."""
    return isinstance(value, int | float) and not isinstance(value, bool)

__all__ = (
    "resolve",
    "is_number",
)
