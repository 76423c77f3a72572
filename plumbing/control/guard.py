"""
Guard combinators
=================

Precondition checks for plain callables. A guarded callable raises
PreconditionError synchronously, before the wrapped callable runs, so
misuse is visible at the call site and not only when an awaitable is
finally awaited.

Example:
    @preconditions(
        must(lambda seconds: seconds >= 0, "seconds must be >= 0"),
    )
    def sleep_for(seconds: float) -> Async[None]:
        return asyncio.sleep(seconds)
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import PreconditionError

DEFAULT_MESSAGE = "failed precondition"


@dataclass(frozen=True, slots=True)
class Condition:
    """
    One precondition: predicate over the call arguments + failure message.
    
    The predicate receives exactly the arguments of the guarded call.
    """

    predicate: Callable[..., object]
    message: str = DEFAULT_MESSAGE

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise TypeError("Condition.predicate must be callable")

    def holds(self, *args: typing.Any, **kwargs: typing.Any) -> bool:
        # A predicate that blows up on the given arguments rejects them.
        try:
            return bool(self.predicate(*args, **kwargs))
        except Exception:
            return False


def must(predicate: Callable[..., object], message: str = DEFAULT_MESSAGE) -> Condition:
    """Shorthand for Condition(predicate, message)."""
    return Condition(predicate, message)


def preconditions[**P, R](
    *conditions: Condition,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Decorator factory: check conditions in order before every call.
    
    Arguments that do not fit the wrapped callable's signature raise
    TypeError first, as a direct call would. Then the first failed
    condition raises PreconditionError with its message.
    Otherwise the wrapped callable is called and its result returned as is.
    Name, docstring and signature of the wrapped callable are preserved.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        try:
            signature: inspect.Signature | None = inspect.signature(func)
        except (TypeError, ValueError):
            signature = None

        @functools.wraps(func)
        def guarded(*args: P.args, **kwargs: P.kwargs) -> R:
            if signature is not None:
                signature.bind(*args, **kwargs)
            for condition in conditions:
                if not condition.holds(*args, **kwargs):
                    raise PreconditionError(condition.message or DEFAULT_MESSAGE)
            return func(*args, **kwargs)

        return guarded

    return decorator


__all__ = ("Condition", "DEFAULT_MESSAGE", "must", "preconditions")
