"""
Core type definitions for plumbing.

Aliases shared by the combinators: what a step may return, what a loop
test/operation looks like, and the tagged outcome of a single attempt.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# MaybeAwaitable = plain value or something that eventually produces one
type MaybeAwaitable[T] = T | Awaitable[T]

# Async = what every normalized callable returns
type Async[T] = Coroutine[typing.Any, typing.Any, T]

# Test = loop test, called with the results accumulated so far
type Test[T] = Callable[[list[T]], MaybeAwaitable[object]]

# Operation = loop body, called with the results accumulated so far
type Operation[T] = Callable[[list[T]], MaybeAwaitable[T]]

# Backoff = upcoming attempt index -> seconds to wait before it
type Backoff = Callable[[int], float]

# Outcome = settled result of one attempt: Ok(value) or Error(reason)
# NOTE: Error(...) replaces a "failed" marker object. A task that *returns*
#       None, False, 0 or an exception instance is still Ok.
type Outcome[T] = Result[T, Exception]

__all__ = (
    "MaybeAwaitable",
    "Async",
    "Test",
    "Operation",
    "Backoff",
    "Outcome",
)
