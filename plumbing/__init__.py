"""
Plumbing: async control-flow combinators.

Small building blocks for composing callables that may be sync, async,
or raise: normalize them, fan out, loop, pipe, and retry with backoff.

Architecture:
- lift:        wrap/settle normalize any callable into an async one
- concurrency: branch fans one value out to many callables
- control:     whilst/do_whilst loops, pipe, retry, precondition guards
- time:        delay, the timer behind retry backoff
"""

# Core types
from ._types import Async, Backoff, MaybeAwaitable, Operation, Outcome, Test

# Lift helpers
from . import lift
from .lift import bind_own, catch_, settle, then_, wrap

# Concurrency
from .concurrency import branch

# Control flow
from .control import (
    Condition,
    RetryPolicy,
    do_whilst,
    must,
    pipe,
    preconditions,
    retry,
    times,
    whilst,
)

# Time operations
from .time import delay

# Errors
from ._errors import PreconditionError

__all__ = (
    # Types
    "Async",
    "Backoff",
    "MaybeAwaitable",
    "Operation",
    "Outcome",
    "Test",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "wrap",
    "settle",
    "then_",
    "catch_",
    "bind_own",
    # Concurrency
    "branch",
    # Control
    "Condition",
    "RetryPolicy",
    "do_whilst",
    "must",
    "pipe",
    "preconditions",
    "retry",
    "times",
    "whilst",
    # Time
    "delay",
    # Errors
    "PreconditionError",
)
