"""
Retry combinators
=================

Bounded retry on top of the do-while loop: every attempt's outcome is
recorded as Ok/Error, the loop keeps going while the last one is an Error
and attempts are left.
"""

from __future__ import annotations

import logging
import random
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from kungfu import Error, Ok

from .._errors import PreconditionError
from .._helpers import is_number
from .._types import Async, Backoff, MaybeAwaitable, Outcome
from ..lift.up import settle
from ..time.delay import delay
from .guard import must, preconditions
from .loop import do_whilst

logger = logging.getLogger(__name__)


# Backoff schedules: attempt index (1 = first retry) -> seconds


def _fixed_backoff(delay_seconds: float) -> Backoff:
    """Same delay every retry."""
    def schedule(attempt: int) -> float:
        _ = attempt
        return delay_seconds
    return schedule


def _exponential_backoff(
    initial: float,
    multiplier: float = 2.0,
    max_delay: float = 60.0,
) -> Backoff:
    """Delay grows: initial * multiplier^(attempt - 1) (capped at max_delay)."""
    def schedule(attempt: int) -> float:
        return min(initial * (multiplier ** (attempt - 1)), max_delay)
    return schedule


def _jitter_backoff(
    base: float,
    jitter_factor: float = 0.5,
) -> Backoff:
    """Base delay ± random noise."""
    def schedule(attempt: int) -> float:
        _ = attempt
        jitter = random.uniform(-jitter_factor, jitter_factor)
        return max(0.0, base * (1.0 + jitter))
    return schedule


def _exponential_jitter_backoff(
    initial: float,
    multiplier: float = 2.0,
    max_delay: float = 60.0,
    jitter_factor: float = 0.3,
) -> Backoff:
    """Exponential growth + randomness."""
    exponential = _exponential_backoff(initial, multiplier, max_delay)

    def schedule(attempt: int) -> float:
        jitter = random.uniform(-jitter_factor, jitter_factor)
        return max(0.0, exponential(attempt) * (1.0 + jitter))
    return schedule


def _check_exponential(initial: float, multiplier: float, max_delay: float) -> None:
    if initial < 0.0:
        raise ValueError("initial must be >= 0")
    if multiplier < 1.0:
        raise ValueError("multiplier must be >= 1.0")
    if max_delay < initial:
        raise ValueError("max_delay must be >= initial")


def _check_jitter_factor(jitter_factor: float) -> None:
    if jitter_factor < 0.0 or jitter_factor > 1.0:
        raise ValueError("jitter_factor must be in [0, 1]")


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """
    Retry configuration.
    
    times: maximum number of attempts (the first attempt always runs)
    interval: optional backoff schedule, attempt index -> seconds. It is
              asked before every attempt except the first one.
    """

    times: int
    interval: Backoff | None = None

    def __post_init__(self) -> None:
        if not is_number(self.times):
            raise PreconditionError("times must be a number")
        if self.interval is not None and not callable(self.interval):
            raise PreconditionError("interval must be a function")

    @classmethod
    def fixed(cls, times: int, delay_seconds: float = 0.0) -> RetryPolicy:
        """Same delay every retry. Simple and predictable."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        return cls(times=times, interval=_fixed_backoff(delay_seconds))

    @classmethod
    def exponential(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
    ) -> RetryPolicy:
        """Back off more aggressively with each failure."""
        _check_exponential(initial, multiplier, max_delay)
        return cls(times=times, interval=_exponential_backoff(initial, multiplier, max_delay))

    @classmethod
    def jitter(
        cls,
        times: int,
        base: float = 1.0,
        jitter_factor: float = 0.5,
    ) -> RetryPolicy:
        """Randomized delays to avoid thundering herd."""
        if base < 0.0:
            raise ValueError("base must be >= 0")
        _check_jitter_factor(jitter_factor)
        return cls(times=times, interval=_jitter_backoff(base, jitter_factor))

    @classmethod
    def exponential_jitter(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        jitter_factor: float = 0.3,
    ) -> RetryPolicy:
        """Exponential growth + randomness."""
        _check_exponential(initial, multiplier, max_delay)
        _check_jitter_factor(jitter_factor)
        return cls(
            times=times,
            interval=_exponential_jitter_backoff(initial, multiplier, max_delay, jitter_factor),
        )


type PolicyLike = RetryPolicy | Mapping[str, typing.Any]


def _has_numeric_times(policy: PolicyLike, task: object) -> bool:
    _ = task
    if isinstance(policy, RetryPolicy):
        return True
    return isinstance(policy, Mapping) and is_number(policy.get("times"))


def _as_policy(policy: PolicyLike) -> RetryPolicy:
    if isinstance(policy, RetryPolicy):
        return policy
    return RetryPolicy(times=policy["times"], interval=policy.get("interval"))


def _is_last_failure[T](history: list[Outcome[T]]) -> bool:
    match history[-1]:
        case Error(_):
            return True
        case _:
            return False


async def _retry[T](policy: RetryPolicy, task: Callable[[], MaybeAwaitable[T]]) -> T:
    run_task = settle(task)

    async def attempt(history: list[Outcome[T]]) -> Outcome[T]:
        index = len(history)
        if policy.interval is not None and index > 0:
            seconds = policy.interval(index)
            logger.debug("retry(): waiting %ss before attempt %d", seconds, index + 1)
            await delay(seconds)

        outcome = await run_task()
        match outcome:
            case Error(e):
                logger.debug("retry(): attempt %d/%s failed: %r", index + 1, policy.times, e)
        return outcome

    def should_continue(history: list[Outcome[T]]) -> bool:
        return _is_last_failure(history) and len(history) < policy.times

    history = await do_whilst(attempt, should_continue)

    match history[-1]:
        case Ok(value):
            return value
        case Error(e):
            logger.debug("retry(): giving up after %d attempt(s)", len(history))
            raise e


@preconditions(
    must(_has_numeric_times, "times must be a number"),
    must(lambda policy, task: callable(task), "task must be a function"),
)
def retry[T](policy: PolicyLike, task: Callable[[], MaybeAwaitable[T]]) -> Async[T]:
    """
    Call task until it succeeds, at most policy.times times.
    
    task takes no arguments and may be sync, async, or raise. Resolves to
    the first successful value; once attempts run out, raises the last
    attempt's exception (earlier ones are dropped). Between attempts waits
    policy.interval(index) seconds, where index is the upcoming attempt
    (1 for the first retry). The first attempt never waits.
    
    policy may also be a mapping: {"times": 5, "interval": lambda i: 0.1 * i}.
    A bad policy raises PreconditionError right here, not when awaited.
    
    Example:
        user = await retry(RetryPolicy.exponential(times=3), lambda: fetch_user(42))
    """
    return _retry(_as_policy(policy), task)


__all__ = (
    "RetryPolicy",
    "retry",
)
