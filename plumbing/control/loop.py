"""Loop combinators

whilst / do_whilst drive a test + operation cycle and collect every
operation result, in order, into a list."""

from __future__ import annotations

import logging

from .._types import Async, Operation, Test
from ..lift.up import wrap

logger = logging.getLogger(__name__)

async def whilst[T](test: Test[T], operation: Operation[T]) -> list[T]:
    """
    Run operation while test is truthy. Resolves to all operation results.
    
    Both callables receive the results collected so far and may be sync,
    async, or raise. The first exception from either one ends the loop and
    propagates; results collected up to that point are dropped.
    
    Iterations never overlap: the next test starts only after the previous
    operation has settled.
    """
    check = wrap(test)
    step = wrap(operation)

    results: list[T] = []
    while await check(results):
        # New list every round, a callee may hold on to the previous one.
        results = [*results, await step(results)]

    logger.debug("whilst(): done after %d iteration(s)", len(results))
    return results

def do_whilst[T](operation: Operation[T], test: Test[T]) -> Async[list[T]]:
    """
    Like whilst(), but operation always runs at least once.
    
    test is consulted only from the second round on.
    """
    check = wrap(test)

    async def first_round_or_test(results: list[T]) -> object:
        return not results or await check(results)

    return whilst(first_round_or_test, operation)

def times[T](n: int, operation: Operation[T]) -> Async[list[T]]:
    """Run operation n times in a row, stopping on the first failure."""
    return whilst(lambda results: len(results) < n, operation)

__all__ = ("whilst", "do_whilst", "times")
