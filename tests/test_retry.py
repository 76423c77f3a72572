"""
Tests for retry and RetryPolicy
"""

import time

import pytest

from plumbing import PreconditionError, RetryPolicy, retry


class Failure(Exception):
    pass


class TestRetryValidation:
    """Bad arguments fail before any attempt."""

    def test_missing_arguments(self):
        with pytest.raises(TypeError):
            retry()

    def test_missing_task_is_not_reported_as_bad_times(self):
        with pytest.raises(TypeError):
            retry({"times": 3})

    def test_none_policy(self):
        with pytest.raises(PreconditionError, match="times must be a number"):
            retry(None, lambda: 1)

    def test_string_times(self):
        with pytest.raises(PreconditionError, match="times must be a number"):
            retry({"times": "5"}, lambda: 1)
        with pytest.raises(PreconditionError):
            RetryPolicy(times="5")

    def test_task_must_be_callable(self):
        with pytest.raises(PreconditionError, match="task must be a function"):
            retry({"times": 3}, 42)

    def test_no_attempt_on_bad_policy(self):
        calls = []
        with pytest.raises(PreconditionError):
            retry({"times": None}, lambda: calls.append(1))
        assert calls == []


class TestRetry:
    """Test retry()."""

    @pytest.mark.asyncio
    async def test_attempts_times_times_before_failing(self):
        count = 0

        async def task():
            nonlocal count
            count += 1
            raise Failure("failure")

        with pytest.raises(Failure, match="failure"):
            await retry({"times": 5}, task)
        assert count == 5

    @pytest.mark.asyncio
    async def test_stops_after_success(self):
        count = 0

        async def task():
            nonlocal count
            count += 1
            if count < 2:
                raise Failure("failure")
            return "success"

        assert await retry({"times": 5}, task) == "success"
        assert count == 2

    @pytest.mark.asyncio
    async def test_raises_last_failure(self):
        count = 0

        def task():
            nonlocal count
            count += 1
            raise Failure(f"attempt {count}")

        with pytest.raises(Failure, match="attempt 3"):
            await retry(RetryPolicy(times=3), task)

    @pytest.mark.asyncio
    async def test_works_with_sync_tasks(self):
        count = 0

        def task():
            nonlocal count
            count += 1
            raise ValueError("failure")

        with pytest.raises(ValueError, match="failure"):
            await retry({"times": 5}, task)
        assert count == 5

    @pytest.mark.asyncio
    async def test_falsy_success_is_not_failure(self):
        for value in (None, False, 0, Failure("returned")):
            count = 0

            def task():
                nonlocal count
                count += 1
                return value

            assert await retry({"times": 5}, task) is value
            assert count == 1

    @pytest.mark.asyncio
    async def test_single_attempt(self):
        count = 0

        def task():
            nonlocal count
            count += 1
            raise Failure("once")

        with pytest.raises(Failure):
            await retry({"times": 1}, task)
        assert count == 1

    @pytest.mark.asyncio
    async def test_delays_based_on_interval(self):
        def interval(i):
            return 0.01 * 2 ** i

        times = 5
        expected = sum(interval(i) for i in range(1, times))
        indexes = []

        def tracking_interval(i):
            indexes.append(i)
            return interval(i)

        async def task():
            raise Failure("failure")

        start = time.monotonic()
        with pytest.raises(Failure):
            await retry({"times": times, "interval": tracking_interval}, task)
        elapsed = time.monotonic() - start

        assert indexes == [1, 2, 3, 4]
        assert expected - 0.01 <= elapsed <= expected + 0.1

    @pytest.mark.asyncio
    async def test_first_attempt_never_waits(self):
        start = time.monotonic()
        result = await retry({"times": 3, "interval": lambda i: 10.0}, lambda: "ok")
        assert result == "ok"
        assert time.monotonic() - start < 0.5


class TestRetryPolicy:
    """Test RetryPolicy schedules."""

    def test_fixed(self):
        policy = RetryPolicy.fixed(times=3, delay_seconds=0.5)
        assert policy.times == 3
        assert [policy.interval(i) for i in (1, 2, 3)] == [0.5, 0.5, 0.5]

    def test_exponential(self):
        policy = RetryPolicy.exponential(times=5, initial=0.1, multiplier=2.0, max_delay=0.3)
        assert [policy.interval(i) for i in (1, 2, 3)] == pytest.approx([0.1, 0.2, 0.3])

    def test_jitter_bounds(self):
        policy = RetryPolicy.jitter(times=3, base=1.0, jitter_factor=0.5)
        for i in range(1, 20):
            assert 0.5 <= policy.interval(i) <= 1.5

    def test_exponential_jitter_bounds(self):
        policy = RetryPolicy.exponential_jitter(times=3, initial=1.0, jitter_factor=0.3)
        assert 1.4 <= policy.interval(2) <= 2.6

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            RetryPolicy.fixed(times=3, delay_seconds=-1)
        with pytest.raises(ValueError):
            RetryPolicy.exponential(times=3, multiplier=0.5)
        with pytest.raises(ValueError):
            RetryPolicy.jitter(times=3, jitter_factor=2)
        with pytest.raises(PreconditionError):
            RetryPolicy(times=3, interval=5)

    @pytest.mark.asyncio
    async def test_policy_drives_retry(self):
        count = 0

        def task():
            nonlocal count
            count += 1
            if count < 3:
                raise Failure("not yet")
            return count

        assert await retry(RetryPolicy.fixed(times=4, delay_seconds=0.001), task) == 3
