"""End-to-end retry scenarios with real waits."""

import threading
import time

import pytest

from retryloop import (
    BreakRetry,
    Interval,
    RetryAbortedError,
    RetryPolicy,
    exponential,
    run_with_retry,
)


class TestRealWaits:
    """Test timing behaviour without patched sleeps."""

    def test_fixed_interval_scenario(self, flaky, fixed_10ms_policy):
        """Fails twice, waits ~10ms twice, returns 42."""
        operation, calls = flaky(2)
        events = []

        started = time.monotonic()
        result = run_with_retry(fixed_10ms_policy).append_listener(events.append).supply(
            operation
        )
        elapsed = time.monotonic() - started

        assert result == 42
        assert calls["count"] == 3
        assert [e.last_wait_ms for e in events] == [10, 10]
        assert elapsed >= 0.02

    def test_budget_stops_new_attempts(self, flaky):
        """A wait as long as the budget leaves no room for a third attempt."""
        operation, calls = flaky(10, error=TimeoutError)
        policy = (
            RetryPolicy.builder()
            .interval(Interval.millis(60))
            .execution_timeout(Interval.millis(50))
            .build()
        )

        with pytest.raises(TimeoutError, match="failure 2"):
            run_with_retry(policy).run(operation)

        assert calls["count"] == 2

    def test_exponential_waits_are_nominal(self, flaky):
        """Backoff grows from the nominal waits reported to listeners."""
        operation, _ = flaky(3)
        events = []
        policy = (
            RetryPolicy.builder()
            .interval(exponential(Interval.millis(2)))
            .build()
        )

        run_with_retry(policy).append_listener(events.append).run(operation)

        assert [e.last_wait_ms for e in events] == [2, 4, 8]

    def test_abort_after_one_wait(self, flaky):
        operation, calls = flaky(1000)
        policy = RetryPolicy.builder().interval(Interval.millis(5)).build()
        waits = []

        def stop(event):
            waits.append(event.last_wait_ms)
            raise BreakRetry("stop now")

        with pytest.raises(RetryAbortedError) as exc_info:
            run_with_retry(policy).append_listener(stop).run(operation)

        assert waits == [5]
        assert calls["count"] == 1
        assert str(exc_info.value.cause) == "failure 1"


class TestLockReleasingWait:
    """Test that lock-releasing waits let other threads progress."""

    def test_other_thread_updates_shared_state_during_backoff(self):
        """The retried operation sees state another thread changed while we waited."""
        condition = threading.Condition()
        state = {"ready": False}

        def publisher():
            with condition:
                state["ready"] = True

        def operation():
            if not state["ready"]:
                raise BlockingIOError("resource not ready")
            return "ready"

        policy = (
            RetryPolicy.builder()
            .retry_for(BlockingIOError)
            .max_retry(5)
            .interval(Interval.millis(100))
            .should_release_lock(lambda e: isinstance(e, BlockingIOError), condition)
            .build()
        )

        with condition:
            thread = threading.Thread(target=publisher)
            thread.start()
            result = run_with_retry(policy).supply(operation)
        thread.join(timeout=1)

        assert result == "ready"
