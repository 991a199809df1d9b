"""Retry policy: which failures to retry, how often, how long and how to wait.

Policies are immutable and meant to be shared. Derive variants through
`RetryPolicyBuilder`, which copies the policy one field at a time and hands
back the same builder when a setter would not change anything.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Union

from .backoff import Backoff, fixed
from .interval import Interval

FailurePredicate = Callable[[BaseException], bool]
RetryFor = Union[
    type[BaseException], tuple[type[BaseException], ...], FailurePredicate
]


def _never(failure: BaseException) -> bool:
    return False


def _always(failure: BaseException) -> bool:
    return True


_KEEP_LOCK: Any = object()


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration.

    Attributes:
        retry_for: Exception class, tuple of classes, or predicate deciding
            which failures are retryable
        max_attempts: Total attempts allowed (None = unlimited)
        backoff: Maps the previous nominal wait in ms to the next Interval
            (None, or a None result, means retry immediately)
        execution_timeout_ms: No new attempt starts once this much time has
            elapsed since the first one (None = unlimited)
        release_lock: Predicate deciding, per failure, whether the wait should
            release `lock` instead of sleeping while holding it
        lock: Condition held by the caller that lock-releasing waits release;
            without one a private monitor is used
    """

    retry_for: RetryFor = Exception
    max_attempts: int | None = None
    backoff: Backoff | None = None
    execution_timeout_ms: int | None = None
    release_lock: FailurePredicate = _never
    lock: threading.Condition | None = None
    _monitor: threading.Condition = field(
        default_factory=threading.Condition, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError("max_attempts must be positive or None")
        if self.execution_timeout_ms is not None and self.execution_timeout_ms <= 0:
            raise ValueError("execution_timeout_ms must be positive or None")

    @classmethod
    def builder(cls) -> RetryPolicyBuilder:
        return RetryPolicyBuilder()

    def to_builder(self) -> RetryPolicyBuilder:
        return RetryPolicyBuilder(self)

    def is_retryable(self, failure: BaseException) -> bool:
        """Check whether `failure` matches this policy's retryable kinds."""
        kind = self.retry_for
        if isinstance(kind, (type, tuple)):
            return isinstance(failure, kind)
        return bool(kind(failure))

    def can_continue(self, failed_attempts: int, elapsed_ms: int) -> bool:
        """Check whether another attempt may start.

        Args:
            failed_attempts: Attempts already made, all of which failed
            elapsed_ms: Time since the first attempt started

        Returns:
            True if both the attempt cap and the time budget allow it
        """
        return self._within_attempts(failed_attempts) and self._within_budget(
            elapsed_ms
        )

    def _within_attempts(self, failed_attempts: int) -> bool:
        return self.max_attempts is None or failed_attempts < self.max_attempts

    def _within_budget(self, elapsed_ms: int) -> bool:
        return self.execution_timeout_ms is None or elapsed_ms < self.execution_timeout_ms

    def next_wait(self, previous_wait_ms: int, failure: BaseException) -> int:
        """Block for the next backoff interval and return its nominal length.

        The returned value is what the backoff function asked for, even when
        a lock-releasing wait was woken early, so that the next backoff call
        works from nominal rather than measured waits.

        Returns:
            Milliseconds waited (0 when no wait was configured)
        """
        if self.backoff is None:
            return 0
        interval = self.backoff(previous_wait_ms)
        if interval is None:
            return 0

        if self.release_lock(failure):
            self._wait_releasing_lock(interval.to_seconds())
        else:
            time.sleep(interval.to_seconds())
        return interval.to_millis()

    def _wait_releasing_lock(self, seconds: float) -> None:
        # Condition.wait releases the lock only while the caller holds it;
        # an unheld caller-supplied lock raises RuntimeError.
        if self.lock is not None:
            self.lock.wait(seconds)
            return
        with self._monitor:
            self._monitor.wait(seconds)

    def wake_waiters(self) -> None:
        """End early every lock-releasing wait on the private monitor."""
        with self._monitor:
            self._monitor.notify_all()


DEFAULT_POLICY = RetryPolicy()


class RetryPolicyBuilder:
    """Derives RetryPolicy instances one field at a time.

    Every setter returns a new builder, or `self` when the requested value is
    already in place.

    Example:
        >>> policy = (
        ...     RetryPolicy.builder()
        ...     .retry_for(ConnectionError)
        ...     .max_retry(5)
        ...     .interval(Interval.millis(200))
        ...     .build()
        ... )
    """

    def __init__(self, policy: RetryPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    def _derive(self, **changes) -> RetryPolicyBuilder:
        return RetryPolicyBuilder(replace(self._policy, **changes))

    def retry_for(self, kind: RetryFor | None) -> RetryPolicyBuilder:
        """Retry only failures matching `kind`; None keeps the current filter."""
        if kind is None or kind == self._policy.retry_for:
            return self
        return self._derive(retry_for=kind)

    def max_retry(self, count: int) -> RetryPolicyBuilder:
        """Cap total attempts at `count`; zero or negative removes the cap."""
        current = self._policy.max_attempts
        if count <= 0:
            return self if current is None else self._derive(max_attempts=None)
        if count == current:
            return self
        return self._derive(max_attempts=count)

    def interval(self, wait: Interval | Backoff | None) -> RetryPolicyBuilder:
        """Set the wait between attempts.

        Accepts a fixed Interval, a backoff function, or None to retry
        immediately.
        """
        current = self._policy.backoff
        if wait is None:
            return self if current is None else self._derive(backoff=None)
        if isinstance(wait, Interval):
            if getattr(current, "interval", None) == wait:
                return self
            return self._derive(backoff=fixed(wait))
        if wait is current:
            return self
        return self._derive(backoff=wait)

    def execution_timeout(self, budget: Interval | None) -> RetryPolicyBuilder:
        """Stop starting new attempts once `budget` has elapsed."""
        current = self._policy.execution_timeout_ms
        if budget is None:
            return self if current is None else self._derive(execution_timeout_ms=None)
        budget_ms = budget.to_millis()
        if budget_ms == current:
            return self
        return self._derive(execution_timeout_ms=budget_ms)

    def should_release_lock(
        self,
        indicator: bool | FailurePredicate | None,
        lock: threading.Condition | None = _KEEP_LOCK,
    ) -> RetryPolicyBuilder:
        """Choose, per failure, whether waits release `lock`.

        Args:
            indicator: True/False for every failure, a predicate over the
                failure, or None for never
            lock: Condition the caller holds during the retry loop; when
                omitted the current lock is kept
        """
        if indicator is None or indicator is False:
            predicate = _never
        elif indicator is True:
            predicate = _always
        else:
            predicate = indicator

        if lock is _KEEP_LOCK:
            lock = self._policy.lock

        if predicate is self._policy.release_lock and lock is self._policy.lock:
            return self
        return self._derive(release_lock=predicate, lock=lock)

    def build(self) -> RetryPolicy:
        return self._policy
