"""retryloop - run unreliable operations under an immutable retry policy.

Example:
    >>> from retryloop import Interval, RetryPolicy, run_with_retry
    >>> policy = (
    ...     RetryPolicy.builder()
    ...     .retry_for(ConnectionError)
    ...     .max_retry(3)
    ...     .interval(Interval.millis(250))
    ...     .build()
    ... )
    >>> run_with_retry(policy).supply(fetch_prices)
"""

from .domain import (
    DEFAULT_POLICY,
    Backoff,
    BreakRetry,
    Interval,
    RetryAbortedError,
    RetryLoopError,
    RetryPolicy,
    RetryPolicyBuilder,
    TimeUnit,
    exponential,
    fixed,
    linear,
)
from .events import (
    BaseRetryListener,
    FunctionListener,
    LoggingListener,
    RetryEvent,
)
from .execution import (
    ParameterizedRetryRunner,
    RetryingContext,
    RetryRunner,
    run,
    run_with_retry,
    supply,
)

__all__ = [
    # Entry points
    "run_with_retry",
    "run",
    "supply",
    "RetryRunner",
    "ParameterizedRetryRunner",
    "RetryingContext",
    # Policy
    "DEFAULT_POLICY",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "Interval",
    "TimeUnit",
    "Backoff",
    "fixed",
    "linear",
    "exponential",
    # Events
    "RetryEvent",
    "BaseRetryListener",
    "FunctionListener",
    "LoggingListener",
    # Exceptions
    "RetryLoopError",
    "BreakRetry",
    "RetryAbortedError",
]
