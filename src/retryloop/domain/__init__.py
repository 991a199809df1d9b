"""Domain layer - intervals, retry policies and exceptions."""

from .backoff import Backoff, exponential, fixed, linear
from .exceptions import BreakRetry, RetryAbortedError, RetryLoopError
from .interval import Interval, TimeUnit
from .policy import DEFAULT_POLICY, RetryPolicy, RetryPolicyBuilder

__all__ = [
    # Time
    "Interval",
    "TimeUnit",
    # Backoff
    "Backoff",
    "fixed",
    "linear",
    "exponential",
    # Policy
    "DEFAULT_POLICY",
    "RetryPolicy",
    "RetryPolicyBuilder",
    # Exceptions
    "RetryLoopError",
    "BreakRetry",
    "RetryAbortedError",
]
