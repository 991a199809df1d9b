"""Execution - the attempt loop and the runners that drive it."""

from .context import RetryingContext
from .runner import (
    ParameterizedRetryRunner,
    RetryRunner,
    run,
    run_with_retry,
    supply,
)

__all__ = [
    "RetryingContext",
    "RetryRunner",
    "ParameterizedRetryRunner",
    "run_with_retry",
    "run",
    "supply",
]
