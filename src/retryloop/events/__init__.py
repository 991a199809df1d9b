"""Retry events and listeners."""

from .base import BaseRetryListener, FunctionListener, RetryListener, as_listener
from .logging import LoggingListener
from .models import RetryEvent

__all__ = [
    "RetryEvent",
    "BaseRetryListener",
    "FunctionListener",
    "LoggingListener",
    "RetryListener",
    "as_listener",
]
