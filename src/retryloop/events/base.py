"""Listener interface for retry notifications."""

from abc import ABC, abstractmethod
from typing import Callable, Union

from .models import RetryEvent


class BaseRetryListener(ABC):
    """Abstract base class for retry listeners.

    Listeners are called synchronously, in registration order, between a
    failed attempt and the next one. Raising `BreakRetry` stops the loop;
    any other exception is ignored by the engine.
    """

    @abstractmethod
    def on_before_retry(self, event: RetryEvent) -> None:
        """Handle a retry that is about to happen."""
        pass


class FunctionListener(BaseRetryListener):
    """Adapts a plain callable to the listener interface."""

    def __init__(self, func: Callable[[RetryEvent], None]) -> None:
        self.func = func

    def on_before_retry(self, event: RetryEvent) -> None:
        self.func(event)

    def __repr__(self) -> str:
        return f"FunctionListener({self.func!r})"


RetryListener = Union[BaseRetryListener, Callable[[RetryEvent], None]]


def as_listener(listener: RetryListener) -> BaseRetryListener:
    """Wrap callables in FunctionListener; pass listeners through."""
    if isinstance(listener, BaseRetryListener):
        return listener
    if not callable(listener):
        raise TypeError(f"Not a retry listener: {listener!r}")
    return FunctionListener(listener)
