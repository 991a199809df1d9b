"""Fluent entry points that bind a policy, listeners and an operation.

Runners are immutable: `options`, `parameter` and `append_listener` return
new runners, so a configured runner can be shared and reused.

Example:
    >>> policy = RetryPolicy.builder().max_retry(3).build()
    >>> run_with_retry(policy).append_listener(print).supply(fetch_quote)
"""

import typing as t

from ..domain.policy import DEFAULT_POLICY, RetryPolicy
from ..events.base import BaseRetryListener, RetryListener, as_listener
from .context import RetryingContext

if t.TYPE_CHECKING:
    import loguru

P = t.TypeVar("P")
R = t.TypeVar("R")


class _ListenedRunner:
    """Holds the ordered listener list shared by both runner kinds."""

    def __init__(
        self,
        policy: RetryPolicy | None,
        listeners: t.Sequence[BaseRetryListener],
        logger: "loguru.Logger | None",
    ) -> None:
        self.policy = policy if policy is not None else DEFAULT_POLICY
        self.listeners: tuple[BaseRetryListener, ...] = tuple(listeners)
        self.logger = logger

    def _appended(
        self, listeners: t.Sequence[RetryListener]
    ) -> tuple[BaseRetryListener, ...]:
        return self.listeners + tuple(as_listener(lst) for lst in listeners)

    def _execute(self, operation: t.Callable[[t.Any], R], parameter: t.Callable[[], t.Any]) -> R:
        return RetryingContext(
            self.policy,
            operation,
            parameter=parameter,
            listeners=self.listeners,
            logger=self.logger,
        ).run()


class RetryRunner(_ListenedRunner):
    """Runs no-argument operations with retry."""

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        listeners: t.Sequence[BaseRetryListener] = (),
        logger: "loguru.Logger | None" = None,
    ) -> None:
        super().__init__(policy, listeners, logger)

    def options(self, policy: RetryPolicy | None) -> "RetryRunner":
        """Return a runner using `policy`; listeners are not carried over."""
        return RetryRunner(policy, (), self.logger)

    def parameter(self, value: P) -> "ParameterizedRetryRunner[P]":
        """Bind a fixed argument for the operation."""
        return ParameterizedRetryRunner(
            lambda: value, self.policy, self.listeners, self.logger
        )

    def parameter_supplier(
        self, supplier: t.Callable[[], P]
    ) -> "ParameterizedRetryRunner[P]":
        """Bind an argument supplier, called again before every attempt."""
        return ParameterizedRetryRunner(
            supplier, self.policy, self.listeners, self.logger
        )

    def append_listener(self, *listeners: RetryListener) -> "RetryRunner":
        if not listeners:
            return self
        return RetryRunner(self.policy, self._appended(listeners), self.logger)

    def run(self, operation: t.Callable[[], t.Any]) -> None:
        """Run `operation` until it succeeds, discarding its result."""
        self._execute(lambda _: operation(), lambda: None)

    def supply(self, operation: t.Callable[[], R]) -> R:
        """Run `operation` until it succeeds and return its result."""
        return self._execute(lambda _: operation(), lambda: None)


class ParameterizedRetryRunner(_ListenedRunner, t.Generic[P]):
    """Runs single-argument operations with retry."""

    def __init__(
        self,
        parameter: t.Callable[[], P],
        policy: RetryPolicy | None = None,
        listeners: t.Sequence[BaseRetryListener] = (),
        logger: "loguru.Logger | None" = None,
    ) -> None:
        super().__init__(policy, listeners, logger)
        self.parameter = parameter

    def options(self, policy: RetryPolicy | None) -> "ParameterizedRetryRunner[P]":
        """Return a runner using `policy`, keeping parameter and listeners."""
        return ParameterizedRetryRunner(
            self.parameter, policy, self.listeners, self.logger
        )

    def append_listener(
        self, *listeners: RetryListener
    ) -> "ParameterizedRetryRunner[P]":
        if not listeners:
            return self
        return ParameterizedRetryRunner(
            self.parameter, self.policy, self._appended(listeners), self.logger
        )

    def consume(self, consumer: t.Callable[[P], t.Any]) -> None:
        """Call `consumer` with the parameter until it succeeds."""
        self._execute(consumer, self.parameter)

    def process(self, processor: t.Callable[[P], R]) -> R:
        """Call `processor` with the parameter until it succeeds; return its result."""
        return self._execute(processor, self.parameter)


def run_with_retry(
    policy: RetryPolicy | None = None,
    logger: "loguru.Logger | None" = None,
) -> RetryRunner:
    """Create a runner, optionally preconfigured with a policy."""
    return RetryRunner(policy, logger=logger)


def run(operation: t.Callable[[], t.Any], policy: RetryPolicy | None = None) -> None:
    """Run `operation` with retry under `policy` (default: retry forever)."""
    run_with_retry(policy).run(operation)


def supply(operation: t.Callable[[], R], policy: RetryPolicy | None = None) -> R:
    """Run `operation` with retry under `policy` and return its result."""
    return run_with_retry(policy).supply(operation)
