"""The attempt loop behind every retrying runner."""

import time
import typing as t

from ..domain.exceptions import BreakRetry, RetryAbortedError
from ..domain.policy import RetryPolicy
from ..events.base import BaseRetryListener
from ..events.models import RetryEvent
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

P = t.TypeVar("P")
R = t.TypeVar("R")


class RetryingContext(t.Generic[P, R]):
    """Runs one operation under one policy until it succeeds or must stop.

    A context owns the attempt state of a single execution and is not meant
    to be shared between threads or reused.
    """

    def __init__(
        self,
        policy: RetryPolicy,
        operation: t.Callable[[P], R],
        parameter: t.Callable[[], P] = lambda: None,
        listeners: t.Sequence[BaseRetryListener] = (),
        logger: "loguru.Logger | None" = None,
    ) -> None:
        """
        Initialise a retrying context.

        Args:
            policy: Retry policy to apply
            operation: Callable invoked with the current parameter value
            parameter: Supplier called before every attempt for the
                operation's argument
            listeners: Notified, in order, before each retry
            logger: Logger for recording retry decisions
        """
        self.policy = policy
        self.operation = operation
        self.parameter = parameter
        self.listeners = tuple(listeners)
        self.logger = logger if logger is not None else get_logger(__name__)

        self._start = 0.0
        self.attempt = 0
        self.last_wait_ms = 0
        self.last_failure: Exception | None = None

    @property
    def elapsed_ms(self) -> int:
        """Milliseconds since the first attempt started."""
        return int((time.monotonic() - self._start) * 1000)

    def run(self) -> R:
        """
        Execute the operation with retry.

        Returns:
            Result of the first successful attempt

        Raises:
            Exception: The last failure, unchanged, when it is not retryable
                or the policy allows no more attempts
            RetryAbortedError: If a listener raised BreakRetry
        """
        self._start = time.monotonic()
        self.attempt = 0
        self.last_wait_ms = 0

        while True:
            try:
                return self.operation(self.parameter())
            except Exception as e:
                failure = self.last_failure = e
                elapsed_ms = self.elapsed_ms
                if not self._should_retry(e, elapsed_ms):
                    raise

            self.last_wait_ms = self.policy.next_wait(self.last_wait_ms, failure)

            if self.listeners:
                event = RetryEvent(
                    cause=failure,
                    attempt=self.attempt,
                    elapsed_ms=elapsed_ms,
                    last_wait_ms=self.last_wait_ms,
                )
                if self._notify(event):
                    self.logger.info(
                        f"Retry aborted by listener after {self.attempt + 1} "
                        f"attempt(s): {failure!r}"
                    )
                    raise RetryAbortedError(failure) from failure

            self.attempt += 1

    def _should_retry(self, failure: Exception, elapsed_ms: int) -> bool:
        if not self.policy.is_retryable(failure):
            self.logger.debug(f"Non-retryable failure, not retrying: {failure!r}")
            return False

        if not self.policy.can_continue(self.attempt + 1, elapsed_ms):
            self.logger.error(
                f"Operation failed after {self.attempt + 1} attempt(s) "
                f"in {elapsed_ms}ms: {failure!r}"
            )
            return False

        limit = self.policy.max_attempts
        self.logger.warning(
            f"Retrying operation (attempt {self.attempt + 2}"
            f"{f'/{limit}' if limit else ''}) after failure: {failure!r}"
        )
        return True

    def _notify(self, event: RetryEvent) -> bool:
        """Call every listener; return True if any of them asked to break."""
        should_break = False
        for listener in self.listeners:
            try:
                listener.on_before_retry(event)
            except BreakRetry:
                should_break = True
            except Exception as e:
                self.logger.debug(f"Ignoring error from retry listener {listener!r}: {e!r}")
        return should_break
