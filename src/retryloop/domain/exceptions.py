"""Custom exceptions for the retry engine."""


class RetryLoopError(Exception):
    """Base exception for retry engine errors."""

    pass


class BreakRetry(RetryLoopError):
    """Raised by a retry listener to stop the loop before the next attempt.

    The engine catches it, finishes notifying the remaining listeners and
    then raises `RetryAbortedError`.
    """

    def __init__(self, message: str = "Retry break requested") -> None:
        super().__init__(message)


class RetryAbortedError(RetryLoopError):
    """Raised when a listener aborted the retry loop.

    Always carries the last failure of the wrapped operation, both as
    `cause` and as the chained `__cause__`.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__("Retry was cancelled intentionally")
