"""Listener that writes retry events to the log."""

import typing as t

from ..infrastructure.logging import get_logger
from .base import BaseRetryListener
from .models import RetryEvent

if t.TYPE_CHECKING:
    import loguru


class LoggingListener(BaseRetryListener):
    """Logs every retry event at a fixed level."""

    def __init__(
        self,
        logger: "loguru.Logger | None" = None,
        level: str = "INFO",
    ) -> None:
        self.logger = logger if logger is not None else get_logger(__name__)
        self.level = level

    def on_before_retry(self, event: RetryEvent) -> None:
        self.logger.log(self.level, str(event))
