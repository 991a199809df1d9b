"""Event data passed to retry listeners."""

from pydantic import BaseModel, ConfigDict, Field


class RetryEvent(BaseModel):
    """Snapshot of a retry loop taken after a failed attempt and its wait.

    Listeners receive it right before the next attempt starts.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cause: BaseException = Field(description="Failure raised by the last attempt")
    attempt: int = Field(ge=0, description="Index of the failed attempt (0-indexed)")
    elapsed_ms: int = Field(ge=0, description="Time since the first attempt started")
    last_wait_ms: int = Field(ge=0, description="Nominal wait before the next attempt")

    def __str__(self) -> str:
        return (
            f"RetryEvent: {{cause: [{type(self.cause).__name__}: {self.cause}], "
            f"retried count: {self.attempt}, "
            f"current running time: {self.elapsed_ms}ms, "
            f"last waiting interval: {self.last_wait_ms}ms}}"
        )
