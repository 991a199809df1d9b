"""Validated time quantities used for backoff waits and execution budgets."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_NANOS_PER_MILLI = 1_000_000


class TimeUnit(Enum):
    """Time units with their length in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 60 * 60 * 1_000_000_000
    DAYS = 24 * 60 * 60 * 1_000_000_000

    def to_millis(self, value: int) -> int:
        """Convert `value` of this unit to milliseconds, truncating."""
        return value * self.value // _NANOS_PER_MILLI


class Interval(BaseModel):
    """A positive amount of time in a given unit.

    Example:
        >>> Interval.of(2, TimeUnit.SECONDS).to_millis()
        2000
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(gt=0, description="Magnitude, strictly positive")
    unit: TimeUnit = Field(description="Unit the magnitude is expressed in")

    @classmethod
    def of(cls, value: int, unit: TimeUnit) -> "Interval":
        """Create an Interval.

        Raises:
            pydantic.ValidationError: If value is not positive or unit is missing
        """
        return cls(value=value, unit=unit)

    @classmethod
    def millis(cls, value: int) -> "Interval":
        return cls(value=value, unit=TimeUnit.MILLISECONDS)

    @classmethod
    def seconds(cls, value: int) -> "Interval":
        return cls(value=value, unit=TimeUnit.SECONDS)

    def to_millis(self) -> int:
        """Duration in whole milliseconds."""
        return self.unit.to_millis(self.value)

    def to_seconds(self) -> float:
        """Duration in seconds, as accepted by time.sleep."""
        return self.value * self.unit.value / 1_000_000_000

    def __str__(self) -> str:
        return f"{self.value} {self.unit.name.lower()}"
