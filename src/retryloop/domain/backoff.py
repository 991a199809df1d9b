"""Backoff functions for retry policies.

A backoff function maps the previous nominal wait in milliseconds (0 before
the first wait) to the next Interval, or to None for "do not wait":
- fixed: Same interval every time
- linear: Grows by a constant step, optionally capped
- exponential: Grows by a multiplier, optionally capped
"""

from typing import Callable

from .interval import Interval

Backoff = Callable[[int], "Interval | None"]


def fixed(interval: Interval) -> Backoff:
    """Wait `interval` before every retry."""

    def backoff(previous_ms: int) -> Interval:
        return interval

    backoff.interval = interval  # type: ignore[attr-defined]
    return backoff


def _cap_millis(maximum: Interval | None) -> int | None:
    if maximum is None:
        return None
    cap_ms = maximum.to_millis()
    if cap_ms < 1:
        raise ValueError("maximum must be at least 1 millisecond")
    return cap_ms


def linear(
    initial: Interval, step: Interval, maximum: Interval | None = None
) -> Backoff:
    """Wait `initial`, then add `step` to each following wait.

    Delay = min(previous + step, maximum)
    """
    step_ms = step.to_millis()
    cap_ms = _cap_millis(maximum)

    def backoff(previous_ms: int) -> Interval:
        if previous_ms <= 0:
            return initial
        next_ms = previous_ms + step_ms
        if cap_ms is not None:
            next_ms = min(next_ms, cap_ms)
        return Interval.millis(next_ms)

    return backoff


def exponential(
    initial: Interval, multiplier: float = 2.0, maximum: Interval | None = None
) -> Backoff:
    """Wait `initial`, then multiply each following wait by `multiplier`.

    Delay = min(previous * multiplier, maximum)

    Examples:
        >>> nxt = exponential(Interval.millis(100))
        >>> nxt(0).to_millis(), nxt(100).to_millis(), nxt(200).to_millis()
        (100, 200, 400)
    """
    if multiplier < 1.0:
        raise ValueError("multiplier must be >= 1.0")
    cap_ms = _cap_millis(maximum)

    def backoff(previous_ms: int) -> Interval:
        if previous_ms <= 0:
            return initial
        next_ms = max(1, int(previous_ms * multiplier))
        if cap_ms is not None:
            next_ms = min(next_ms, cap_ms)
        return Interval.millis(next_ms)

    return backoff
