#!/usr/bin/env python3
"""
02_backoff_and_budget.py - Exponential backoff with a time budget

Demonstrates:
- Exponential backoff computed from the previous nominal wait
- An execution budget that stops new attempts
- Reading attempt metadata from retry events
"""

from retryloop import Interval, RetryEvent, RetryPolicy, exponential, run_with_retry


def always_busy() -> None:
    raise TimeoutError("service busy")


def on_retry(event: RetryEvent) -> None:
    print(
        f"  attempt {event.attempt + 1} failed after {event.elapsed_ms}ms, "
        f"waited {event.last_wait_ms}ms"
    )


def main() -> None:
    policy = (
        RetryPolicy.builder()
        .retry_for(TimeoutError)
        .interval(exponential(Interval.millis(50), maximum=Interval.millis(400)))
        .execution_timeout(Interval.seconds(1))
        .build()
    )

    try:
        run_with_retry(policy).append_listener(on_retry).run(always_busy)
    except TimeoutError as e:
        print(f"Budget exhausted, last failure: {e!r}")


if __name__ == "__main__":
    main()
