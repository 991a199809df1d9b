#!/usr/bin/env python3
"""
03_listeners_and_abort.py - Observing and aborting a retry loop

Demonstrates:
- LoggingListener for log output
- A listener that aborts with BreakRetry
- A parameter supplier re-evaluated before every attempt
"""

import itertools

from retryloop import (
    BreakRetry,
    Interval,
    LoggingListener,
    RetryAbortedError,
    RetryEvent,
    RetryPolicy,
    run_with_retry,
)

MIRRORS = ["mirror-a", "mirror-b", "mirror-c"]


def fetch(mirror: str) -> bytes:
    raise ConnectionRefusedError(f"{mirror} refused the connection")


def stop_after_full_round(event: RetryEvent) -> None:
    if event.attempt + 1 >= len(MIRRORS):
        raise BreakRetry("every mirror refused")


def main() -> None:
    mirrors = itertools.cycle(MIRRORS)
    policy = RetryPolicy.builder().interval(Interval.millis(20)).build()

    try:
        (
            run_with_retry(policy)
            .append_listener(LoggingListener(level="WARNING"), stop_after_full_round)
            .parameter_supplier(lambda: next(mirrors))
            .process(fetch)
        )
    except RetryAbortedError as e:
        print(f"Aborted: {e} (last failure: {e.cause})")


if __name__ == "__main__":
    main()
