#!/usr/bin/env python3
"""
04_lock_release.py - Releasing a held lock while backing off

Demonstrates: A retry loop running under a Condition that is released during
each wait, so a producer thread can fill the shared buffer the loop waits on
"""

import threading

from retryloop import Interval, RetryPolicy, run_with_retry

buffer: list[str] = []
condition = threading.Condition()


def produce() -> None:
    for item in ("alpha", "beta"):
        with condition:
            buffer.append(item)


def take() -> str:
    if not buffer:
        raise BlockingIOError("buffer empty")
    return buffer.pop(0)


def main() -> None:
    policy = (
        RetryPolicy.builder()
        .retry_for(BlockingIOError)
        .max_retry(10)
        .interval(Interval.millis(50))
        .should_release_lock(True, condition)
        .build()
    )

    with condition:
        producer = threading.Thread(target=produce)
        producer.start()
        print(f"took: {run_with_retry(policy).supply(take)}")
    producer.join()


if __name__ == "__main__":
    main()
