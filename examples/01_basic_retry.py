#!/usr/bin/env python3
"""
01_basic_retry.py - Simplest possible retry

Demonstrates: Retrying a flaky call with the default policy (retry forever,
no wait) and with a capped policy
"""

import random

from retryloop import RetryPolicy, run_with_retry, supply


def flaky_lookup() -> str:
    """Fail two times out of three."""
    if random.random() < 0.66:
        raise ConnectionError("upstream reset the connection")
    return "42 EUR"


def main() -> None:
    print("Default policy: retries until the call succeeds")
    print(f"  result: {supply(flaky_lookup)}")

    policy = RetryPolicy.builder().retry_for(ConnectionError).max_retry(3).build()
    print("Capped policy: at most 3 attempts")
    try:
        print(f"  result: {run_with_retry(policy).supply(flaky_lookup)}")
    except ConnectionError as e:
        print(f"  gave up: {e}")


if __name__ == "__main__":
    main()
