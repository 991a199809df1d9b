"""Run command implementation."""

import subprocess
from enum import Enum
from typing import List, Optional

import typer

from ...config.settings import Settings
from ...domain.backoff import Backoff, exponential, fixed, linear
from ...domain.interval import Interval
from ...domain.policy import RetryPolicy
from ...events.base import FunctionListener
from ...execution.runner import run_with_retry
from ..output.status import display_failure, display_retry, display_success
from ..state import CLIState

COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


class BackoffKind(str, Enum):
    FIXED = "fixed"
    LINEAR = "linear"
    EXPONENTIAL = "exponential"


def build_backoff(kind: BackoffKind, interval_ms: int) -> Backoff | None:
    """Translate CLI backoff options into a backoff function.

    Returns:
        None when interval_ms is 0 (retry immediately)
    """
    if interval_ms <= 0:
        return None
    initial = Interval.millis(interval_ms)
    if kind == BackoffKind.LINEAR:
        return linear(initial, step=initial)
    if kind == BackoffKind.EXPONENTIAL:
        return exponential(initial)
    return fixed(initial)


def build_policy(
    settings: Settings,
    max_attempts: Optional[int],
    interval_ms: Optional[int],
    backoff: BackoffKind,
    timeout_ms: Optional[int],
    retry_exit_codes: Optional[List[int]],
) -> RetryPolicy:
    """Build the retry policy from CLI options, falling back to settings."""
    attempts = max_attempts if max_attempts is not None else settings.max_attempts
    wait_ms = interval_ms if interval_ms is not None else settings.interval_ms
    budget_ms = timeout_ms if timeout_ms is not None else settings.timeout_ms

    if retry_exit_codes:
        codes = frozenset(retry_exit_codes)

        def retry_for(failure: BaseException) -> bool:
            return (
                isinstance(failure, subprocess.CalledProcessError)
                and failure.returncode in codes
            )

    else:
        retry_for = subprocess.CalledProcessError

    return (
        RetryPolicy.builder()
        .retry_for(retry_for)
        .max_retry(attempts)
        .interval(build_backoff(backoff, wait_ms))
        .execution_timeout(Interval.millis(budget_ms) if budget_ms else None)
        .build()
    )


def run(
    ctx: typer.Context,
    command: List[str] = typer.Argument(..., help="Command and its arguments"),
    max_attempts: Optional[int] = typer.Option(
        None,
        "--max-attempts",
        "-n",
        min=0,
        help="Total attempts allowed (0 = unlimited)",
    ),
    interval: Optional[int] = typer.Option(
        None, "--interval", "-i", min=0, help="Initial wait between attempts in ms"
    ),
    backoff: BackoffKind = typer.Option(
        BackoffKind.FIXED, "--backoff", "-b", help="How the wait grows"
    ),
    timeout: Optional[int] = typer.Option(
        None,
        "--timeout",
        "-t",
        min=1,
        help="No new attempt starts after this many ms",
    ),
    retry_exit_code: Optional[List[int]] = typer.Option(
        None,
        "--retry-exit-code",
        "-r",
        help="Only retry these exit codes (repeatable)",
    ),
) -> None:
    """Run a command, retrying while it exits with a non-zero status.

    Examples:
        retryloop run -- curl -fsS https://example.com/health
        retryloop run -n 5 -i 500 -b exponential -- ./flaky.sh
        retryloop run -r 75 -t 60000 -- rsync -a src/ host:dst/
    """
    state: CLIState = ctx.obj
    policy = build_policy(
        state.settings, max_attempts, interval, backoff, timeout, retry_exit_code
    )

    attempts = 0

    def attempt() -> None:
        nonlocal attempts
        attempts += 1
        subprocess.run(command, check=True)

    runner = run_with_retry(policy).append_listener(FunctionListener(display_retry))
    try:
        runner.run(attempt)
    except subprocess.CalledProcessError as e:
        display_failure(attempts, e)
        raise typer.Exit(code=e.returncode)
    except FileNotFoundError as e:
        display_failure(attempts, e)
        raise typer.Exit(code=COMMAND_NOT_FOUND)
    except OSError as e:
        display_failure(attempts, e)
        raise typer.Exit(code=COMMAND_NOT_EXECUTABLE)

    display_success(attempts)
