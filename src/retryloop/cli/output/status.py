"""Status display functions for CLI."""

import typer

from ...events.models import RetryEvent


def display_retry(event: RetryEvent) -> None:
    """Display a retry that is about to happen."""
    typer.secho(
        f"↻ Attempt {event.attempt + 1} failed ({event.cause}), "
        f"retrying after {event.last_wait_ms}ms",
        fg=typer.colors.YELLOW,
        err=True,
    )


def display_success(attempts: int) -> None:
    """Display success message."""
    typer.secho(
        f"✓ Command succeeded after {attempts} attempt(s)",
        fg=typer.colors.GREEN,
        err=True,
    )


def display_failure(attempts: int, error: Exception) -> None:
    """Display final failure message."""
    typer.secho(
        f"✗ Command failed after {attempts} attempt(s)", fg=typer.colors.RED, err=True
    )
    typer.secho(f"  Error: {error}", fg=typer.colors.RED, err=True)
