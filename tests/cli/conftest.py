"""Shared fixtures for CLI tests."""

import sys

import pytest

from retryloop.cli.app import create_cli_app
from retryloop.config.settings import Environment, LogLevel, Settings


@pytest.fixture
def cli_settings():
    """Provide Settings with no waits so commands retry instantly."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,
        max_attempts=3,
        interval_ms=0,
    )


@pytest.fixture
def test_cli_app(cli_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=cli_settings)


@pytest.fixture
def python_exit():
    """Build a command that exits with the given status."""

    def factory(code: int) -> list[str]:
        return [sys.executable, "-c", f"import sys; sys.exit({code})"]

    return factory


@pytest.fixture
def succeed_on_attempt(tmp_path):
    """Build a command that fails until its Nth run, counting runs in a file."""
    counter = tmp_path / "runs"
    script = tmp_path / "flaky.py"
    script.write_text(
        "import pathlib, sys\n"
        "counter = pathlib.Path(sys.argv[1])\n"
        "runs = int(counter.read_text()) + 1 if counter.exists() else 1\n"
        "counter.write_text(str(runs))\n"
        "sys.exit(0 if runs >= int(sys.argv[2]) else 3)\n"
    )

    def factory(attempt: int) -> list[str]:
        return [sys.executable, str(script), str(counter), str(attempt)]

    factory.counter = counter
    return factory
