"""Pytest configuration and fixtures for retryloop tests."""

import loguru
import pytest
from typer.testing import CliRunner

from retryloop.app import create_app
from retryloop.cli.app import create_cli_app
from retryloop.config.settings import Environment, LogLevel, Settings
from retryloop.domain.interval import Interval
from retryloop.domain.policy import RetryPolicy
from retryloop.infrastructure.logging import reset_logging


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        max_attempts=3,
        interval_ms=0,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_sleep(mocker):
    """Patch the blocking sleep used between attempts."""
    return mocker.patch("retryloop.domain.policy.time.sleep")


@pytest.fixture
def fixed_10ms_policy():
    """Retry everything, three attempts, 10ms between them."""
    return (
        RetryPolicy.builder()
        .max_retry(3)
        .interval(Interval.millis(10))
        .build()
    )


@pytest.fixture
def flaky():
    """Create an operation that fails `failures` times, then returns `result`."""

    def factory(failures: int, result=42, error: type[Exception] = ConnectionError):
        calls = {"count": 0}

        def operation():
            calls["count"] += 1
            if calls["count"] <= failures:
                raise error(f"failure {calls['count']}")
            return result

        return operation, calls

    return factory


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
