"""Tests for logging infrastructure."""

from loguru import logger as loguru_logger

from retryloop.config.settings import Environment, LogLevel, Settings
from retryloop.infrastructure.logging import (
    configure_logger,
    get_logger,
    is_configured,
    reset_logging,
    setup_logging,
)


def test_get_logger_leaves_sinks_alone():
    """get_logger binds a name without replacing the host's sinks."""
    reset_logging()
    messages = []
    loguru_logger.add(messages.append, format="{extra[name]} {message}")

    logger = get_logger("host.module")
    logger.warning("kept")

    assert is_configured() is False
    assert [m.strip() for m in messages] == ["host.module kept"]


def test_get_logger_with_explicit_setup():
    """Test get_logger after explicit setup_logging call."""
    reset_logging()

    settings = Settings(environment=Environment.TESTING, log_level=LogLevel.CRITICAL)
    setup_logging(settings)

    logger = get_logger(__name__)
    assert logger is not None
    logger.critical("Test critical message")


def test_configure_logger_development():
    """Test configure_logger with development environment."""
    reset_logging()

    configure_logger(level=LogLevel.DEBUG, environment=Environment.DEVELOPMENT)

    logger = get_logger(__name__)
    logger.debug("Development debug message")


def test_configure_logger_production():
    """Test configure_logger with production environment."""
    reset_logging()

    configure_logger(level=LogLevel.WARNING, environment=Environment.PRODUCTION)

    logger = get_logger(__name__)
    logger.warning("Production warning message")


def test_configure_logger_accepts_level_names():
    """Plain strings work as levels too."""
    reset_logging()

    configure_logger(level="error")

    assert is_configured() is True


def test_reset_logging():
    """Test that reset_logging cleans up configuration."""
    configure_logger()
    _ = get_logger(__name__)

    reset_logging()
    assert is_configured() is False

    logger2 = get_logger("other_module")
    assert logger2 is not None
    assert is_configured() is False
