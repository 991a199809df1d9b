"""Logging setup built on loguru.

Library code asks for a logger with `get_logger(__name__)`, which only binds
the module name. Sinks are left to the host application unless it opts in
through `setup_logging`/`configure_logger` (as `create_app` does).
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PRODUCTION_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru sinks with one stderr sink for the given environment.

    The testing environment keeps the sink but disables the retryloop
    namespace so test output stays quiet.
    """
    global _configured

    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()
    logger.remove()
    logger.configure(extra={"name": "retryloop"})

    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=level_name, format=_PRODUCTION_FORMAT, colorize=False)
    else:
        logger.add(sys.stderr, level=level_name, format=_DEVELOPMENT_FORMAT, colorize=True)

    if environment == Environment.TESTING:
        logger.disable("retryloop")
    else:
        logger.enable("retryloop")

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to `name`; existing sinks are left untouched."""
    return logger.bind(name=name)


def is_configured() -> bool:
    """Whether logging has been configured since the last reset."""
    return _configured


def reset_logging() -> None:
    """Drop all sinks and forget configuration (mainly for tests)."""
    global _configured
    logger.remove()
    logger.enable("retryloop")
    _configured = False
