from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class Environment(Enum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the app and the CLI.

    The retry defaults only apply where a caller does not pass an explicit
    policy (the CLI `run` command). Library callers build their own policies.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    max_attempts: int = 3
    interval_ms: int = 1000
    timeout_ms: int | None = None


def build_settings(**overrides: Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets CLI options default to None so that only flags the user actually
    passed replace the Settings defaults.

    Raises:
        TypeError: If an override does not name a Settings field
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
