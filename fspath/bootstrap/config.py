"""Environment-driven settings for applications embedding fspath."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name)
    return value.strip() if value is not None and value.strip() else default


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration for the fspath logger tree."""

    level: str = "WARNING"
    destination: str = "stdout"
    use_json: bool = True


def load_logging_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> LoggingSettings:
    """Read logging settings from FSPATH_LOG_* environment variables."""
    if environ is None:
        environ = os.environ
    level = _env_str(environ, "FSPATH_LOG_LEVEL", "WARNING").upper()
    if level not in LOG_LEVELS:
        level = "WARNING"
    return LoggingSettings(
        level=level,
        destination=_env_str(environ, "FSPATH_LOG_DESTINATION", "stdout"),
        use_json=_env_bool(environ, "FSPATH_LOG_JSON", True),
    )
