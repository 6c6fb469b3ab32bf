"""
Settings

Configuration for logging and the SQLAlchemy adapter, read from environment
variables prefixed with BUILDINGBLOCKS_.

    BUILDINGBLOCKS_LOG_LEVEL         DEBUG / INFO / WARNING / ERROR (default INFO)
    BUILDINGBLOCKS_LOG_FILE          Optional path for a rotating log file
    BUILDINGBLOCKS_LOG_MAX_BYTES     Rotation size (default 10MB)
    BUILDINGBLOCKS_LOG_BACKUP_COUNT  Rotated files kept (default 5)
    BUILDINGBLOCKS_DATABASE_URL      SQLAlchemy async URL
    BUILDINGBLOCKS_DATABASE_ECHO     Echo SQL statements (true/false)
"""
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_MAX_BYTES,
    ENV_PREFIX,
)
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


def _read_env(environ: Mapping[str, str], keys: Mapping[str, str]) -> dict:
    """Collect the given field -> variable mappings that are present."""
    values = {}
    for field_name, suffix in keys.items():
        raw = environ.get(f"{ENV_PREFIX}{suffix}")
        if raw is not None and raw.strip() != '':
            values[field_name] = raw.strip()
    return values


def _build(model: type, values: dict):
    try:
        return model(**values)
    except ValidationError as e:
        invalid = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(
            f"Invalid {model.__name__}: {', '.join(invalid)}",
            invalid_keys=invalid
        ) from e


class LoggingSettings(BaseModel):
    """Logging configuration"""

    level: str = Field("INFO", description="Root log level")
    log_file: Optional[str] = Field(None, description="Rotating log file path")
    max_bytes: int = Field(DEFAULT_LOG_MAX_BYTES, gt=0, description="Rotate after this many bytes")
    backup_count: int = Field(DEFAULT_LOG_BACKUP_COUNT, ge=0, description="Rotated files to keep")
    format: str = Field(DEFAULT_LOG_FORMAT, description="logging.Formatter format string")

    @field_validator("level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _VALID_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        # TRACE is the facade's name for DEBUG
        if level == "TRACE":
            return "DEBUG"
        if level == "WARN":
            return "WARNING"
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        values = _read_env(environ if environ is not None else os.environ, {
            "level": "LOG_LEVEL",
            "log_file": "LOG_FILE",
            "max_bytes": "LOG_MAX_BYTES",
            "backup_count": "LOG_BACKUP_COUNT",
        })
        return _build(cls, values)


class DatabaseSettings(BaseModel):
    """Database configuration for the SQLAlchemy adapter"""

    url: str = Field("sqlite+aiosqlite:///:memory:", min_length=1, description="SQLAlchemy async URL")
    echo: bool = Field(False, description="Echo SQL statements")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DatabaseSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        values = _read_env(environ if environ is not None else os.environ, {
            "url": "DATABASE_URL",
            "echo": "DATABASE_ECHO",
        })
        settings = _build(cls, values)
        logger.debug(f"Database settings loaded (echo={settings.echo})")
        return settings
