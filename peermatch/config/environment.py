"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        supporters_file: Optional[Path] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.database_url = database_url
        self.supporters_file = supporters_file
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - DATABASE_URL: SQLAlchemy URL of the supporter directory
    - SUPPORTERS_FILE: JSON/YAML file with supporter rows
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Label attached to log records (default: local)

    Returns:
        EnvironmentConfig with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    database_url = os.getenv("DATABASE_URL") or None
    supporters_file_str = os.getenv("SUPPORTERS_FILE") or None
    log_level = os.getenv("LOG_LEVEL") or None
    environment = os.getenv("ENVIRONMENT") or None

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if database_url and "://" not in database_url:
        errors.append(
            f"Invalid DATABASE_URL: '{database_url}'. Expected a URL such as sqlite:///./data/directory.db"
        )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        database_url=database_url,
        supporters_file=Path(supporters_file_str) if supporters_file_str else None,
        log_level=log_level,
        environment=environment,
    )
