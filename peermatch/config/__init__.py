"""Configuration management module for peermatch."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, parse_config, validate_config_file
from .models import (
    AppConfig,
    DirectoryConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    MatchingConfig,
    ScoringWeights,
)

__all__ = [
    # Loader functions
    "load_config",
    "parse_config",
    "validate_config_file",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "MatchingConfig",
    "ScoringWeights",
    "DirectoryConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
