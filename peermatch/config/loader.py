"""Configuration loader for peermatch."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_LOCATIONS = (
    Path("config.yaml"),
    Path("config") / "config.yaml",
)


def load_config(config_path: Optional[Path] = None) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from a YAML file and environment variables.

    Config file lookup:
    1. Use config_path if given (it must exist)
    2. Try config.yaml in the current directory
    3. Try ./config/config.yaml
    4. Fall back to built-in defaults

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    config_file = _find_config_file(config_path)

    if config_file is None:
        logger.debug("No configuration file found, using defaults")
        config_dict: Dict[str, Any] = {}
    else:
        config_dict = _read_yaml(config_file)

    warnings_found = check_for_warnings(config_dict)
    if warnings_found:
        emit_warnings(warnings_found)

    app_config = parse_config(config_dict)

    try:
        env_config = load_environment_config()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load environment configuration: {e}",
            suggestions=["Check the values in your .env file"],
        ) from e

    return app_config, env_config


def parse_config(config_dict: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration mapping.

    Raises:
        ConfigurationError: With one readable line per pydantic error
    """
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Configuration validation failed",
            errors=_format_validation_errors(e),
            suggestions=[
                "Review config.example.yaml for correct format",
                "Verify field types match the expected schema",
                "Make sure matching.weights add up to 100",
            ],
        ) from e


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[f"Ensure {config_file} is readable"],
        ) from e

    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            suggestions=["Review config.example.yaml for correct format"],
        )

    return config_dict


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve the configuration file to read.

    Raises:
        ConfigurationError: If an explicit path does not exist
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use config.yaml or the built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return None


def _format_validation_errors(error: ValidationError) -> List[str]:
    errors = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"])
        error_type = item["type"]

        if error_type == "missing":
            errors.append(f"Missing required field: {field_path}")
        elif error_type == "extra_forbidden":
            errors.append(f"Unknown configuration key: {field_path}")
        elif error_type.endswith("_type") or error_type.endswith("_parsing"):
            errors.append(
                f"Invalid type for '{field_path}': {item['msg']} (got {item.get('input')!r})"
            )
        elif "enum" in error_type:
            errors.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            location = field_path or "config"
            errors.append(f"{location}: {item['msg']}")
    return errors


def validate_config_file(config_path: Path) -> bool:
    """
    Validate a configuration file without reading environment variables.

    Returns:
        True if valid, False otherwise (errors printed to stdout)
    """
    try:
        parse_config(_read_yaml(config_path))
        print(f"✓ Configuration file {config_path} is valid")
        return True
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
