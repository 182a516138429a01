"""Non-fatal checks on raw configuration."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are valid but probably unintended.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    matching = config_dict.get("matching", {})
    if isinstance(matching, dict):
        min_score = matching.get("min_score")
        if isinstance(min_score, (int, float)) and min_score == 0:
            warning_messages.append(
                "matching.min_score is 0; every eligible supporter will be returned"
            )

        weights = matching.get("weights", {})
        if isinstance(weights, dict):
            for name in ("specialty", "session_type", "availability", "approach"):
                if weights.get(name) == 0:
                    warning_messages.append(
                        f"matching.weights.{name} is 0; that term will never affect ranking"
                    )

        if matching.get("require_onboarding") is False:
            warning_messages.append(
                "matching.require_onboarding is false; supporters without W-9, bank "
                "details or training may be matched"
            )

    directory = config_dict.get("directory", {})
    if isinstance(directory, dict):
        if directory.get("supporters_file") and directory.get("database_url"):
            warning_messages.append(
                "Both directory.supporters_file and directory.database_url are set; "
                "the database takes precedence"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit each message as a UserWarning."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
