#!/usr/bin/env python3
"""Check that config.example.yaml parses and summarize what it configures."""

import sys
from pathlib import Path

import yaml

from peermatch.config.loader import validate_config_file


def verify_config_structure(config_file: Path = Path("config.example.yaml")) -> bool:
    """Validate the example config and print the effective matching setup."""
    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return False

    if not validate_config_file(config_file):
        return False

    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    matching = config.get("matching", {})
    weights = matching.get("weights", {})
    directory = config.get("directory", {})

    print(f"  - Weights: {', '.join(f'{k}={v}' for k, v in weights.items()) or 'defaults'}")
    print(f"  - Score floor: {matching.get('min_score', 'default')}")
    print(f"  - Reasons shown: {matching.get('max_reasons', 'default')}")
    print(
        "  - Directory: "
        f"{directory.get('database_url') or directory.get('supporters_file') or 'not set'}"
    )
    return True


if __name__ == "__main__":
    success = verify_config_structure()
    sys.exit(0 if success else 1)
