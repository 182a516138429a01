"""Load supporter rows and client preferences from JSON or YAML files.

Supporter files hold a list of rows. Each row is either the joined
directory shape (profile fields plus a ``supporter_details`` object or
one-element list) or a flat candidate record.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError

from peermatch.domain.models import ClientPreferences, SupporterCandidate
from peermatch.logging import get_logger

from .exceptions import DirectoryError, RecordValidationError

logger = get_logger(__name__, component="directory")


def _read_document(path: Path) -> Any:
    """Parse a .json file as JSON and anything else as YAML."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)
    except FileNotFoundError as e:
        raise DirectoryError(f"File not found: {path}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DirectoryError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise DirectoryError(f"Failed to read {path}: {e}") from e


def _error_lines(error: ValidationError) -> List[str]:
    return [
        f"{' -> '.join(str(loc) for loc in item['loc']) or 'record'}: {item['msg']}"
        for item in error.errors()
    ]


def parse_candidate(row: Dict[str, Any]) -> SupporterCandidate:
    """Build a candidate from either supported row shape."""
    if "supporter_details" in row:
        return SupporterCandidate.from_directory_row(row)
    return SupporterCandidate.model_validate(row)


def load_candidates_file(path: Path) -> List[SupporterCandidate]:
    """Load supporter candidates from a file, keeping file order.

    Raises:
        DirectoryError: If the file is missing or unparsable
        RecordValidationError: If the document or any row is malformed
    """
    document = _read_document(path)
    if document is None:
        document = []

    # {"supporters": [...]} is accepted as well as a bare list
    if isinstance(document, dict) and "supporters" in document:
        document = document["supporters"]

    if not isinstance(document, list):
        raise RecordValidationError(
            "Supporter file must contain a list of rows", source=str(path)
        )

    candidates = []
    for index, row in enumerate(document):
        if not isinstance(row, dict):
            raise RecordValidationError(
                "Supporter row must be a mapping", source=str(path), index=index
            )
        try:
            candidates.append(parse_candidate(row))
        except ValidationError as e:
            raise RecordValidationError(
                "Invalid supporter record",
                source=str(path),
                index=index,
                errors=_error_lines(e),
            ) from e

    logger.info(
        f"Loaded {len(candidates)} supporters from {path}",
        extra={
            "event": "directory.loaded",
            "source": "file",
            "path": str(path),
            "supporter_count": len(candidates),
        },
    )
    return candidates


def load_preferences_file(path: Path) -> ClientPreferences:
    """Load one client's preferences from a file.

    Raises:
        DirectoryError: If the file is missing or unparsable
        RecordValidationError: If the preferences are malformed
    """
    document = _read_document(path)
    if document is None:
        document = {}

    if not isinstance(document, dict):
        raise RecordValidationError("Preferences file must contain a mapping", source=str(path))

    try:
        return ClientPreferences.model_validate(document)
    except ValidationError as e:
        raise RecordValidationError(
            "Invalid client preferences", source=str(path), errors=_error_lines(e)
        ) from e
