"""Supporter directory exceptions.

All directory exceptions inherit from DirectoryError so callers can catch
every read failure with a single except clause.
"""

from typing import List, Optional


class DirectoryError(Exception):
    """Base exception for supporter directory errors."""

    pass


class DatabaseConnectionError(DirectoryError):
    """Raised when the directory database cannot be initialized or reached.

    Examples:
    - Invalid database URL
    - Database file not accessible
    - Session requested before init_database()
    """

    pass


class RecordValidationError(DirectoryError):
    """Raised when a supporter or preference record has the wrong shape.

    Attributes:
        source: File or table the record came from
        index: Position of the record in its source, when known
        errors: One line per validation problem
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        index: Optional[int] = None,
        errors: Optional[List[str]] = None,
    ):
        self.source = source
        self.index = index
        self.errors = errors or []

        parts = [message]
        if source is not None:
            parts.append(f"source={source}")
        if index is not None:
            parts.append(f"record={index}")
        text = " ".join(parts)
        if self.errors:
            text += ": " + "; ".join(self.errors)
        super().__init__(text)
