"""Read-only supporter directory.

Public API:
    # Database lifecycle
    - init_database(database_url: str, create_tables: bool = False) -> None
    - get_session() -> ContextManager[Session]
    - close_database() -> None

    # Readers
    - SupporterDirectory: supporters from the profiles/supporter_details tables
    - load_candidates_file(path) / load_preferences_file(path)

    # Exceptions
    - DirectoryError, DatabaseConnectionError, RecordValidationError
"""

from .database import close_database, get_engine, get_session, init_database
from .exceptions import DatabaseConnectionError, DirectoryError, RecordValidationError
from .files import load_candidates_file, load_preferences_file, parse_candidate
from .repository import SupporterDirectory

__all__ = [
    "init_database",
    "get_session",
    "get_engine",
    "close_database",
    "SupporterDirectory",
    "load_candidates_file",
    "load_preferences_file",
    "parse_candidate",
    "DirectoryError",
    "DatabaseConnectionError",
    "RecordValidationError",
]
