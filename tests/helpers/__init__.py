"""Test helper utilities for peermatch tests."""

from .directory import seed_directory, seed_directory_from_file
from .factories import make_candidate, make_preferences, make_row

__all__ = [
    "make_candidate",
    "make_preferences",
    "make_row",
    "seed_directory",
    "seed_directory_from_file",
]
