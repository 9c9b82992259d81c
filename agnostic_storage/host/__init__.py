"""
Host stores: the persistence engines the backends adapt. No contract logic here.
SQLitePreferences serves PreferencesStorage; JsonDefaults serves DefaultsStorage.
"""

from __future__ import annotations

from .json_defaults import (
    JsonDefaults,
    open_defaults,
    reset_standard_defaults,
    standard_defaults,
)
from .sqlite_preferences import Editor, SQLitePreferences

__all__ = [
    "Editor",
    "JsonDefaults",
    "SQLitePreferences",
    "open_defaults",
    "reset_standard_defaults",
    "standard_defaults",
]
