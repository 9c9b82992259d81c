"""
Backend assembly: build a PlatformAgnosticStorage from config, plus a process default.
Selection happens here, outside the adapters; callers only see the contract.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .contract import PlatformAgnosticStorage

logger = logging.getLogger(__name__)

BACKENDS = ("preferences", "defaults")

# Default storage instance (set by get_storage)
_storage: Optional[PlatformAgnosticStorage] = None


def open_storage(
    kind: Optional[str] = None,
    path: Optional[Union[str, Path]] = None,
) -> PlatformAgnosticStorage:
    """
    Open a backend over its host store.

    kind is "preferences" (SQLite host) or "defaults" (JSON host); both kind and
    path fall back to config. Defaults backends share one host store per file,
    the same one DefaultsStorage() uses for the configured path.
    """
    from agnostic_storage import config

    kind = kind or config.storage_backend()
    if kind == "preferences":
        from agnostic_storage.host.sqlite_preferences import SQLitePreferences

        from .preferences_backend import PreferencesStorage

        db_path = path or config.preferences_path()
        logger.debug("Opening preferences storage at %s", db_path)
        return PreferencesStorage(SQLitePreferences(db_path))
    if kind == "defaults":
        from agnostic_storage.host.json_defaults import open_defaults

        from .defaults_backend import DefaultsStorage

        json_path = path or config.defaults_path()
        logger.debug("Opening defaults storage at %s", json_path)
        return DefaultsStorage(open_defaults(json_path))
    raise ValueError(f"Unknown storage backend: {kind!r} (expected one of {', '.join(BACKENDS)})")


def close_storage(storage: PlatformAgnosticStorage) -> None:
    """Flush and close the host store behind storage, if it has one to close."""
    handle = getattr(storage, "handle", None)
    close = getattr(handle, "close", None)
    if callable(close):
        close()


def get_storage() -> PlatformAgnosticStorage:
    """Return the current storage. Defaults to the configured backend if not set."""
    global _storage
    if _storage is None:
        _storage = open_storage()
    return _storage


def set_storage(storage: Optional[PlatformAgnosticStorage]) -> None:
    """Set (or with None, clear) the process default storage."""
    global _storage
    _storage = storage
