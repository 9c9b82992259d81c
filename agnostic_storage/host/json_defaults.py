"""
Defaults host store: in-memory cache of a JSON object file, persisted asynchronously.

Typed accessors follow the user-defaults conventions: integer_for_key and
bool_for_key return the store's own zero value (0 / False) when a key is
absent, so they cannot tell "absent" from "stored zero". string_for_key
returns None when absent. object_for_key exposes the raw value.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .writer import BackgroundWriter

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"yes", "true", "1"})

# one JsonDefaults per resolved file, so a file never has two competing caches
_registry: Dict[Path, "JsonDefaults"] = {}
_registry_lock = threading.Lock()


class JsonDefaults:
    """
    Defaults store over a JSON file. Setters update the cache now and the file later.

    After close() the store stays usable: setters persist synchronously instead.
    Use open_defaults() rather than the constructor when several callers share a file.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).resolve()
        self._lock = threading.Lock()
        self._values: Dict[str, Any] = self._load()
        self._scheduled = False
        self._persist_lock = threading.Lock()
        self._writer = BackgroundWriter(f"defaults:{self.path.name}")

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object, got {type(data).__name__}")
        logger.debug("Loaded %d defaults from %s", len(data), self.path)
        return data

    # -- reads ---------------------------------------------------------------

    def object_for_key(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)

    def string_for_key(self, key: str) -> Optional[str]:
        value = self.object_for_key(key)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    def integer_for_key(self, key: str) -> int:
        value = self.object_for_key(key)
        if isinstance(value, (bool, int)):
            return int(value)
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return 0
        return 0

    def bool_for_key(self, key: str) -> bool:
        value = self.object_for_key(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return False

    # -- writes --------------------------------------------------------------

    def set_object(self, key: str, value: Any) -> None:
        if value is None:
            self.remove_object_for_key(key)
            return
        with self._lock:
            self._values[key] = value
        self._schedule()

    def set_integer(self, key: str, value: int) -> None:
        self.set_object(key, int(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.set_object(key, bool(value))

    def remove_object_for_key(self, key: str) -> None:
        with self._lock:
            if key not in self._values:
                return
            del self._values[key]
        self._schedule()

    def _schedule(self) -> None:
        if self._writer.closed:
            self._persist()
            return
        with self._lock:
            if self._scheduled:
                return
            self._scheduled = True
        self._writer.submit(self._persist)

    def _persist(self) -> None:
        with self._persist_lock:
            with self._lock:
                snapshot = dict(self._values)
                self._scheduled = False
            self._write_file(snapshot)

    def _write_file(self, snapshot: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Persisted %d defaults to %s", len(snapshot), self.path)

    def synchronize(self) -> None:
        """Wait until pending changes are written to disk."""
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()

    def __enter__(self) -> "JsonDefaults":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def open_defaults(path: Union[str, Path]) -> JsonDefaults:
    """Shared JsonDefaults for path; every caller of the same file gets the same cache."""
    resolved = Path(path).resolve()
    with _registry_lock:
        defaults = _registry.get(resolved)
        if defaults is None:
            defaults = JsonDefaults(resolved)
            _registry[resolved] = defaults
        return defaults


def standard_defaults() -> JsonDefaults:
    """Process-wide defaults store at the configured path, created on first use."""
    from agnostic_storage.config import defaults_path

    return open_defaults(defaults_path())


def reset_standard_defaults() -> None:
    """Close and forget every shared store (the next open_defaults() reloads from disk)."""
    with _registry_lock:
        stores = list(_registry.values())
        _registry.clear()
    for defaults in stores:
        defaults.close()
