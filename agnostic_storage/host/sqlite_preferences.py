"""
Preferences host store: typed key-value map persisted to a single SQLite table.

Reads are served from an in-memory map loaded at open. Mutations go through an
Editor: apply() updates memory at once and queues the disk write on a
BackgroundWriter (fire-and-forget); commit() writes synchronously.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from .sqlite_session import sqlite_conn
from .writer import BackgroundWriter

logger = logging.getLogger(__name__)

Value = Union[str, int, bool]

_SCHEMA = """
CREATE TABLE IF NOT EXISTS preferences (
    key TEXT PRIMARY KEY,
    kind TEXT NOT NULL,
    value TEXT NOT NULL
);
"""

_UPSERT = (
    "INSERT INTO preferences (key, kind, value) VALUES (?, ?, ?) "
    "ON CONFLICT(key) DO UPDATE SET kind = excluded.kind, value = excluded.value"
)


def _kind_of(value: Value) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "int"
    return "string"


def _encode(value: Value) -> Tuple[str, str]:
    kind = _kind_of(value)
    if kind == "boolean":
        return kind, "1" if value else "0"
    return kind, str(value)


def _decode(kind: str, raw: str) -> Value:
    if kind == "boolean":
        return raw == "1"
    if kind == "int":
        return int(raw)
    return raw


class Editor:
    """Batch of pending mutations against one SQLitePreferences. Use once: apply() or commit()."""

    def __init__(self, prefs: "SQLitePreferences") -> None:
        self._prefs = prefs
        # None marks a removal
        self._changes: Dict[str, Optional[Value]] = {}

    def put_string(self, key: str, value: str) -> "Editor":
        self._changes[key] = value
        return self

    def put_int(self, key: str, value: int) -> "Editor":
        self._changes[key] = value
        return self

    def put_boolean(self, key: str, value: bool) -> "Editor":
        self._changes[key] = value
        return self

    def remove(self, key: str) -> "Editor":
        self._changes[key] = None
        return self

    def apply(self) -> None:
        """Publish to memory now; persist in the background with no completion signal."""
        self._prefs._apply(dict(self._changes))

    def commit(self) -> bool:
        """Publish to memory and persist before returning. Disk errors propagate."""
        self._prefs._commit(dict(self._changes))
        return True


class SQLitePreferences:
    """
    Preferences store backed by a SQLite file.

    Accessors take the caller's default and distinguish absent from stored.
    Reading a key with the wrong accessor raises TypeError. After close(),
    apply() persists synchronously.
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = str(Path(db_path).resolve())
        self._lock = threading.Lock()
        self._values: Dict[str, Value] = {}
        self._load()
        self._writer = BackgroundWriter(f"preferences:{Path(self.db_path).name}")

    def _load(self) -> None:
        with sqlite_conn(self.db_path) as conn:
            conn.executescript(_SCHEMA)
            rows = conn.execute("SELECT key, kind, value FROM preferences").fetchall()
        self._values = {key: _decode(kind, raw) for key, kind, raw in rows}
        logger.debug("Loaded %d preferences from %s", len(self._values), self.db_path)

    def _typed(self, key: str, kind: str) -> Optional[Value]:
        with self._lock:
            value = self._values.get(key)
        if value is None:
            return None
        actual = _kind_of(value)
        if actual != kind:
            raise TypeError(f"preference {key!r} holds {actual}, not {kind}")
        return value

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._typed(key, "string")
        return default if value is None else value  # type: ignore[return-value]

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._typed(key, "int")
        return default if value is None else value  # type: ignore[return-value]

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self._typed(key, "boolean")
        return default if value is None else value  # type: ignore[return-value]

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def edit(self) -> Editor:
        return Editor(self)

    def _publish(self, changes: Dict[str, Optional[Value]]) -> None:
        with self._lock:
            for key, value in changes.items():
                if value is None:
                    self._values.pop(key, None)
                else:
                    self._values[key] = value

    def _persist(self, changes: Dict[str, Optional[Value]]) -> None:
        with sqlite_conn(self.db_path) as conn:
            for key, value in changes.items():
                if value is None:
                    conn.execute("DELETE FROM preferences WHERE key = ?", (key,))
                else:
                    conn.execute(_UPSERT, (key, *_encode(value)))
            conn.commit()

    def _apply(self, changes: Dict[str, Optional[Value]]) -> None:
        self._publish(changes)
        if self._writer.closed:
            self._persist(changes)
            return
        self._writer.submit(lambda: self._persist(changes))

    def _commit(self, changes: Dict[str, Optional[Value]]) -> None:
        self._publish(changes)
        # earlier apply() writes must land first so this commit is not overwritten
        self._writer.flush()
        self._persist(changes)

    def flush(self) -> None:
        """Wait until every apply() so far is on disk."""
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()

    def __enter__(self) -> "SQLitePreferences":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
