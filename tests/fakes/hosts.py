"""
Fake host stores for adapter tests: in-memory, no disk, call recording.

FakePreferences behaves like a preferences host (caller defaults honored).
FakeDefaults behaves like a defaults host (0 / False returned for absent keys).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


class FakeEditor:
    def __init__(self, host: "FakePreferences") -> None:
        self._host = host
        self.changes: Dict[str, Any] = {}
        self.applied = False
        self.committed = False

    def put_string(self, key: str, value: str) -> "FakeEditor":
        self.changes[key] = value
        return self

    def put_int(self, key: str, value: int) -> "FakeEditor":
        self.changes[key] = value
        return self

    def put_boolean(self, key: str, value: bool) -> "FakeEditor":
        self.changes[key] = value
        return self

    def remove(self, key: str) -> "FakeEditor":
        self.changes[key] = None
        return self

    def _publish(self) -> None:
        for key, value in self.changes.items():
            if value is None:
                self._host.values.pop(key, None)
            else:
                self._host.values[key] = value

    def apply(self) -> None:
        self.applied = True
        self._publish()

    def commit(self) -> bool:
        self.committed = True
        self._publish()
        return True


class FakePreferences:
    """In-memory preferences host. Every edit() is kept in .editors."""

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self.values: Dict[str, Any] = dict(values or {})
        self.editors: List[FakeEditor] = []

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        return self.values.get(key, default)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return self.values.get(key, default)

    def edit(self) -> FakeEditor:
        editor = FakeEditor(self)
        self.editors.append(editor)
        return editor


class FakeDefaults:
    """In-memory defaults host. Setter calls are kept in .calls as (method, key, value)."""

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self.values: Dict[str, Any] = dict(values or {})
        self.calls: List[Tuple[str, str, Any]] = []

    def string_for_key(self, key: str) -> Optional[str]:
        value = self.values.get(key)
        return value if isinstance(value, str) else None

    def integer_for_key(self, key: str) -> int:
        value = self.values.get(key)
        return int(value) if isinstance(value, int) else 0

    def bool_for_key(self, key: str) -> bool:
        value = self.values.get(key)
        return bool(value) if isinstance(value, (bool, int)) else False

    def set_object(self, key: str, value: object) -> None:
        self.calls.append(("set_object", key, value))
        self.values[key] = value

    def set_integer(self, key: str, value: int) -> None:
        self.calls.append(("set_integer", key, value))
        self.values[key] = value

    def set_bool(self, key: str, value: bool) -> None:
        self.calls.append(("set_bool", key, value))
        self.values[key] = value

    def remove_object_for_key(self, key: str) -> None:
        self.calls.append(("remove_object_for_key", key, None))
        self.values.pop(key, None)
