"""
Host handle interfaces the backend adapters depend on.

- PreferencesHandle: typed reads with caller defaults, mutations through an editor.
- DefaultsHandle: typed reads that return the host's zero value when absent, direct setters.

agnostic_storage.host ships one implementation of each; tests use in-memory fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class PreferencesEditor(Protocol):
    """Pending mutations; apply() publishes without waiting for disk."""

    def put_string(self, key: str, value: str) -> "PreferencesEditor": ...

    def put_int(self, key: str, value: int) -> "PreferencesEditor": ...

    def put_boolean(self, key: str, value: bool) -> "PreferencesEditor": ...

    def remove(self, key: str) -> "PreferencesEditor": ...

    def apply(self) -> None: ...

    def commit(self) -> bool: ...


@runtime_checkable
class PreferencesHandle(Protocol):
    """Preferences store whose reads honor the caller default and distinguish absent keys."""

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def get_int(self, key: str, default: int = 0) -> int: ...

    def get_boolean(self, key: str, default: bool = False) -> bool: ...

    def edit(self) -> PreferencesEditor: ...


@runtime_checkable
class DefaultsHandle(Protocol):
    """Defaults store; integer_for_key/bool_for_key return 0/False when the key is absent."""

    def string_for_key(self, key: str) -> Optional[str]: ...

    def integer_for_key(self, key: str) -> int: ...

    def bool_for_key(self, key: str) -> bool: ...

    def set_object(self, key: str, value: object) -> None: ...

    def set_integer(self, key: str, value: int) -> None: ...

    def set_bool(self, key: str, value: bool) -> None: ...

    def remove_object_for_key(self, key: str) -> None: ...
