"""
Preferences backend: contract calls map 1:1 onto a PreferencesHandle.
Writes open an editor, apply one mutation and return before the host reaches disk.
"""

from __future__ import annotations

from typing import Optional

from agnostic_storage.core.validation import require_bool, require_int32, require_string

from .contract import PlatformAgnosticStorage
from .handles import PreferencesHandle


class PreferencesStorage(PlatformAgnosticStorage):
    """Backend over a preferences store that already handles defaults and absence."""

    def __init__(self, prefs: PreferencesHandle) -> None:
        self._prefs = prefs

    @property
    def handle(self) -> PreferencesHandle:
        return self._prefs

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._prefs.get_string(key, default)

    def put_string(self, key: str, value: str) -> None:
        require_string(value)
        self._prefs.edit().put_string(key, value).apply()

    def get_int(self, key: str, default: int = 0) -> int:
        return self._prefs.get_int(key, default)

    def put_int(self, key: str, value: int) -> None:
        require_int32(value)
        self._prefs.edit().put_int(key, value).apply()

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return self._prefs.get_boolean(key, default)

    def put_boolean(self, key: str, value: bool) -> None:
        require_bool(value)
        self._prefs.edit().put_boolean(key, value).apply()

    def remove(self, key: str) -> None:
        self._prefs.edit().remove(key).apply()
