"""
Defaults backend: contract over a DefaultsHandle whose int/bool reads cannot signal absence.

The host's integer_for_key / bool_for_key return 0 / False for a missing key.
get_int and get_boolean compensate by comparing the host result with the
caller default:

- result != default: the key holds a different value; return the result.
- result == default: "absent" and "stored value equal to default" look the
  same; return default.

So a stored value equal to the requested default is indistinguishable from
absence, and a missing key read with a non-zero default yields the host zero
value. Both are kept as-is so every implementation of this backend agrees.
get_string needs no compensation: the host returns None for absence.
"""

from __future__ import annotations

from typing import Optional

from agnostic_storage.core.validation import (
    require_bool,
    require_int32,
    require_key,
    require_string,
)

from .contract import PlatformAgnosticStorage
from .handles import DefaultsHandle


class DefaultsStorage(PlatformAgnosticStorage):
    """
    Backend over a user-defaults style store.

    Writes and remove() reject blank keys with InvalidKeyError before touching
    the host. With no handle, the process-wide standard_defaults() store is used.
    """

    def __init__(self, defaults: Optional[DefaultsHandle] = None) -> None:
        if defaults is None:
            from agnostic_storage.host.json_defaults import standard_defaults

            defaults = standard_defaults()
        self._defaults = defaults

    @property
    def handle(self) -> DefaultsHandle:
        return self._defaults

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._defaults.string_for_key(key)
        return default if value is None else value

    def put_string(self, key: str, value: str) -> None:
        self._defaults.set_object(require_key(key), require_string(value))

    def get_int(self, key: str, default: int = 0) -> int:
        result = int(self._defaults.integer_for_key(key))
        if result != default:
            return result
        return default

    def put_int(self, key: str, value: int) -> None:
        self._defaults.set_integer(require_key(key), require_int32(value))

    def get_boolean(self, key: str, default: bool = False) -> bool:
        result = bool(self._defaults.bool_for_key(key))
        if result != default:
            return result
        return default

    def put_boolean(self, key: str, value: bool) -> None:
        self._defaults.set_bool(require_key(key), require_bool(value))

    def remove(self, key: str) -> None:
        self._defaults.remove_object_for_key(require_key(key))
