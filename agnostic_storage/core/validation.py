"""
Argument checks shared by the backend adapters.
Each check returns its argument unchanged or raises a package ValueError subclass.
"""

from __future__ import annotations

from .errors import InvalidKeyError, InvalidValueError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def require_key(key: str) -> str:
    """Non-blank string key."""
    if not isinstance(key, str) or not key.strip():
        raise InvalidKeyError(f"key must be a non-blank string, got {key!r}")
    return key


def require_string(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(f"expected str, got {type(value).__name__}")
    return value


def require_int32(value: int) -> int:
    # bool is an int subclass; reject it so put_int(k, True) does not slip through
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"expected int, got {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidValueError(f"integer out of 32-bit range: {value}")
    return value


def require_bool(value: bool) -> bool:
    if not isinstance(value, bool):
        raise InvalidValueError(f"expected bool, got {type(value).__name__}")
    return value


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "require_bool",
    "require_int32",
    "require_key",
    "require_string",
]
