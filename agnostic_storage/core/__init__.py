"""
Stable facade: errors and argument validation only. No store, host, or cli.
Do not add exports without updating __all__.
"""

from __future__ import annotations

from .errors import AgnosticStorageError, InvalidKeyError, InvalidValueError
from .validation import require_bool, require_int32, require_key, require_string

# Do not add exports without updating __all__.
__all__ = [
    "AgnosticStorageError",
    "InvalidKeyError",
    "InvalidValueError",
    "require_bool",
    "require_int32",
    "require_key",
    "require_string",
]
