"""
Top-level public API surface. Stable facades only.
Canonical entrypoint: import agnostic_storage; use agnostic_storage.store for the contract
and backends, agnostic_storage.host for the bundled host stores. Does not import cli.
"""

from __future__ import annotations

from . import config, core, host, store
from ._version import __version__
from .core.errors import AgnosticStorageError, InvalidKeyError, InvalidValueError
from .store import DefaultsStorage, PlatformAgnosticStorage, PreferencesStorage, open_storage

# Do not add exports without updating __all__.
__all__ = [
    "AgnosticStorageError",
    "DefaultsStorage",
    "InvalidKeyError",
    "InvalidValueError",
    "PlatformAgnosticStorage",
    "PreferencesStorage",
    "__version__",
    "config",
    "core",
    "host",
    "open_storage",
    "store",
]
