"""
Store: the storage contract, its two backend adapters, and backend assembly.
No persistence engine here; host stores live in agnostic_storage.host.
"""

from __future__ import annotations

from .backend import close_storage, get_storage, open_storage, set_storage
from .contract import PlatformAgnosticStorage
from .defaults_backend import DefaultsStorage
from .handles import DefaultsHandle, PreferencesEditor, PreferencesHandle
from .preferences_backend import PreferencesStorage

__all__ = [
    "DefaultsHandle",
    "DefaultsStorage",
    "PlatformAgnosticStorage",
    "PreferencesEditor",
    "PreferencesHandle",
    "PreferencesStorage",
    "close_storage",
    "get_storage",
    "open_storage",
    "set_storage",
]
