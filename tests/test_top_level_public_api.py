"""
Tests for the top-level public API (agnostic_storage/__init__.py).
Ensures __version__, __all__, and facade re-exports are present and that importing does not pull cli.
"""

from __future__ import annotations

import sys

# Expected top-level __all__ (must match agnostic_storage/__init__.py exactly).
EXPECTED_TOP_LEVEL_ALL = {
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
}


def test_top_level_has_version():
    import agnostic_storage as ags

    assert ags.__version__ == "0.1.0"


def test_top_level_has_explicit_all():
    import agnostic_storage as ags

    assert set(ags.__all__) == EXPECTED_TOP_LEVEL_ALL


def test_top_level_each_all_name_exported():
    import agnostic_storage as ags

    for name in ags.__all__:
        assert hasattr(ags, name), f"agnostic_storage missing {name}"


def test_cli_not_exported():
    import agnostic_storage as ags

    assert "cli" not in ags.__all__


def test_backends_share_contract():
    import agnostic_storage as ags

    assert issubclass(ags.PreferencesStorage, ags.PlatformAgnosticStorage)
    assert issubclass(ags.DefaultsStorage, ags.PlatformAgnosticStorage)
