"""Shared fixtures: isolate env config and process-wide stores between tests."""

from __future__ import annotations

import pytest

from agnostic_storage.host.json_defaults import reset_standard_defaults
from agnostic_storage.store.backend import set_storage

_ENV = (
    "AGNOSTIC_STORAGE_BACKEND",
    "AGNOSTIC_STORAGE_PREFERENCES_PATH",
    "AGNOSTIC_STORAGE_DEFAULTS_PATH",
    "AGNOSTIC_STORAGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_storage(tmp_path, monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AGNOSTIC_STORAGE_PREFERENCES_PATH", str(tmp_path / "prefs.sqlite"))
    monkeypatch.setenv("AGNOSTIC_STORAGE_DEFAULTS_PATH", str(tmp_path / "defaults.json"))
    yield
    set_storage(None)
    reset_standard_defaults()
