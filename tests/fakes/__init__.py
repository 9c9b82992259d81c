"""Fake host stores for backend adapter tests (no disk, no threads)."""

from .hosts import FakeDefaults, FakeEditor, FakePreferences

__all__ = ["FakeDefaults", "FakeEditor", "FakePreferences"]
