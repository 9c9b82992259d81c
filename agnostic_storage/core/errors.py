"""
Shared exception types for agnostic_storage.
Stable surface; extend only.
"""

from __future__ import annotations


class AgnosticStorageError(Exception):
    """Base exception for agnostic_storage; catch this for any package-raised error."""

    pass


class InvalidKeyError(AgnosticStorageError, ValueError):
    """Key rejected before reaching the host store (blank key on a write path)."""

    pass


class InvalidValueError(AgnosticStorageError, ValueError):
    """Value of the wrong type, or an integer outside the signed 32-bit range."""

    pass


__all__ = ["AgnosticStorageError", "InvalidKeyError", "InvalidValueError"]
