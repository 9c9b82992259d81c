"""
Storage contract: get/put/remove over str, 32-bit int and bool under string keys.
Every backend implements this interface identically; reads fall back to the caller default.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class PlatformAgnosticStorage(ABC):
    """
    Key-value contract shared by all backends.

    Reading a key with an accessor that does not match the type it was written
    with is undefined (host behavior); keeping accessors consistent is the
    caller's job. Writes return once handed to the host; durability is
    best-effort and there is no completion signal.
    """

    @abstractmethod
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Stored string for key, or default if absent."""
        ...

    @abstractmethod
    def put_string(self, key: str, value: str) -> None: ...

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int:
        """Stored integer for key, or default if absent."""
        ...

    @abstractmethod
    def put_int(self, key: str, value: int) -> None: ...

    @abstractmethod
    def get_boolean(self, key: str, default: bool = False) -> bool:
        """Stored boolean for key, or default if absent."""
        ...

    @abstractmethod
    def put_boolean(self, key: str, value: bool) -> None: ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete any entry under key. No-op when absent."""
        ...
