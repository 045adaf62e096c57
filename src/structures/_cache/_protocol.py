"""Structural interface shared by cache implementations."""

from collections.abc import Hashable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Cache[K: Hashable, V](Protocol):
    """A bounded key-value store whose reads may affect what it keeps."""

    def get(self, key: K, default: V | None = None) -> V | None:
        """Read a value, recording the access."""
        ...

    def insert(self, key: K, value: V) -> V | None:
        """Store a value and return the one it replaced, if any."""
        ...

    def remove(self, key: K) -> V | None:
        """Drop a key and return its value, if any."""
        ...

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...
