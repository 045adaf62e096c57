"""Least-recently-used cache."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from structures._errors import CapacityError, StaleIteratorError

from ._recency import RecencyList

if TYPE_CHECKING:
    from structures._config import StructuresConfig

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Entry[V]:
    slot: int
    value: V


class LruCache[K: Hashable, V]:
    """A fixed-capacity mapping that evicts the least recently used key.

    Every operation runs in constant time: a dict maps each key to its value
    and its slot in a :class:`RecencyList`, and promoting a key only relinks
    that slot to the front.

    ``get`` and ``insert`` count as uses and promote the key. ``peek``,
    ``contains`` and ``peek_lru`` do not. A cache with capacity 0 ignores
    every insert.

    Iteration yields keys from most to least recently used. Any operation
    that changes membership or recency order invalidates live iterators,
    which then raise :class:`StaleIteratorError` on their next step.

    Example:
        >>> cache = LruCache(2)
        >>> cache.insert("a", 1)
        >>> cache.insert("b", 2)
        >>> cache.get("a")
        1
        >>> cache.insert("c", 3)
        >>> "b" in cache
        False

    """

    __slots__ = ("_capacity", "_entries", "_order", "_version")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            msg = f"Cache capacity must be non-negative, got {capacity}"
            raise CapacityError(msg)
        self._capacity = capacity
        self._entries: dict[K, _Entry[V]] = {}
        self._order: RecencyList[K] = RecencyList()
        self._version = 0

    @classmethod
    def with_capacity(cls, capacity: int) -> LruCache[K, V]:
        """Create an empty cache holding at most capacity entries."""
        return cls(capacity)

    @classmethod
    def from_config(cls, config: StructuresConfig) -> LruCache[K, V]:
        """Create an empty cache sized from configuration."""
        return cls(config.cache_capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._entries

    def contains(self, key: K) -> bool:
        """Check for key without promoting it."""
        return key in self._entries

    def peek(self, key: K, default: V | None = None) -> V | None:
        """Read the value for key without promoting it."""
        entry = self._entries.get(key)
        if entry is None:
            return default
        return entry.value

    def get(self, key: K, default: V | None = None) -> V | None:
        """Read the value for key and mark it most recently used.

        The stored object itself is returned, so mutable values can be
        updated in place.
        """
        entry = self._entries.get(key)
        if entry is None:
            return default
        self._promote(entry)
        return entry.value

    def insert(self, key: K, value: V) -> V | None:
        """Store value under key and mark it most recently used.

        Replacing an existing key never evicts. Adding a new key to a full
        cache evicts the least recently used entry first.

        Returns:
            The previous value for key, or None if key was not present.

        """
        entry = self._entries.get(key)
        if entry is not None:
            previous = entry.value
            entry.value = value
            self._promote(entry)
            return previous

        if self._capacity == 0:
            logger.debug("Ignoring insert of %r into zero-capacity cache", key)
            return None
        if len(self._entries) >= self._capacity:
            evicted = self._evict()
            logger.debug("Evicted least recently used key %r", evicted)

        slot = self._order.push_front(key)
        self._entries[key] = _Entry(slot, value)
        self._version += 1
        return None

    def remove(self, key: K) -> V | None:
        """Drop key from the cache.

        Returns:
            The removed value, or None if key was not present.

        """
        entry = self._entries.pop(key, None)
        if entry is None:
            return None
        self._order.remove(entry.slot)
        self._version += 1
        return entry.value

    def peek_lru(self) -> tuple[K, V] | None:
        """The least recently used entry, without promoting it."""
        slot = self._order.back()
        if slot is None:
            return None
        key = self._order.key_at(slot)
        return key, self._entries[key].value

    def pop_lru(self) -> tuple[K, V] | None:
        """Remove and return the least recently used entry."""
        item = self.peek_lru()
        if item is not None:
            self._evict()
        return item

    def clear(self) -> None:
        self._entries.clear()
        self._order.clear()
        self._version += 1

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over ``(key, value)`` pairs from most to least recently used."""
        return ((key, self._entries[key].value) for key in self)

    def _promote(self, entry: _Entry[V]) -> None:
        self._order.move_to_front(entry.slot)
        self._version += 1

    def _evict(self) -> K:
        slot = self._order.back()
        assert slot is not None
        key = self._order.remove(slot)
        del self._entries[key]
        self._version += 1
        return key

    def _iter_keys(self, version: int) -> Iterator[K]:
        self._check_version(version)
        for key in self._order:
            yield key
            self._check_version(version)

    def _check_version(self, version: int) -> None:
        if self._version != version:
            msg = "Cache was modified during iteration"
            raise StaleIteratorError(msg)

    def __iter__(self) -> Iterator[K]:
        """Iterate over keys from most to least recently used."""
        return self._iter_keys(self._version)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, len={len(self)})"
