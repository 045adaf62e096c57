"""Recency ordering for the LRU cache."""

from collections.abc import Iterator


class RecencyList[K]:
    """Doubly linked list of keys stored in an arena of slots.

    Nodes are addressed by integer slot indices rather than object
    references, so owners can keep an index per key without creating
    reference cycles. Slot 0 is a sentinel: its ``next`` link is the front
    (most recent) node and its ``prev`` link the back (least recent) node.
    Released slots are reused by later pushes.
    """

    __slots__ = ("_free", "_keys", "_len", "_next", "_prev")

    def __init__(self) -> None:
        self._keys: list[K | None] = [None]
        self._prev: list[int] = [0]
        self._next: list[int] = [0]
        self._free: list[int] = []
        self._len = 0

    def push_front(self, key: K) -> int:
        """Add key as the most recent node and return its slot."""
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
        else:
            slot = len(self._keys)
            self._keys.append(key)
            self._prev.append(0)
            self._next.append(0)
        self._link_front(slot)
        self._len += 1
        return slot

    def move_to_front(self, slot: int) -> None:
        """Make the node in slot the most recent one."""
        if self._next[0] == slot:
            return
        self._unlink(slot)
        self._link_front(slot)

    def remove(self, slot: int) -> K:
        """Unlink the node in slot, release the slot and return its key."""
        key = self._keys[slot]
        self._unlink(slot)
        self._keys[slot] = None
        self._free.append(slot)
        self._len -= 1
        return key  # type: ignore[return-value]

    def back(self) -> int | None:
        """Slot of the least recent node, or None when empty."""
        slot = self._prev[0]
        return slot or None

    def key_at(self, slot: int) -> K:
        return self._keys[slot]  # type: ignore[return-value]

    def clear(self) -> None:
        self._keys = [None]
        self._prev = [0]
        self._next = [0]
        self._free = []
        self._len = 0

    def _link_front(self, slot: int) -> None:
        first = self._next[0]
        self._prev[slot] = 0
        self._next[slot] = first
        self._prev[first] = slot
        self._next[0] = slot

    def _unlink(self, slot: int) -> None:
        before, after = self._prev[slot], self._next[slot]
        self._next[before] = after
        self._prev[after] = before

    def __iter__(self) -> Iterator[K]:
        """Iterate over keys from most to least recent."""
        slot = self._next[0]
        while slot:
            yield self._keys[slot]  # type: ignore[misc]
            slot = self._next[slot]

    def __len__(self) -> int:
        return self._len
