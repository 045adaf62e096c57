"""Bounded caches.

This module contains:
- LruCache[K, V]: A fixed-capacity cache with least-recently-used eviction
- RecencyList[K]: The index-addressed linked list that orders its keys
- Cache[K, V]: The structural protocol caches satisfy
"""

from ._lru import LruCache
from ._protocol import Cache
from ._recency import RecencyList

__all__ = ["Cache", "LruCache", "RecencyList"]
