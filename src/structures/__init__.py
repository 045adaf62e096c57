"""Weighted directed graphs with shortest-path and ordering algorithms, and an LRU cache."""

__all__ = [
    "Cache",
    "CapacityError",
    "ConfigError",
    "Edge",
    "Graph",
    "InvalidWeightError",
    "LruCache",
    "RecencyList",
    "ShortestPath",
    "StaleIteratorError",
    "StructuresConfig",
    "StructuresError",
    "dijkstra",
    "floyd_warshall",
    "get_config",
    "load_config",
    "topological_sort",
]

from ._cache import Cache, LruCache, RecencyList
from ._config import ConfigError, StructuresConfig, get_config, load_config
from ._errors import CapacityError, InvalidWeightError, StaleIteratorError, StructuresError
from ._graph import Edge, Graph, ShortestPath, dijkstra, floyd_warshall, topological_sort
