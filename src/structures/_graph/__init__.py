"""Weighted directed graph and its algorithms.

This module contains:
- Graph[T]: A mutable, append-only weighted directed graph
- dijkstra, floyd_warshall, topological_sort: Algorithms over successor mappings
"""

from ._algorithms import dijkstra, floyd_warshall, follow_path, resolve_path, topological_sort
from ._graph import Graph
from ._types import Edge, ShortestPath

__all__ = [
    "Edge",
    "Graph",
    "ShortestPath",
    "dijkstra",
    "floyd_warshall",
    "follow_path",
    "resolve_path",
    "topological_sort",
]
