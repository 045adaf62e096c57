"""Weighted directed graph."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from structures._errors import InvalidWeightError, StaleIteratorError

from ._algorithms import dijkstra, floyd_warshall, follow_path, resolve_path, topological_sort
from ._types import Edge, ShortestPath

if TYPE_CHECKING:
    from structures._config import StructuresConfig

logger = logging.getLogger(__name__)


class Graph[T: Hashable]:
    """A directed graph with one weighted edge per ordered vertex pair.

    Vertices are any hashable values. The graph only grows: adding an edge
    registers both endpoints, and adding an edge that already exists
    overwrites its weight.

    Shortest-path queries require non-negative weights. With
    ``check_weights`` enabled they raise :class:`InvalidWeightError` when a
    negative edge is present; otherwise their result is unspecified.

    Iterators returned by :meth:`edges` fail fast: any mutation made after
    the iterator was created makes its next step raise
    :class:`StaleIteratorError`.

    Example:
        >>> graph = Graph([(1, 2, 7), (1, 3, 9), (3, 2, 1)])
        >>> graph.shortest_path(1, 2).vertices
        (1, 2)
        >>> graph.topo_sort()
        [1, 3, 2]

    """

    def __init__(
        self,
        edges: Iterable[tuple[T, T] | tuple[T, T, Any]] = (),
        *,
        check_weights: bool = True,
    ) -> None:
        self._successors: dict[T, dict[T, Any]] = {}
        self._negative: set[tuple[T, T]] = set()
        self._version = 0
        self.check_weights = check_weights
        self.extend(edges)

    @classmethod
    def from_config(
        cls,
        config: StructuresConfig,
        edges: Iterable[tuple[T, T] | tuple[T, T, Any]] = (),
    ) -> Graph[T]:
        """Build a graph using the weight policy from configuration."""
        return cls(edges, check_weights=config.check_weights)

    # --- mutation ---

    def add_vertex(self, vertex: T) -> None:
        """Register a vertex, which may stay isolated."""
        if vertex not in self._successors:
            self._successors[vertex] = {}
            self._version += 1

    def add_edge(self, source: T, target: T, weight: Any = 1) -> None:
        """Insert the edge ``source -> target``, or overwrite its weight.

        Self-loops and negative weights are accepted here; negative weights
        are only rejected by shortest-path queries.
        """
        self._successors.setdefault(source, {})[target] = weight
        self._successors.setdefault(target, {})
        if weight < 0:
            self._negative.add((source, target))
        else:
            self._negative.discard((source, target))
        self._version += 1

    def extend(self, edges: Iterable[tuple[T, T] | tuple[T, T, Any]]) -> None:
        """Add ``(source, target)`` or ``(source, target, weight)`` edges."""
        for edge in edges:
            self.add_edge(*edge)

    # --- queries ---

    def vertices(self) -> frozenset[T]:
        """All vertices in the graph."""
        return frozenset(self._successors)

    def vertices_outgoing_from(self, source: T) -> frozenset[T]:
        """Vertices reachable from source over exactly one edge.

        Returns an empty set when source is unknown or has no outgoing edges.
        """
        return frozenset(self._successors.get(source, ()))

    def get_weight(self, source: T, target: T) -> Any | None:
        """Weight of the edge ``source -> target``, or None if there is none."""
        return self._successors.get(source, {}).get(target)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges.

        Each call returns a fresh iterator. The iterator raises
        :class:`StaleIteratorError` if the graph is modified after it was created.
        """
        return self._iter_edges(self._version)

    def _iter_edges(self, version: int) -> Iterator[Edge]:
        self._check_version(version)
        for source, targets in self._successors.items():
            for target, weight in targets.items():
                yield Edge(source, target, weight)
                self._check_version(version)

    def _check_version(self, version: int) -> None:
        if self._version != version:
            msg = "Graph was modified during edge iteration"
            raise StaleIteratorError(msg)

    # --- algorithms ---

    def shortest_path(self, source: T, target: T) -> ShortestPath[T] | None:
        """Find a minimum-weight path with Dijkstra's algorithm.

        Returns:
            The path, or None if either vertex is unknown or target is
            unreachable from source.

        Raises:
            InvalidWeightError: If weight checking is on and a negative edge exists.

        """
        if source not in self._successors or target not in self._successors:
            return None
        self._validate_weights()

        distances, previous = dijkstra(self._successors, source, target)
        if target not in distances:
            return None
        return ShortestPath(distances[target], tuple(resolve_path(previous, source, target)))

    def shortest_paths_from(self, source: T) -> dict[T, ShortestPath[T]]:
        """Find minimum-weight paths from source to every reachable vertex.

        Returns:
            Mapping from target to path; source maps to its zero-weight path.
            Empty if source is unknown.

        Raises:
            InvalidWeightError: If weight checking is on and a negative edge exists.

        """
        if source not in self._successors:
            return {}
        self._validate_weights()

        distances, previous = dijkstra(self._successors, source)
        return {
            target: ShortestPath(weight, tuple(resolve_path(previous, source, target)))
            for target, weight in distances.items()
        }

    def shortest_paths(self) -> dict[tuple[T, T], ShortestPath[T] | None]:
        """Find minimum-weight paths between all vertex pairs with Floyd-Warshall.

        Returns:
            Mapping from every ordered ``(source, target)`` pair to its path,
            or None when target is unreachable from source.

        Raises:
            InvalidWeightError: If weight checking is on and a negative edge exists.

        """
        self._validate_weights()

        vertices = list(self._successors)
        distances, following = floyd_warshall(vertices, self._successors)

        paths: dict[tuple[T, T], ShortestPath[T] | None] = {}
        for source in vertices:
            for target in vertices:
                pair = (source, target)
                if pair in distances:
                    paths[pair] = ShortestPath(distances[pair], tuple(follow_path(following, source, target)))
                else:
                    paths[pair] = None
        return paths

    def topo_sort(self) -> list[T] | None:
        """Order vertices so that every edge points forward.

        Returns:
            The ordering, or None if the graph contains a cycle (self-loops included).

        """
        return topological_sort(self._successors)

    def _validate_weights(self) -> None:
        if self.check_weights and self._negative:
            logger.debug("Rejecting shortest-path query: %d negative edges", len(self._negative))
            source, target = next(iter(self._negative))
            raise InvalidWeightError(source, target, self._successors[source][target])

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._successors)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._successors

    def __repr__(self) -> str:
        edge_count = sum(len(targets) for targets in self._successors.values())
        return f"{type(self).__name__}(vertices={len(self)}, edges={edge_count})"
