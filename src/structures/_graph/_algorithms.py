"""Graph algorithms over successor mappings."""

import heapq
import itertools
import logging
from collections import defaultdict, deque
from collections.abc import Collection, Hashable, Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)


def topological_sort[T: Hashable](successors: Mapping[T, Collection[T]]) -> list[T] | None:
    """Sort a graph topologically (sources before their successors).

    Given a graph represented as a mapping from nodes to their successors,
    return nodes in an order where each node appears before all of its
    successors (Kahn's algorithm).

    Args:
        successors: Mapping from node to the nodes its outgoing edges point to.

    Returns:
        List of nodes in topological order, or None if the graph contains a cycle.

    Example:
        >>> topological_sort({"a": ["b"], "b": ["c"], "c": []})
        ['a', 'b', 'c']
        >>> topological_sort({"a": ["b"], "b": ["a"]}) is None
        True

    """
    # Calculate in-degree for each node
    indegree: defaultdict[T, int] = defaultdict(int)
    for node, targets in successors.items():
        indegree[node] = indegree.get(node, 0)
        for target in targets:
            indegree[target] += 1

    # Start with nodes that have no predecessors (in-degree 0)
    queue = deque([node for node, deg in indegree.items() if deg == 0])
    order: list[T] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for successor in successors.get(node, ()):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                queue.append(successor)

    if len(order) != len(indegree):
        logger.debug("Cycle detected: ordered %d of %d nodes", len(order), len(indegree))
        return None

    return order


def dijkstra[T: Hashable](
    successors: Mapping[T, Mapping[T, Any]],
    source: T,
    target: T | None = None,
) -> tuple[dict[T, Any], dict[T, T]]:
    """Compute shortest distances from source with Dijkstra's algorithm.

    Weights must be non-negative; the function does not check this.
    Among equal-distance candidates the vertex discovered first is settled
    first, and a predecessor is only replaced by a strictly shorter route,
    so identical inputs always produce identical paths.

    Args:
        successors: Mapping from vertex to ``{neighbor: weight}``.
        source: Start vertex.
        target: If given, stop as soon as this vertex is settled.

    Returns:
        ``(distances, previous)``: distance per reached vertex and the
        predecessor of each reached vertex other than source. When target is
        given, only the entry for target is guaranteed final.

    """
    distances: dict[T, Any] = {source: 0}
    previous: dict[T, T] = {}
    settled: set[T] = set()
    # The counter keeps vertices themselves out of heap comparisons.
    counter = itertools.count()
    queue: list[tuple[Any, int, T]] = [(0, next(counter), source)]

    while queue:
        distance, _, vertex = heapq.heappop(queue)
        if vertex in settled:
            continue
        settled.add(vertex)
        if target is not None and vertex == target:
            break

        for neighbor, weight in successors.get(vertex, {}).items():
            if neighbor in settled:
                continue
            candidate = distance + weight
            if neighbor not in distances or candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = vertex
                heapq.heappush(queue, (candidate, next(counter), neighbor))

    logger.debug("Dijkstra from %r settled %d vertices", source, len(settled))
    return distances, previous


def resolve_path[T: Hashable](previous: Mapping[T, T], source: T, target: T) -> list[T]:
    """Walk a predecessor mapping back from target to source.

    Raises:
        KeyError: If target was not reached from source.

    """
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path


def floyd_warshall[T: Hashable](
    vertices: Sequence[T],
    successors: Mapping[T, Mapping[T, Any]],
) -> tuple[dict[tuple[T, T], Any], dict[tuple[T, T], T]]:
    """Compute all-pairs shortest distances with the Floyd-Warshall algorithm.

    Runs in cubic time in the number of vertices. Weights must be
    non-negative; the function does not check this.

    Args:
        vertices: All vertices, in the order used for relaxation.
        successors: Mapping from vertex to ``{neighbor: weight}``.

    Returns:
        ``(distances, following)`` keyed by ``(source, target)`` for every
        reachable pair. ``following[(u, v)]`` is the vertex after ``u`` on the
        shortest route to ``v``; see :func:`follow_path`.

    """
    logger.debug("Floyd-Warshall over %d vertices", len(vertices))

    distances: dict[tuple[T, T], Any] = {(v, v): 0 for v in vertices}
    following: dict[tuple[T, T], T] = {(v, v): v for v in vertices}
    for source, targets in successors.items():
        for target, weight in targets.items():
            pair = (source, target)
            if pair not in distances or weight < distances[pair]:
                distances[pair] = weight
                following[pair] = target

    for k in vertices:
        for i in vertices:
            to_k = distances.get((i, k))
            if to_k is None:
                continue
            for j in vertices:
                from_k = distances.get((k, j))
                if from_k is None:
                    continue
                candidate = to_k + from_k
                current = distances.get((i, j))
                if current is None or candidate < current:
                    distances[(i, j)] = candidate
                    following[(i, j)] = following[(i, k)]

    return distances, following


def follow_path[T: Hashable](following: Mapping[tuple[T, T], T], source: T, target: T) -> list[T]:
    """Rebuild a route from the successor table produced by :func:`floyd_warshall`.

    Raises:
        KeyError: If target is not reachable from source.

    """
    path = [source]
    while path[-1] != target:
        path.append(following[(path[-1], target)])
    return path
