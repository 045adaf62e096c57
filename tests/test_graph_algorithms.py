"""Tests for the graph algorithms over successor mappings."""

from structures._graph import dijkstra, floyd_warshall, follow_path, resolve_path, topological_sort


class TestTopologicalSort:
    """Tests for the topological_sort algorithm."""

    def test_empty_graph(self) -> None:
        result = topological_sort({})
        assert result == []

    def test_single_node(self) -> None:
        result = topological_sort({"a": []})
        assert result == ["a"]

    def test_linear_chain(self) -> None:
        result = topological_sort({"a": ["b"], "b": ["c"], "c": []})
        assert result == ["a", "b", "c"]

    def test_diamond(self) -> None:
        # a -> b, a -> c, b -> d, c -> d
        result = topological_sort({"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []})
        assert result is not None
        assert result[0] == "a"
        assert result[-1] == "d"
        assert result.index("b") < result.index("d")
        assert result.index("c") < result.index("d")

    def test_multiple_roots(self) -> None:
        result = topological_sort({"a": ["c"], "b": ["c"], "c": []})
        assert result is not None
        assert result[-1] == "c"
        assert set(result[:2]) == {"a", "b"}

    def test_targets_missing_from_keys_are_ordered(self) -> None:
        result = topological_sort({"a": ["b"]})
        assert result == ["a", "b"]

    def test_cycle_returns_none(self) -> None:
        assert topological_sort({"a": ["b"], "b": ["a"]}) is None

    def test_self_loop_returns_none(self) -> None:
        assert topological_sort({"a": ["a"]}) is None

    def test_longer_cycle_returns_none(self) -> None:
        assert topological_sort({"a": ["b"], "b": ["c"], "c": ["a"], "d": ["a"]}) is None

    def test_accepts_weighted_successor_mapping(self) -> None:
        result = topological_sort({1: {2: 5}, 2: {3: 1}, 3: {}})
        assert result == [1, 2, 3]

    def test_works_with_tuples(self) -> None:
        result = topological_sort({("a", 1): [("b", 2)], ("b", 2): []})
        assert result == [("a", 1), ("b", 2)]


class TestDijkstra:
    """Tests for the dijkstra function and path resolution."""

    SUCCESSORS = {
        "a": {"b": 1, "c": 4},
        "b": {"c": 2, "d": 5},
        "c": {"d": 1},
        "d": {},
    }

    def test_distances_from_source(self) -> None:
        distances, _ = dijkstra(self.SUCCESSORS, "a")
        assert distances == {"a": 0, "b": 1, "c": 3, "d": 4}

    def test_predecessors_resolve_to_paths(self) -> None:
        _, previous = dijkstra(self.SUCCESSORS, "a")
        assert resolve_path(previous, "a", "d") == ["a", "b", "c", "d"]
        assert resolve_path(previous, "a", "a") == ["a"]

    def test_unreached_vertices_are_absent(self) -> None:
        distances, previous = dijkstra(self.SUCCESSORS, "c")
        assert set(distances) == {"c", "d"}
        assert "a" not in previous

    def test_stops_at_target_with_final_distance(self) -> None:
        distances, previous = dijkstra(self.SUCCESSORS, "a", "c")
        assert distances["c"] == 3
        assert resolve_path(previous, "a", "c") == ["a", "b", "c"]

    def test_equal_cost_tie_keeps_first_discovered_route(self) -> None:
        successors = {"s": {"x": 1, "y": 1}, "x": {"t": 1}, "y": {"t": 1}, "t": {}}
        _, previous = dijkstra(successors, "s")
        assert resolve_path(previous, "s", "t") == ["s", "x", "t"]

    def test_unorderable_vertices(self) -> None:
        a, b, c = object(), object(), object()
        distances, _ = dijkstra({a: {b: 1, c: 1}, b: {}, c: {}}, a)
        assert distances == {a: 0, b: 1, c: 1}


class TestFloydWarshall:
    """Tests for the floyd_warshall function and path reconstruction."""

    def test_distances_and_paths(self) -> None:
        successors = {"a": {"b": 1, "c": 4}, "b": {"c": 2}, "c": {}}
        distances, following = floyd_warshall(["a", "b", "c"], successors)
        assert distances[("a", "c")] == 3
        assert follow_path(following, "a", "c") == ["a", "b", "c"]
        assert ("c", "a") not in distances

    def test_diagonal_is_zero_despite_self_loop(self) -> None:
        distances, following = floyd_warshall(["a"], {"a": {"a": 3}})
        assert distances[("a", "a")] == 0
        assert follow_path(following, "a", "a") == ["a"]

    def test_direct_edge_replaced_by_cheaper_route(self) -> None:
        successors = {"a": {"c": 10, "b": 1}, "b": {"c": 1}, "c": {}}
        distances, following = floyd_warshall(["a", "b", "c"], successors)
        assert distances[("a", "c")] == 2
        assert follow_path(following, "a", "c") == ["a", "b", "c"]
