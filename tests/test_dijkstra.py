"""Tests for Dijkstra's shortest-path engine."""

from __future__ import annotations

import pytest

from pathwise import EngineConfig, Graph, NegativeWeightError
from pathwise.shortest_path import dijkstra, shortest_path, shortest_paths
from pathwise.traversal import bfs


def bellman_ford(graph: Graph, source) -> dict:
    """Reference distances by repeated relaxation."""
    dist = {source: 0}
    for _ in range(graph.vertex_count):
        for edge in graph.edges():
            if edge.source in dist:
                candidate = dist[edge.source] + edge.weight
                if edge.target not in dist or candidate < dist[edge.target]:
                    dist[edge.target] = candidate
    return dist


# ============================================================================
# Distances
# ============================================================================


class TestDijkstra:
    """Test single-source distances."""

    def test_reference_graph(self, weighted_graph):
        """Test the reference graph yields the known distances."""
        assert dijkstra(weighted_graph, 0) == {0: 0, 1: 3, 2: 1, 3: 5}

    def test_unreachable_omitted(self, disconnected_graph):
        """Test unreachable vertices are left out of the mapping."""
        distances = dijkstra(disconnected_graph, "A")
        assert distances == {"A": 0}
        assert "B" not in distances
        assert "C" not in distances

    def test_unknown_source(self, weighted_graph):
        """Test an absent source reaches nothing."""
        assert dijkstra(weighted_graph, "missing") == {}

    def test_self_loop(self, self_loop_graph):
        """Test a self-loop never improves the source distance."""
        assert dijkstra(self_loop_graph, "A") == {"A": 0}

    def test_cycle(self, cyclic_graph):
        """Test a reachable cycle terminates with correct distances."""
        assert dijkstra(cyclic_graph, "a") == {"a": 0, "b": 1, "c": 2, "d": 5}

    def test_zero_weight_edges(self):
        """Test zero-weight edges are followed."""
        graph = Graph.from_edges([("a", "b", 0), ("b", "c", 0), ("a", "c", 1)])
        assert dijkstra(graph, "a") == {"a": 0, "b": 0, "c": 0}

    def test_parallel_edges_use_cheapest(self):
        """Test the cheapest of several parallel edges wins."""
        graph = Graph.from_edges([(0, 1, 9), (0, 1, 2), (0, 1, 5)])
        assert dijkstra(graph, 0) == {0: 0, 1: 2}

    def test_float_weights(self):
        """Test fractional weights accumulate by addition."""
        graph = Graph.from_edges([("x", "y", 0.5), ("y", "z", 0.25)])
        assert dijkstra(graph, "x")["z"] == pytest.approx(0.75)


# ============================================================================
# Negative weights
# ============================================================================


class TestNegativeWeights:
    """Test the non-negativity precondition."""

    def test_negative_edge_raises(self):
        """Test a reachable negative edge is fatal."""
        graph = Graph.from_edges([(0, 1, -1)])
        with pytest.raises(NegativeWeightError, match="-1") as exc_info:
            dijkstra(graph, 0)
        assert exc_info.value.source == 0
        assert exc_info.value.target == 1
        assert exc_info.value.weight == -1

    def test_negative_edge_deep_in_graph(self):
        """Test a negative edge several hops away is still detected."""
        graph = Graph.from_edges([(0, 1, 1), (1, 2, 1), (2, 3, -5), (0, 3, 10)])
        with pytest.raises(NegativeWeightError):
            dijkstra(graph, 0)

    def test_negative_self_loop(self):
        """Test a negative self-loop on the source is detected."""
        graph = Graph.from_edges([("A", "A", -1)])
        with pytest.raises(NegativeWeightError):
            dijkstra(graph, "A")

    def test_unreachable_negative_edge_ignored(self):
        """Test negative edges outside the reachable part do not matter by default."""
        graph = Graph.from_edges([(0, 1, 2), (5, 6, -3)])
        assert dijkstra(graph, 0) == {0: 0, 1: 2}

    def test_shortest_path_negative_edge_past_target(self):
        """Test a single-target search still rejects a reachable negative edge."""
        graph = Graph.from_edges([(0, 1, 2), (0, 2, 3), (2, 1, -5)])
        with pytest.raises(NegativeWeightError) as exc_info:
            shortest_path(graph, 0, 1)
        assert exc_info.value.source == 2
        assert exc_info.value.weight == -5

    def test_shortest_path_unreachable_negative_edge_ignored(self):
        """Test a single-target search ignores negative edges it cannot reach."""
        graph = Graph.from_edges([(0, 1, 2), (5, 6, -3)])
        assert shortest_path(graph, 0, 1).total_weight == 2

    def test_check_all_edges(self):
        """Test the "all" policy rejects any negative edge up front."""
        graph = Graph.from_edges([(0, 1, 2), (5, 6, -3)])
        with pytest.raises(NegativeWeightError) as exc_info:
            dijkstra(graph, 0, EngineConfig(negative_weight_check="all"))
        assert exc_info.value.source == 5


# ============================================================================
# Paths
# ============================================================================


class TestShortestPaths:
    """Test predecessor tracking and path recovery."""

    def test_path_to(self, weighted_graph):
        """Test paths are rebuilt from predecessors."""
        result = shortest_paths(weighted_graph, 0)
        assert result.path_to(3) == [0, 2, 1, 3]
        assert result.path_to(0) == [0]
        assert result.distance_to(3) == 5

    def test_unreachable_path(self, disconnected_graph):
        """Test unreachable vertices have no path and no distance."""
        result = shortest_paths(disconnected_graph, "A")
        assert not result.is_reachable("B")
        assert result.distance_to("B") is None
        assert result.path_to("B") == []
        assert result.edges_to("B") == []

    def test_shortest_path(self, weighted_graph):
        """Test the single-target query returns the cheapest route."""
        path = shortest_path(weighted_graph, 0, 3)
        assert path is not None
        assert path.vertices == [0, 2, 1, 3]
        assert path.total_weight == 5
        assert path.length == 3
        assert path.as_text() == "0 --[1]--> 2 --[2]--> 1 --[2]--> 3"

    def test_shortest_path_reports_edge_taken(self):
        """Test parallel edges report the one actually used."""
        path = shortest_path(Graph.from_edges([(0, 1, 9), (0, 1, 2)]), 0, 1)
        assert [e.weight for e in path.edges] == [2]

    def test_shortest_path_to_self(self, weighted_graph):
        """Test a path from a vertex to itself is empty."""
        path = shortest_path(weighted_graph, 2, 2)
        assert path.vertices == [2]
        assert path.total_weight == 0

    def test_shortest_path_unreachable(self, weighted_graph):
        """Test None is returned when the target cannot be reached."""
        assert shortest_path(weighted_graph, 3, 0) is None
        assert shortest_path(weighted_graph, 0, "missing") is None

    def test_to_dict(self, weighted_graph):
        """Test dictionary conversion includes heap counters."""
        data = shortest_paths(weighted_graph, 0).to_dict()
        assert data["source"] == 0
        assert data["distances"] == {0: 0, 1: 3, 2: 1, 3: 5}
        assert data["stats"]["pushes"] >= 4


# ============================================================================
# Properties over random graphs
# ============================================================================


@pytest.mark.parametrize("seed", range(10))
class TestDijkstraProperties:
    """Check shortest-path invariants on seeded random graphs."""

    def test_matches_reference(self, random_graph, seed):
        """Test distances agree with repeated relaxation."""
        graph = random_graph(seed)
        assert dijkstra(graph, 0) == bellman_ford(graph, 0)

    def test_triangle_inequality(self, random_graph, seed):
        """Test no edge can improve a reported distance."""
        graph = random_graph(seed)
        distances = dijkstra(graph, 0)
        assert distances[0] == 0
        for edge in graph.edges():
            if edge.source in distances:
                assert distances[edge.target] <= distances[edge.source] + edge.weight

    def test_reachable_set_matches_bfs(self, random_graph, seed):
        """Test exactly the BFS-reachable vertices get a distance."""
        graph = random_graph(seed)
        assert set(dijkstra(graph, 0)) == set(bfs(graph, 0))

    def test_heap_bounds(self, random_graph, seed):
        """Test pushes stay within edge_count + 1 and stale pops are accounted for."""
        graph = random_graph(seed, vertex_count=50, edge_count=300)
        result = shortest_paths(graph, 0)
        assert result.pushes <= graph.edge_count + 1
        assert result.pops == result.pushes
        assert result.pops - result.stale_skipped == len(result.distances)

    def test_path_weights_match_distances(self, random_graph, seed):
        """Test every recovered path sums to its reported distance."""
        graph = random_graph(seed)
        result = shortest_paths(graph, 0)
        for vertex, distance in result.distances.items():
            edges = result.edges_to(vertex)
            assert sum(e.weight for e in edges) == distance
            assert result.path_to(vertex)[-1] == vertex

    def test_idempotent(self, random_graph, seed):
        """Test repeated calls on an unmodified graph agree."""
        graph = random_graph(seed)
        first = shortest_paths(graph, 0)
        second = shortest_paths(graph, 0)
        assert first.distances == second.distances
        assert first.predecessors == second.predecessors
