"""Pytest fixtures for pathwise tests.

Provides fixtures for:
- The weighted reference graph used across engine tests
- Disconnected, cyclic and self-loop graphs
- A seeded random graph factory for property checks
"""

from __future__ import annotations

import random
from typing import Callable

import pytest

from pathwise import Graph


# ============================================================================
# Graph fixtures
# ============================================================================


@pytest.fixture
def weighted_graph() -> Graph[int]:
    """0->1(4), 0->2(1), 1->3(2), 2->1(2), 2->3(5)."""
    return Graph.from_edges([(0, 1, 4), (0, 2, 1), (1, 3, 2), (2, 1, 2), (2, 3, 5)])


@pytest.fixture
def disconnected_graph() -> Graph[str]:
    """Three isolated vertices."""
    graph: Graph[str] = Graph()
    for vertex in ("A", "B", "C"):
        graph.add_vertex(vertex)
    return graph


@pytest.fixture
def cyclic_graph() -> Graph[str]:
    """a -> b -> c -> a with a tail c -> d."""
    return Graph.from_edges([("a", "b", 1), ("b", "c", 1), ("c", "a", 1), ("c", "d", 3)])


@pytest.fixture
def self_loop_graph() -> Graph[str]:
    """A single vertex with a self-loop."""
    return Graph.from_edges([("A", "A", 1)])


# ============================================================================
# Random graphs
# ============================================================================


def make_random_graph(
    seed: int,
    vertex_count: int = 30,
    edge_count: int = 80,
    max_weight: int = 20,
) -> Graph[int]:
    """Random multigraph with non-negative integer weights."""
    rng = random.Random(seed)
    graph: Graph[int] = Graph()
    for vertex in range(vertex_count):
        graph.add_vertex(vertex)
    for _ in range(edge_count):
        graph.add_edge(
            rng.randrange(vertex_count),
            rng.randrange(vertex_count),
            rng.randint(0, max_weight),
        )
    return graph


@pytest.fixture
def random_graph() -> Callable[..., Graph[int]]:
    """Factory fixture for seeded random graphs."""
    return make_random_graph
