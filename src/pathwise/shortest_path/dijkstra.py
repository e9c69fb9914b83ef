"""Dijkstra's single-source shortest paths with a binary heap.

Unreachable vertices are omitted from every distance mapping this module
returns; there is no infinity sentinel in the output. A source that is not
in the graph reaches nothing and gives an empty result.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Generic

from pathwise.core.config import DEFAULT_CONFIG, EngineConfig
from pathwise.core.exceptions import NegativeWeightError
from pathwise.core.types import Edge, GraphPath, V, Weight
from pathwise.graph.store import Graph

logger = logging.getLogger(__name__)

_NO_TARGET = object()


@dataclass
class ShortestPaths(Generic[V]):
    """Result of a single-source shortest-path search.

    Attributes:
        source: Search origin
        distances: Shortest distance of every reachable vertex
        predecessors: Edge used to reach each reachable vertex except source
        pushes: Heap pushes, at most edge_count + 1
        pops: Heap pops, stale entries included
        stale_skipped: Popped entries discarded as outdated
        relaxations: Distance improvements recorded
    """

    source: V
    distances: dict[V, Weight] = field(default_factory=dict)
    predecessors: dict[V, Edge[V]] = field(default_factory=dict)
    pushes: int = 0
    pops: int = 0
    stale_skipped: int = 0
    relaxations: int = 0

    def is_reachable(self, vertex: V) -> bool:
        return vertex in self.distances

    def distance_to(self, vertex: V) -> Weight | None:
        """Shortest distance to vertex, or None when unreachable."""
        return self.distances.get(vertex)

    def edges_to(self, vertex: V) -> list[Edge[V]]:
        """Edges of the shortest path from source to vertex ([] if none)."""
        if vertex not in self.distances:
            return []
        edges: list[Edge[V]] = []
        while vertex in self.predecessors:
            edge = self.predecessors[vertex]
            edges.append(edge)
            vertex = edge.source
        edges.reverse()
        return edges

    def path_to(self, vertex: V) -> list[V]:
        """Vertices of the shortest path from source to vertex.

        Returns [] when vertex is unreachable and [source] for the source.
        """
        if vertex not in self.distances:
            return []
        return [self.source] + [edge.target for edge in self.edges_to(vertex)]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "distances": dict(self.distances),
            "stats": {
                "pushes": self.pushes,
                "pops": self.pops,
                "stale_skipped": self.stale_skipped,
                "relaxations": self.relaxations,
            },
        }


def _check_all_weights(graph: Graph[V]) -> None:
    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(edge.source, edge.target, edge.weight)


def _check_reachable_weights(graph: Graph[V], source: V) -> None:
    seen: set[V] = {source}
    stack: list[V] = [source]
    while stack:
        for edge in graph.out_edges(stack.pop()):
            if edge.weight < 0:
                raise NegativeWeightError(edge.source, edge.target, edge.weight)
            if edge.target not in seen:
                seen.add(edge.target)
                stack.append(edge.target)


def _search(
    graph: Graph[V],
    source: V,
    target: Any,
    config: EngineConfig,
) -> ShortestPaths[V]:
    result: ShortestPaths[V] = ShortestPaths(source=source)
    if source not in graph:
        return result

    if config.negative_weight_check == "all":
        _check_all_weights(graph)
    elif target is not _NO_TARGET:
        # the search may stop before scanning every reachable edge
        _check_reachable_weights(graph, source)

    best = result.distances
    best[source] = 0
    # sequence numbers break distance ties in push order, so vertices are never compared
    sequence = count()
    heap: list[tuple[Weight, int, V]] = [(0, next(sequence), source)]
    result.pushes = 1

    while heap:
        dist, _, vertex = heapq.heappop(heap)
        result.pops += 1
        if dist > best[vertex]:
            result.stale_skipped += 1
            continue
        if target is not _NO_TARGET and vertex == target:
            break

        for edge in graph.out_edges(vertex):
            if edge.weight < 0:
                raise NegativeWeightError(edge.source, edge.target, edge.weight)
            candidate = dist + edge.weight
            known = best.get(edge.target)
            if known is None or candidate < known:
                best[edge.target] = candidate
                result.predecessors[edge.target] = edge
                result.relaxations += 1
                heapq.heappush(heap, (candidate, next(sequence), edge.target))
                result.pushes += 1

    logger.debug(
        "dijkstra from %r: %d reachable, %d pushes, %d stale skipped",
        source,
        len(best),
        result.pushes,
        result.stale_skipped,
    )
    return result


def shortest_paths(
    graph: Graph[V],
    source: V,
    config: EngineConfig | None = None,
) -> ShortestPaths[V]:
    """Run Dijkstra's algorithm and keep predecessors for path recovery.

    Args:
        graph: Graph with non-negative weights on every edge reachable from source
        source: Search origin
        config: Engine configuration (negative_weight_check is used)

    Returns:
        ShortestPaths with distances, predecessors and heap counters

    Raises:
        NegativeWeightError: If a negative edge is reachable from source, or
            anywhere in the graph when negative_weight_check is "all"
    """
    return _search(graph, source, _NO_TARGET, config or DEFAULT_CONFIG)


def dijkstra(
    graph: Graph[V],
    source: V,
    config: EngineConfig | None = None,
) -> dict[V, Weight]:
    """Shortest distance from source to every reachable vertex.

    Unreachable vertices are omitted from the mapping.

    Raises:
        NegativeWeightError: If a negative edge is reachable from source
    """
    return shortest_paths(graph, source, config).distances


def shortest_path(
    graph: Graph[V],
    source: V,
    target: V,
    config: EngineConfig | None = None,
) -> GraphPath[V] | None:
    """Cheapest path from source to target, or None when unreachable.

    Every edge reachable from source is checked before the search, which
    then stops as soon as target is settled.

    Raises:
        NegativeWeightError: If a negative edge is reachable from source
    """
    result = _search(graph, source, target, config or DEFAULT_CONFIG)
    if target not in result.distances:
        return None
    return GraphPath(vertices=result.path_to(target), edges=result.edges_to(target))

