"""Adjacency-list graph store."""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, Mapping

from pathwise.core.exceptions import InvalidWeightError, UnknownVertexError
from pathwise.core.types import Edge, V, Weight
from pathwise.core.utils import is_valid_weight

logger = logging.getLogger(__name__)


class Graph(Generic[V]):
    """Directed weighted multigraph backed by an adjacency list.

    Vertices are any hashable value and keep their insertion order, as do
    the outgoing edges of each vertex. Parallel edges and self-loops are
    stored as given.

    The store only changes through add_vertex/add_edge and the bulk
    constructors built on them. Algorithms read it and never mutate it.
    There is no internal locking: concurrent readers are fine, mutation
    concurrent with reads is not.

    Example:
        >>> graph = Graph()
        >>> graph.add_edge("a", "b", 2)
        Edge(source='a', target='b', weight=2)
        >>> graph.neighbors("a")
        [('b', 2)]
    """

    def __init__(self, allow_negative_weights: bool = True) -> None:
        self._adjacency: dict[V, list[Edge[V]]] = {}
        self._edge_count = 0
        self.allow_negative_weights = allow_negative_weights

    # -----------------
    # Mutation
    # -----------------

    def add_vertex(self, vertex: V) -> None:
        """Insert a vertex. Adding an existing vertex is a no-op."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(self, source: V, target: V, weight: Weight = 1) -> Edge[V]:
        """Insert a directed edge, adding missing endpoints.

        Args:
            source: Tail vertex
            target: Head vertex
            weight: Real-valued edge weight

        Returns:
            The stored Edge

        Raises:
            InvalidWeightError: If the weight is not a real number, or is
                negative on a graph built with allow_negative_weights=False
        """
        self._check_weight(weight)
        self.add_vertex(source)
        self.add_vertex(target)
        edge = Edge(source, target, weight)
        self._adjacency[source].append(edge)
        self._edge_count += 1
        return edge

    def add_edges(self, edges: Iterable[tuple[V, V] | tuple[V, V, Weight]]) -> None:
        """Insert many edges given as (source, target[, weight]) tuples."""
        for item in edges:
            self.add_edge(*item)

    def _check_weight(self, weight: Any) -> None:
        if not is_valid_weight(weight):
            raise InvalidWeightError(weight)
        if weight < 0 and not self.allow_negative_weights:
            raise InvalidWeightError(
                weight, f"Negative edge weight {weight!r} not allowed on this graph"
            )

    # -----------------
    # Queries
    # -----------------

    def neighbors(self, vertex: V) -> list[tuple[V, Weight]]:
        """Outgoing (target, weight) pairs in insertion order.

        Unknown vertices and vertices without outgoing edges give [].
        """
        return [(edge.target, edge.weight) for edge in self._adjacency.get(vertex, ())]

    def out_edges(self, vertex: V) -> list[Edge[V]]:
        """Outgoing edges in insertion order ([] for unknown vertices)."""
        return list(self._adjacency.get(vertex, ()))

    def has_vertex(self, vertex: V) -> bool:
        return vertex in self._adjacency

    def edges(self) -> Iterator[Edge[V]]:
        """Iterate over every edge, grouped by source in vertex order."""
        for out in self._adjacency.values():
            yield from out

    @property
    def vertices(self) -> list[V]:
        return list(self._adjacency)

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._adjacency
        except TypeError:
            # unhashable values are never vertices
            return False

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "vertices": self.vertices,
            "edges": [e.to_dict() for e in self.edges()],
        }

    # -----------------
    # Bulk construction
    # -----------------

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[V, V] | tuple[V, V, Weight]],
        vertices: Iterable[V] = (),
        allow_negative_weights: bool = True,
    ) -> "Graph[V]":
        """Build a graph from an edge list, adding endpoints implicitly.

        Args:
            edges: (source, target[, weight]) tuples
            vertices: Extra vertices, added first (keeps isolated vertices)
            allow_negative_weights: Passed to the constructor
        """
        graph: Graph[V] = cls(allow_negative_weights=allow_negative_weights)
        for vertex in vertices:
            graph.add_vertex(vertex)
        graph.add_edges(edges)
        return graph

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[V, Iterable[tuple[V, Weight]]],
        allow_negative_weights: bool = True,
    ) -> "Graph[V]":
        """Build a graph from a vertex -> [(target, weight), ...] mapping.

        Unlike add_edge, targets are not added implicitly: every target
        must itself be a key of the mapping.

        Raises:
            UnknownVertexError: If a target is not a key of the mapping
            InvalidWeightError: If a weight is rejected
        """
        graph: Graph[V] = cls(allow_negative_weights=allow_negative_weights)
        for vertex in adjacency:
            graph.add_vertex(vertex)

        for source, out in adjacency.items():
            for target, weight in out:
                if target not in graph._adjacency:
                    raise UnknownVertexError(target)
                graph.add_edge(source, target, weight)

        logger.debug(
            "Built graph from adjacency: %d vertices, %d edges",
            graph.vertex_count,
            graph.edge_count,
        )
        return graph
