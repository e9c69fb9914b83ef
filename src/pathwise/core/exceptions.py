"""Custom exceptions for pathwise."""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base exception for graph operations."""

    pass


class ValidationError(GraphError):
    """Raised when graph construction input is invalid."""

    pass


class InvalidWeightError(ValidationError):
    """Raised when an edge weight is rejected by the graph store."""

    def __init__(self, weight: Any, message: str = ""):
        self.weight = weight
        super().__init__(message or f"Invalid edge weight: {weight!r}")


class UnknownVertexError(ValidationError):
    """Raised when an edge refers to a vertex that was never added."""

    def __init__(self, vertex: Any, message: str = ""):
        self.vertex = vertex
        super().__init__(message or f"Edge refers to unknown vertex: {vertex!r}")


class NegativeWeightError(GraphError):
    """Raised when Dijkstra's algorithm meets a negative edge weight."""

    def __init__(self, source: Any, target: Any, weight: float):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Negative weight {weight!r} on edge {source!r} -> {target!r}; "
            f"shortest paths require non-negative weights"
        )


class TraversalDepthError(GraphError):
    """Raised when recursive traversal would exceed its depth limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"Recursive traversal exceeded max depth {limit}; use dfs() instead"
        )
