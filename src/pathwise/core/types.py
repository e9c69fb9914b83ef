"""Core types shared by the graph store and the algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Hashable, TypeVar

V = TypeVar("V", bound=Hashable)

Weight = float  # int weights are accepted and kept as-is


@dataclass(frozen=True)
class Edge(Generic[V]):
    """A directed weighted edge."""

    source: V
    target: V
    weight: Weight = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }


@dataclass
class GraphPath(Generic[V]):
    """A weighted path through the graph."""

    vertices: list[V] = field(default_factory=list)
    edges: list[Edge[V]] = field(default_factory=list)

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.edges)

    @property
    def total_weight(self) -> Weight:
        """Sum of all edge weights."""
        return sum(edge.weight for edge in self.edges)

    @property
    def start(self) -> V | None:
        """First vertex in the path."""
        return self.vertices[0] if self.vertices else None

    @property
    def end(self) -> V | None:
        """Last vertex in the path."""
        return self.vertices[-1] if self.vertices else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "vertices": list(self.vertices),
            "edges": [e.to_dict() for e in self.edges],
            "length": self.length,
            "total_weight": self.total_weight,
        }

    def as_text(self) -> str:
        """Format as human-readable text."""
        if not self.vertices:
            return "(empty path)"

        parts = [str(self.vertices[0])]
        for edge in self.edges:
            parts.append(f" --[{edge.weight}]--> {edge.target}")

        return "".join(parts)
