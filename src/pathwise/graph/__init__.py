"""Graph store: vertices and directed weighted edges."""

from pathwise.graph.store import Graph

__all__ = ["Graph"]
