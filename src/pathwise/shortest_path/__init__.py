"""Shortest-path engine: Dijkstra's algorithm over non-negative weights."""

from pathwise.shortest_path.dijkstra import (
    ShortestPaths,
    dijkstra,
    shortest_path,
    shortest_paths,
)

__all__ = [
    "ShortestPaths",
    "dijkstra",
    "shortest_path",
    "shortest_paths",
]
