"""Traversal engine: BFS and DFS over a Graph.

Example:
    >>> from pathwise import Graph
    >>> from pathwise.traversal import bfs, dfs
    >>>
    >>> graph = Graph.from_edges([("a", "b"), ("a", "c"), ("b", "d")])
    >>> bfs(graph, "a")
    ['a', 'b', 'c', 'd']
    >>> dfs(graph, "a")
    ['a', 'b', 'd', 'c']
"""

from pathwise.traversal.search import bfs, bfs_levels, dfs, dfs_recursive

__all__ = [
    "bfs",
    "bfs_levels",
    "dfs",
    "dfs_recursive",
]
