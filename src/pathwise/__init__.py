"""pathwise - Graph traversal and shortest paths over weighted digraphs.

An in-memory library with three layers:
- Graph store (vertices plus directed weighted edges, multigraph)
- Traversal engine (BFS, iterative and recursive DFS)
- Shortest-path engine (Dijkstra with a binary heap)

Example:
    >>> from pathwise import Graph, bfs, dijkstra
    >>>
    >>> graph = Graph.from_edges([(0, 1, 4), (0, 2, 1), (1, 3, 2), (2, 1, 2), (2, 3, 5)])
    >>> bfs(graph, 0)
    [0, 1, 2, 3]
    >>> dijkstra(graph, 0)
    {0: 0, 1: 3, 2: 1, 3: 5}
"""

from pathwise.core.config import EngineConfig
from pathwise.core.exceptions import (
    GraphError,
    InvalidWeightError,
    NegativeWeightError,
    TraversalDepthError,
    UnknownVertexError,
    ValidationError,
)
from pathwise.core.types import Edge, GraphPath
from pathwise.graph import Graph
from pathwise.traversal import bfs, bfs_levels, dfs, dfs_recursive
from pathwise.shortest_path import (
    ShortestPaths,
    dijkstra,
    shortest_path,
    shortest_paths,
)
from pathwise.schemas import EdgeModel, GraphModel, load_graph
from pathwise.tool import GraphAction, GraphTool, GraphToolResponse

__version__ = "0.1.0"

__all__ = [
    # Graph store
    "Graph",
    "Edge",
    "GraphPath",
    # Configuration
    "EngineConfig",
    # Traversal
    "bfs",
    "bfs_levels",
    "dfs",
    "dfs_recursive",
    # Shortest paths
    "ShortestPaths",
    "dijkstra",
    "shortest_path",
    "shortest_paths",
    # Exceptions
    "GraphError",
    "ValidationError",
    "InvalidWeightError",
    "UnknownVertexError",
    "NegativeWeightError",
    "TraversalDepthError",
    # Serialization
    "EdgeModel",
    "GraphModel",
    "load_graph",
    # Tool
    "GraphAction",
    "GraphTool",
    "GraphToolResponse",
]
