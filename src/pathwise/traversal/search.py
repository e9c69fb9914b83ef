"""Breadth-first and depth-first traversal over a Graph."""

from __future__ import annotations

import logging
from collections import deque

from pathwise.core.config import DEFAULT_CONFIG, EngineConfig
from pathwise.core.exceptions import TraversalDepthError
from pathwise.core.types import V
from pathwise.graph.store import Graph

logger = logging.getLogger(__name__)


def bfs(graph: Graph[V], start: V) -> list[V]:
    """Vertices reachable from start in breadth-first discovery order.

    Vertices come out in non-decreasing hop count from start. An unknown
    start vertex gives [].
    """
    if start not in graph:
        return []

    visited: set[V] = {start}
    frontier: deque[V] = deque([start])
    order: list[V] = []

    while frontier:
        current = frontier.popleft()
        order.append(current)
        for neighbor, _ in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                frontier.append(neighbor)

    logger.debug("bfs from %r visited %d of %d vertices", start, len(order), len(graph))
    return order


def bfs_levels(graph: Graph[V], start: V) -> dict[V, int]:
    """Hop count from start to every reachable vertex.

    Keys are in BFS discovery order. An unknown start vertex gives {}.
    """
    if start not in graph:
        return {}

    levels: dict[V, int] = {start: 0}
    frontier: deque[V] = deque([start])

    while frontier:
        current = frontier.popleft()
        depth = levels[current] + 1
        for neighbor, _ in graph.neighbors(current):
            if neighbor not in levels:
                levels[neighbor] = depth
                frontier.append(neighbor)

    return levels


def dfs(graph: Graph[V], start: V) -> list[V]:
    """Vertices reachable from start in depth-first (preorder) order.

    Uses an explicit stack, so deep graphs cannot exhaust the interpreter
    stack. Neighbors are pushed in reverse so the order matches
    dfs_recursive. An unknown start vertex gives [].
    """
    if start not in graph:
        return []

    visited: set[V] = set()
    stack: list[V] = [start]
    order: list[V] = []

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)

        for neighbor, _ in reversed(graph.neighbors(current)):
            if neighbor not in visited:
                stack.append(neighbor)

    logger.debug("dfs from %r visited %d of %d vertices", start, len(order), len(graph))
    return order


def dfs_recursive(
    graph: Graph[V],
    start: V,
    config: EngineConfig | None = None,
) -> list[V]:
    """Depth-first order using the call stack.

    Only suitable for graphs of bounded depth; prefer dfs().

    Args:
        graph: Graph to traverse
        start: Start vertex
        config: Engine configuration (max_recursion_depth is used)

    Returns:
        Vertices in the same order as dfs()

    Raises:
        TraversalDepthError: If the search path grows beyond
            config.max_recursion_depth vertices, or the interpreter stack
            runs out first
    """
    config = config or DEFAULT_CONFIG
    if start not in graph:
        return []

    visited: set[V] = set()
    order: list[V] = []
    limit = config.max_recursion_depth

    def visit(vertex: V, depth: int) -> None:
        if depth > limit:
            raise TraversalDepthError(limit)
        visited.add(vertex)
        order.append(vertex)
        for neighbor, _ in graph.neighbors(vertex):
            if neighbor not in visited:
                visit(neighbor, depth + 1)

    try:
        visit(start, 1)
    except RecursionError as e:
        # limit set above what the interpreter stack allows
        raise TraversalDepthError(limit) from e
    return order
