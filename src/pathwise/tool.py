"""Graph tool for function-calling integration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pathwise.core.config import EngineConfig
from pathwise.core.exceptions import GraphError
from pathwise.core.utils import utc_now
from pathwise.graph.store import Graph
from pathwise.shortest_path import shortest_path, shortest_paths
from pathwise.traversal import bfs, dfs

logger = logging.getLogger(__name__)


class GraphAction(str, Enum):
    """Actions available through the graph tool."""

    NEIGHBORS = "neighbors"
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    SHORTEST_PATH = "shortest_path"


@dataclass
class GraphToolResponse:
    """Response from graph tool invocation."""

    success: bool
    action: GraphAction
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON consumption."""
        result = {
            "success": self.success,
            "action": self.action.value,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.data:
            result["data"] = self.data
        if self.error:
            result["error"] = self.error
        return result


class GraphTool:
    """Callable tool that runs traversal and shortest-path queries.

    Example:
        >>> tool = GraphTool(Graph.from_edges([(0, 1, 4), (0, 2, 1), (2, 1, 2)]))
        >>> tool.invoke("dijkstra", source=0).data["distances"]
        {0: 0, 1: 3, 2: 1}
    """

    def __init__(self, graph: Graph, config: EngineConfig | None = None) -> None:
        self._graph = graph
        self._config = config

    def invoke(self, action: str, **kwargs: Any) -> GraphToolResponse:
        """Invoke the graph tool with an action.

        Args:
            action: The action to perform
            **kwargs: Action-specific parameters

        Returns:
            GraphToolResponse with results or error
        """
        try:
            action_enum = GraphAction(str(action).lower())
        except ValueError:
            return GraphToolResponse(
                success=False,
                action=GraphAction.NEIGHBORS,
                error=f"Unknown action: {action}. Valid: {[a.value for a in GraphAction]}",
            )

        handlers = {
            GraphAction.NEIGHBORS: self._handle_neighbors,
            GraphAction.BFS: self._handle_bfs,
            GraphAction.DFS: self._handle_dfs,
            GraphAction.DIJKSTRA: self._handle_dijkstra,
            GraphAction.SHORTEST_PATH: self._handle_shortest_path,
        }

        handler = handlers[action_enum]
        try:
            return handler(**kwargs)
        except (GraphError, TypeError) as e:
            logger.info("Graph tool action %s failed: %s", action_enum.value, e)
            return GraphToolResponse(
                success=False,
                action=action_enum,
                error=str(e),
            )

    def _handle_neighbors(self, vertex: Any, **_: Any) -> GraphToolResponse:
        return GraphToolResponse(
            success=True,
            action=GraphAction.NEIGHBORS,
            data={
                "vertex": vertex,
                "neighbors": [
                    {"target": target, "weight": weight}
                    for target, weight in self._graph.neighbors(vertex)
                ],
            },
        )

    def _handle_bfs(self, start: Any, **_: Any) -> GraphToolResponse:
        order = bfs(self._graph, start)
        return GraphToolResponse(
            success=True,
            action=GraphAction.BFS,
            data={"start": start, "order": order, "visited_count": len(order)},
        )

    def _handle_dfs(self, start: Any, **_: Any) -> GraphToolResponse:
        order = dfs(self._graph, start)
        return GraphToolResponse(
            success=True,
            action=GraphAction.DFS,
            data={"start": start, "order": order, "visited_count": len(order)},
        )

    def _handle_dijkstra(self, source: Any, **_: Any) -> GraphToolResponse:
        result = shortest_paths(self._graph, source, self._config)
        unreachable = [v for v in self._graph if not result.is_reachable(v)]
        return GraphToolResponse(
            success=True,
            action=GraphAction.DIJKSTRA,
            data={
                "source": source,
                "distances": result.distances,
                "unreachable": unreachable,
            },
        )

    def _handle_shortest_path(
        self,
        source: Any,
        target: Any,
        **_: Any,
    ) -> GraphToolResponse:
        path = shortest_path(self._graph, source, target, self._config)
        if path is None:
            return GraphToolResponse(
                success=True,
                action=GraphAction.SHORTEST_PATH,
                data={"source": source, "target": target, "found": False},
            )

        return GraphToolResponse(
            success=True,
            action=GraphAction.SHORTEST_PATH,
            data={
                "source": source,
                "target": target,
                "found": True,
                "path": path.to_dict(),
                "summary": path.as_text(),
            },
        )
