"""Configuration for the traversal and shortest-path engines."""

from __future__ import annotations

from dataclasses import dataclass

NEGATIVE_WEIGHT_CHECKS = ("reachable", "all")


@dataclass
class EngineConfig:
    """Tunables shared by the algorithms.

    Attributes:
        max_recursion_depth: Deepest call chain dfs_recursive may build
        negative_weight_check: "reachable" validates edges as Dijkstra scans
            them, "all" scans every edge of the graph before searching
    """

    max_recursion_depth: int = 500
    negative_weight_check: str = "reachable"

    def __post_init__(self) -> None:
        if self.max_recursion_depth < 1:
            raise ValueError(
                f"max_recursion_depth must be positive, got {self.max_recursion_depth}"
            )
        if self.negative_weight_check not in NEGATIVE_WEIGHT_CHECKS:
            raise ValueError(
                f"negative_weight_check must be 'reachable' or 'all', "
                f"got '{self.negative_weight_check}'"
            )


DEFAULT_CONFIG = EngineConfig()
