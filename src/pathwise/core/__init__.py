"""Core types, configuration and exceptions."""

from pathwise.core.config import DEFAULT_CONFIG, EngineConfig
from pathwise.core.exceptions import (
    GraphError,
    InvalidWeightError,
    NegativeWeightError,
    TraversalDepthError,
    UnknownVertexError,
    ValidationError,
)
from pathwise.core.types import Edge, GraphPath, V, Weight

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "GraphError",
    "InvalidWeightError",
    "NegativeWeightError",
    "TraversalDepthError",
    "UnknownVertexError",
    "ValidationError",
    "Edge",
    "GraphPath",
    "V",
    "Weight",
]
