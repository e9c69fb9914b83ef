"""Pydantic models for loading graphs from plain data or JSON."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from pathwise.graph.store import Graph

VertexId = Union[int, str]

# strict, so bools and numeric strings are rejected as Graph.add_edge does
WeightValue = Union[StrictInt, StrictFloat]


class EdgeModel(BaseModel):
    source: VertexId
    target: VertexId
    weight: WeightValue = 1


class GraphModel(BaseModel):
    """Serializable graph description.

    `vertices` lists isolated (or extra) vertices; edge endpoints are
    added implicitly, as Graph.add_edge does.
    """

    vertices: list[VertexId] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)
    allow_negative_weights: bool = True

    def to_graph(self) -> Graph[VertexId]:
        """Build a Graph from this description.

        Raises:
            InvalidWeightError: If an edge weight is rejected by the store
        """
        return Graph.from_edges(
            ((e.source, e.target, e.weight) for e in self.edges),
            vertices=self.vertices,
            allow_negative_weights=self.allow_negative_weights,
        )

    @classmethod
    def from_graph(cls, graph: Graph[VertexId]) -> "GraphModel":
        return cls(
            vertices=graph.vertices,
            edges=[EdgeModel(source=e.source, target=e.target, weight=e.weight) for e in graph.edges()],
            allow_negative_weights=graph.allow_negative_weights,
        )


def load_graph(data: str | bytes | dict[str, Any]) -> Graph[VertexId]:
    """Validate a JSON document or dict and build a Graph from it.

    Raises:
        pydantic.ValidationError: If the data does not match GraphModel
    """
    if isinstance(data, (str, bytes)):
        model = GraphModel.model_validate_json(data)
    else:
        model = GraphModel.model_validate(data)
    return model.to_graph()
