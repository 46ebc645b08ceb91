"""Serializable documents produced from an ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._graph import count_backward_edges

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._graph import DirectedGraph


T = TypeVar("T")


class OrderingReport(BaseModel):
    """Ordering of a graph together with summary figures."""

    model_config = ConfigDict(frozen=True)

    nodes: list[str] = Field(description="Node labels in DSM order.")
    node_count: int = Field(ge=0)
    edge_count: int = Field(ge=0)
    backward_edges: int = Field(ge=0, description="Edges pointing from a later node to an earlier one.")

    @model_validator(mode="after")
    def _check_counts(self) -> OrderingReport:
        if self.node_count != len(self.nodes):
            msg = f"node_count is {self.node_count} but {len(self.nodes)} nodes are listed"
            raise ValueError(msg)
        if self.backward_edges > self.edge_count:
            msg = "backward_edges cannot exceed edge_count"
            raise ValueError(msg)
        return self

    @classmethod
    def from_ordering(cls, graph: DirectedGraph[T], ordering: Sequence[T]) -> OrderingReport:
        """Summarize ``ordering`` of ``graph``."""
        return cls(
            nodes=[str(node) for node in ordering],
            node_count=len(ordering),
            edge_count=graph.edge_count(),
            backward_edges=count_backward_edges(graph, ordering),
        )
