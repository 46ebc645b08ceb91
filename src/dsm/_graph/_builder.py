"""Mutable accumulator producing DirectedGraph instances."""

from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Self, TypeVar

import numpy as np

from ._directed_graph import DirectedGraph


T = TypeVar("T")


class GraphBuilder(Generic[T]):
    """Collects nodes and edges, then builds an immutable DirectedGraph.

    Nodes are indexed in the order they are first seen, either through
    ``connect`` (source before target) or ``add_node``. That order is the
    iteration order of the built graph and therefore decides the tie-breaks
    of the ordering heuristic.

    Example:
        >>> graph = GraphBuilder().connect("a", "b").connect("a", "c").build()
        >>> graph.order()
        3

    """

    def __init__(self) -> None:
        # dicts as insertion-ordered sets
        self._nodes: dict[T, None] = {}
        self._edges: dict[T, dict[T, None]] = {}

    def add_node(self, node: T) -> Self:
        """Register a node, possibly without any edge."""
        self._nodes.setdefault(node, None)
        return self

    def connect(self, source: T, target: T) -> Self:
        """Register an edge from ``source`` to ``target``.

        Both endpoints are registered as nodes if needed. Repeated edges are
        recorded once; self-loops are allowed.
        """
        self._nodes.setdefault(source, None)
        self._nodes.setdefault(target, None)
        self._edges.setdefault(source, {})[target] = None
        return self

    def build(self) -> DirectedGraph[T]:
        """Assign indexes and build the adjacency matrix."""
        nodes = tuple(self._nodes)
        indexes = {node: index for index, node in enumerate(nodes)}

        adjacency = np.zeros((len(nodes), len(nodes)), dtype=np.bool_)
        for source, targets in self._edges.items():
            adjacency[indexes[source], [indexes[target] for target in targets]] = True
        adjacency.flags.writeable = False

        live = np.ones(len(nodes), dtype=np.bool_)
        live.flags.writeable = False

        return DirectedGraph(
            _nodes=nodes,
            _indexes=MappingProxyType(indexes),
            _adjacency=adjacency,
            _live=live,
        )

    def __len__(self) -> int:
        """Return the number of registered nodes."""
        return len(self._nodes)
