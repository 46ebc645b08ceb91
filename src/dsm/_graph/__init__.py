"""Graph module providing the directed graph abstraction and its algorithms.

This module contains:
- DirectedGraph[T]: An immutable, adjacency-matrix backed directed graph
- GraphBuilder[T]: The mutable accumulator that builds it
- feedback_arc_set_order: Ordering heuristic that keeps most edges forward
"""

from ._algorithms import count_backward_edges, feedback_arc_set_order
from ._builder import GraphBuilder
from ._directed_graph import Degrees, DirectedGraph, NodeNotFoundError
from ._traversal import TraversalKind

__all__ = [
    "Degrees",
    "DirectedGraph",
    "GraphBuilder",
    "NodeNotFoundError",
    "TraversalKind",
    "count_backward_edges",
    "feedback_arc_set_order",
]
