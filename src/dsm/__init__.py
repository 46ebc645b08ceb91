"""Dependency Structure Matrix ordering for directed graphs."""

__all__ = [
    "BAND_COUNT",
    "Degrees",
    "DependencyMatrix",
    "DirectedGraph",
    "GraphBuilder",
    "MatrixRow",
    "NodeNotFoundError",
    "OrderingReport",
    "TraversalKind",
    "build_dependency_matrix",
    "cell_band",
    "count_backward_edges",
    "export_report",
    "export_report_to_json",
    "export_report_to_toml",
    "feedback_arc_set_order",
    "load_graph",
    "parse_edge_list",
    "render_html",
]

from ._export import render_html
from ._graph import (
    Degrees,
    DirectedGraph,
    GraphBuilder,
    NodeNotFoundError,
    TraversalKind,
    count_backward_edges,
    feedback_arc_set_order,
)
from ._io import export_report, export_report_to_json, export_report_to_toml, load_graph, parse_edge_list
from ._matrix import BAND_COUNT, DependencyMatrix, MatrixRow, build_dependency_matrix, cell_band
from ._models import OrderingReport
