"""Dependency Structure Matrix derived from a graph and a node ordering.

This is the pure data behind every DSM rendering: the renderers only decide
how cells look, never which cells are marked.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._graph import DirectedGraph

T = TypeVar("T")


BAND_COUNT = 4
"""Number of rotating background colours used to tell rows and columns apart."""


@dataclass(frozen=True, slots=True)
class MatrixRow:
    """One node of the matrix and the edges leaving it."""

    label: str
    position: int  # 1-based
    cells: tuple[bool, ...]
    successors: int  # marks outside the diagonal


@dataclass(frozen=True, slots=True)
class DependencyMatrix:
    """A square matrix where cell (i, j) is marked when node i connects to node j.

    Rows and columns follow the same ordering. Marks above the diagonal are
    forward edges; marks below it are backward edges.
    """

    rows: tuple[MatrixRow, ...]
    predecessors: tuple[int, ...]  # per column, marks outside the diagonal

    @property
    def labels(self) -> tuple[str, ...]:
        """Node labels in matrix order."""
        return tuple(row.label for row in self.rows)

    @property
    def size(self) -> int:
        """Number of nodes in the matrix."""
        return len(self.rows)

    @property
    def backward_edges(self) -> int:
        """Number of marks below the diagonal."""
        return sum(sum(row.cells[: row.position - 1]) for row in self.rows)

    def is_marked(self, row: int, column: int) -> bool:
        """Check cell (row, column), both 0-based."""
        return self.rows[row].cells[column]


def cell_band(row: int, column: int) -> int:
    """Colour band of an off-diagonal cell (0-based indexes).

    Cells above the diagonal take the band of their column, cells below it
    the band of their row, so each node's dependencies read as a coloured
    strip along its column and row.
    """
    return (column if row < column else row) % BAND_COUNT


def build_dependency_matrix(graph: DirectedGraph[T], ordering: Sequence[T]) -> DependencyMatrix:
    """Build the DSM of ``graph`` with rows and columns in ``ordering``.

    Args:
        graph: The graph. Every node of ``ordering`` must be live in it.
        ordering: A permutation of the graph's nodes.

    Returns:
        The dependency matrix.

    Raises:
        ValueError: If ``ordering`` is not a permutation of the graph's nodes.

    """
    duplicates = [node for node, count in Counter(ordering).items() if count > 1]
    if duplicates:
        msg = f"Ordering repeats nodes: {duplicates!r}"
        raise ValueError(msg)
    if set(ordering) != graph.nodes:
        missing = graph.nodes - set(ordering)
        unknown = set(ordering) - graph.nodes
        msg = f"Ordering is not a permutation of the graph nodes (missing: {missing!r}, unknown: {unknown!r})"
        raise ValueError(msg)

    size = len(ordering)
    marks = [[graph.connects(source, target) for target in ordering] for source in ordering]

    rows = tuple(
        MatrixRow(
            label=str(node),
            position=i + 1,
            cells=tuple(marks[i]),
            successors=sum(marks[i][j] for j in range(size) if j != i),
        )
        for i, node in enumerate(ordering)
    )
    predecessors = tuple(sum(marks[i][j] for i in range(size) if i != j) for j in range(size))
    return DependencyMatrix(rows=rows, predecessors=predecessors)
