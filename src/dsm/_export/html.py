"""HTML rendering of a Dependency Structure Matrix."""

from __future__ import annotations

from typing import TYPE_CHECKING

from htpy import Element, dd, div, dl, dt, section, table, tbody, td, tfoot, th, thead, tr

from dsm._matrix import BAND_COUNT, cell_band

from ._layout import base_page

if TYPE_CHECKING:
    from dsm._matrix import DependencyMatrix, MatrixRow

MARK = "X"
DEFAULT_TITLE = "Dependency Structure Matrix"


def render_html(matrix: DependencyMatrix, *, title: str = DEFAULT_TITLE) -> str:
    """Render a dependency matrix as a standalone HTML document.

    Args:
        matrix: The matrix to render.
        title: Page title.

    Returns:
        Complete HTML document as a string.

    """
    return base_page(
        page_title=title,
        subtitle=f"{matrix.size} nodes, {matrix.backward_edges} backward edges",
        content=[
            _render_summary(matrix),
            div(".dsm-wrapper")[_render_table(matrix)],
        ],
    )


def _render_summary(matrix: DependencyMatrix) -> Element:
    forward = sum(row.successors for row in matrix.rows) - matrix.backward_edges
    return section(".summary")[
        dl[
            dt["Nodes"],
            dd[str(matrix.size)],
            dt["Forward edges"],
            dd[str(forward)],
            dt["Backward edges"],
            dd[str(matrix.backward_edges)],
        ],
    ]


def _render_table(matrix: DependencyMatrix) -> Element:
    return table(".dsm")[
        thead[
            tr[
                th(".name")["Node"],
                th["#"],
                (th(f".band-{column % BAND_COUNT}")[str(column + 1)] for column in range(matrix.size)),
                th["Successors"],
            ],
        ],
        tbody[(_render_row(row, matrix.size) for row in matrix.rows)],
        tfoot[
            tr[
                th(".name")["Predecessors"],
                td,
                (td(f".band-{column % BAND_COUNT}")[str(count)] for column, count in enumerate(matrix.predecessors)),
                td,
            ],
        ],
    ]


def _render_row(row: MatrixRow, size: int) -> Element:
    index = row.position - 1
    band = index % BAND_COUNT
    return tr[
        th(f".name.band-{band}", title=row.label)[row.label],
        th(f".band-{band}")[str(row.position)],
        (_render_cell(row, index, column) for column in range(size)),
        td(f".count.band-{band}")[str(row.successors)],
    ]


def _render_cell(row: MatrixRow, index: int, column: int) -> Element:
    if index == column:
        return td(".diagonal")
    band = cell_band(index, column)
    if row.cells[column]:
        return td(f".mark.band-{band}", title=f"{row.label} depends on #{column + 1}")[MARK]
    return td(f".band-{band}")
