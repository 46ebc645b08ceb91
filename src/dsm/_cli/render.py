"""Rich rendering of dependency structure matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from dsm._matrix import cell_band

if TYPE_CHECKING:
    from rich.console import Console

    from dsm._matrix import DependencyMatrix

# Rotating styles matching the HTML bands
BAND_STYLES = ("on #e8f5e9", "on #c8e6c9", "on #a5d6a7", "on #81c784")
DIAGONAL_STYLE = "on grey50"


def render_matrix_table(matrix: DependencyMatrix, console: Console) -> None:
    """Render a dependency matrix as a Rich table.

    Args:
        matrix: The matrix to render.
        console: Rich Console to output to.

    """
    if matrix.size == 0:
        console.print("[dim]The graph has no nodes[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan", show_footer=True, footer_style="dim")
    table.add_column("#", justify="right", footer="")
    table.add_column("Node", style="bold", justify="right", footer="Predecessors")
    for column, count in enumerate(matrix.predecessors):
        table.add_column(str(column + 1), justify="center", footer=str(count))
    table.add_column("Successors", justify="right", footer="")

    for index, row in enumerate(matrix.rows):
        cells: list[Text] = []
        for column, marked in enumerate(row.cells):
            if column == index:
                cells.append(Text("", style=DIAGONAL_STYLE))
            else:
                style = "bold black " + BAND_STYLES[cell_band(index, column)]
                cells.append(Text("X" if marked else "", style=style))
        table.add_row(str(row.position), Text(row.label), *cells, str(row.successors))

    console.print(table)


def render_ordering(ordering: list[str], console: Console) -> None:
    """Print one node per line."""
    for node in ordering:
        console.print(node, markup=False, highlight=False)
