import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dsm._export import render_html
from dsm._graph import DirectedGraph, feedback_arc_set_order
from dsm._io import export_report, load_graph
from dsm._matrix import build_dependency_matrix
from dsm._models import OrderingReport

from .config import ConfigError, DsmConfig, get_config
from .render import render_matrix_table, render_ordering

app = typer.Typer(no_args_is_help=True)

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

DEFAULT_HTML_OUTPUT = Path("output.html")

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Edge-list file, one 'source: target' edge per line"),
]
SeparatorOption = Annotated[
    str | None,
    typer.Option("-s", "--separator", help="Separator between source and target (default ':')"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Order graph nodes into a Dependency Structure Matrix."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> DsmConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def _load_graph(input: Path | None, separator: str | None, config: DsmConfig) -> DirectedGraph[str]:  # noqa: A002
    """Resolve the input file from the CLI or config and load it."""
    input_path = input if input is not None else config.input
    if input_path is None:
        err_console.print("[red]Error: No input file. Pass one or set \\[tool.dsm].input in pyproject.toml.[/red]")
        raise typer.Exit(code=1)
    if not input_path.is_file():
        err_console.print(f"[red]Error: Input file not found: {escape(str(input_path))}[/red]")
        raise typer.Exit(code=1)

    effective_separator = separator if separator is not None else config.separator
    err_console.print(f"[cyan]Loading edges from:[/cyan] {escape(str(input_path))}")
    try:
        graph = load_graph(input_path, separator=effective_separator)
    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    err_console.print(f"[cyan]Graph:[/cyan] {graph.order()} nodes, {graph.edge_count()} edges")
    return graph


@app.command()
def order(
    input: InputArgument = None,  # noqa: A002
    *,
    separator: SeparatorOption = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write an ordering report (.json for JSON, TOML otherwise)"),
    ] = None,
) -> None:
    """Print the nodes in DSM order, one per line."""
    config = _load_config()
    graph = _load_graph(input, separator, config)

    ordering = feedback_arc_set_order(graph)
    report = OrderingReport.from_ordering(graph, ordering)
    err_console.print(f"[cyan]Backward edges:[/cyan] {report.backward_edges} of {report.edge_count}")

    render_ordering(ordering, out_console)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        export_report(report, output)
        err_console.print(f"[green]Report written to:[/green] {escape(str(output))}")


@app.command()
def matrix(
    input: InputArgument = None,  # noqa: A002
    *,
    separator: SeparatorOption = None,
) -> None:
    """Print the Dependency Structure Matrix as a table."""
    config = _load_config()
    graph = _load_graph(input, separator, config)

    dsm = build_dependency_matrix(graph, feedback_arc_set_order(graph))
    render_matrix_table(dsm, out_console)


@app.command()
def export(
    input: InputArgument = None,  # noqa: A002
    *,
    separator: SeparatorOption = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to the HTML file (default: output.html)"),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Page title (default: the input file name)"),
    ] = None,
) -> None:
    """Write the Dependency Structure Matrix as an HTML page."""
    config = _load_config()
    graph = _load_graph(input, separator, config)

    dsm = build_dependency_matrix(graph, feedback_arc_set_order(graph))

    output_path = output or config.output or DEFAULT_HTML_OUTPUT
    page_title = title or f"DSM: {(input or config.input or output_path).name}"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(dsm, title=page_title), encoding="utf-8")

    logger.debug(f"Rendered {dsm.size}x{dsm.size} matrix")
    err_console.print(f"[green]✓ HTML written to:[/green] {escape(str(output_path))}")


def main() -> None:
    app()
