"""Reading edge lists and writing ordering reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import tomli_w

from ._graph import DirectedGraph, GraphBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._models import OrderingReport

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ":"
COMMENT_PREFIX = "#"


def parse_edge_list(
    lines: Iterable[str],
    *,
    separator: str = DEFAULT_SEPARATOR,
    builder: GraphBuilder[str] | None = None,
) -> GraphBuilder[str]:
    """Feed ``source<separator>target`` lines into a graph builder.

    Whitespace around both names is stripped. Blank lines and comment lines
    (starting with ``#``) are skipped. Any other line that does not split into
    exactly two non-empty names is skipped with a warning.

    Args:
        lines: The lines to parse. Trailing newlines are allowed.
        separator: The string separating source and target.
        builder: An existing builder to extend. A new one is created if None.

    Returns:
        The builder holding the parsed edges.

    Example:
        >>> builder = parse_edge_list(["a: b", "b : c"])
        >>> builder.build().edge_count()
        2

    """
    if not separator:
        msg = "Edge separator must not be empty"
        raise ValueError(msg)

    if builder is None:
        builder = GraphBuilder()

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        parts = [part.strip() for part in line.split(separator)]
        if len(parts) != 2 or not all(parts):  # noqa: PLR2004
            logger.warning(f"Ignoring line {line_number}: '{line}'")
            continue

        source, target = parts
        builder.connect(source, target)

    return builder


def load_graph(path: Path, *, separator: str = DEFAULT_SEPARATOR) -> DirectedGraph[str]:
    """Load a graph from an edge-list file.

    Args:
        path: Path to a UTF-8 text file with one edge per line.
        separator: The string separating source and target.

    Returns:
        The built graph.

    """
    logger.debug(f"Reading edges from {path}")
    with path.open(encoding="utf-8") as f:
        builder = parse_edge_list(f, separator=separator)
    graph = builder.build()
    logger.debug(f"Loaded {graph.order()} nodes and {graph.edge_count()} edges")
    return graph


def export_report_to_toml(report: OrderingReport, path: Path) -> None:
    """Write an ordering report as TOML."""
    with path.open("wb") as f:
        tomli_w.dump(report.model_dump(mode="python"), f)


def export_report_to_json(report: OrderingReport, path: Path) -> None:
    """Write an ordering report as JSON."""
    path.write_text(report.model_dump_json(indent=2) + "\n", encoding="utf-8")


def export_report(report: OrderingReport, path: Path) -> None:
    """Write an ordering report, choosing the format from the file suffix.

    ``.json`` files get JSON; anything else gets TOML.
    """
    if path.suffix.lower() == ".json":
        export_report_to_json(report, path)
    else:
        export_report_to_toml(report, path)
    logger.debug(f"Wrote ordering report to {path}")
