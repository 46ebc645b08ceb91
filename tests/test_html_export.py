"""Tests for the HTML export of dependency matrices."""

from __future__ import annotations

import pytest

from dsm._export import render_html
from dsm._graph import DirectedGraph, feedback_arc_set_order
from dsm._matrix import DependencyMatrix, build_dependency_matrix


@pytest.fixture
def matrix() -> DependencyMatrix:
    graph = DirectedGraph.from_edges(
        [("parser", "lexer"), ("lexer", "tokens"), ("tokens", "parser"), ("cli", "parser")],
    )
    return build_dependency_matrix(graph, feedback_arc_set_order(graph))


def test_render_html_contains_doctype(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    assert html.startswith("<!DOCTYPE html>")


def test_render_html_contains_structural_elements(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    for tag in ["<html", "<head", "<body", "<main", "<table", "<thead", "<tbody", "<tfoot", "<style"]:
        assert tag in html, f"Missing structural element: {tag}"


def test_render_html_contains_node_labels(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    for label in ("parser", "lexer", "tokens", "cli"):
        assert label in html, f"Missing node: {label}"


def test_render_html_marks_every_edge(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    assert html.count(">X</td>") == 4


def test_render_html_one_diagonal_cell_per_node(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    assert html.count('class="diagonal"') == matrix.size


def test_render_html_summary(matrix: DependencyMatrix) -> None:
    html = render_html(matrix)
    assert "Backward edges" in html
    assert "4 nodes, 1 backward edges" in html


def test_render_html_custom_title(matrix: DependencyMatrix) -> None:
    html = render_html(matrix, title="Module dependencies")
    assert "<title>Module dependencies</title>" in html


def test_render_html_escapes_labels() -> None:
    graph = DirectedGraph.from_edges([("<script>", "a&b")])
    html = render_html(build_dependency_matrix(graph, feedback_arc_set_order(graph)))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "a&amp;b" in html


def test_render_html_empty_matrix() -> None:
    html = render_html(build_dependency_matrix(DirectedGraph.from_edges([]), []))
    assert "<table" in html
    assert "0 nodes" in html
