"""Tests for the feedback arc set ordering heuristic."""

import logging
import random

import pytest

from dsm._graph import DirectedGraph, GraphBuilder, count_backward_edges, feedback_arc_set_order


def _assert_permutation(graph: DirectedGraph, ordering: list) -> None:  # type: ignore[type-arg]
    assert len(ordering) == graph.order()
    assert len(set(ordering)) == len(ordering)
    assert set(ordering) == graph.nodes


class TestFeedbackArcSetOrder:
    """Tests for feedback_arc_set_order."""

    def test_empty_graph(self) -> None:
        assert feedback_arc_set_order(GraphBuilder().build()) == []

    def test_single_node(self) -> None:
        graph = GraphBuilder().add_node("A").build()
        assert feedback_arc_set_order(graph) == ["A"]

    def test_acyclic_graph(self) -> None:
        # A->B->C, A->C
        graph = GraphBuilder().connect("A", "B").connect("A", "C").connect("B", "C").build()
        assert feedback_arc_set_order(graph) == ["A", "B", "C"]

    def test_graph_with_cycle(self) -> None:
        # A->B->C, A->C, C->B
        graph = GraphBuilder().connect("A", "B").connect("A", "C").connect("B", "C").connect("C", "B").build()
        assert feedback_arc_set_order(graph) == ["A", "C", "B"]

    def test_two_cycle_tie_breaks_on_last_seen_node(self) -> None:
        graph = GraphBuilder().connect("A", "B").connect("B", "A").build()
        assert feedback_arc_set_order(graph) == ["B", "A"]

    def test_minimum_degree_difference_wins_over_order(self) -> None:
        # C has |in - out| = 0, A and B have 1; C is moved to the head first
        graph = DirectedGraph.from_edges(
            [("A", "B"), ("B", "C"), ("C", "A"), ("A", "C"), ("C", "B")],
        )
        assert feedback_arc_set_order(graph)[0] == "C"

    def test_sinks_batch_keeps_traversal_order(self) -> None:
        # A and B are both sinks of the first pass
        graph = GraphBuilder().connect("R", "A").connect("R", "B").build()
        assert feedback_arc_set_order(graph) == ["R", "A", "B"]

    def test_sources_batch_keeps_traversal_order(self) -> None:
        # A and B are sources of the cycle C <-> D
        graph = DirectedGraph.from_edges([("A", "C"), ("B", "D"), ("C", "D"), ("D", "C")])
        ordering = feedback_arc_set_order(graph)
        assert ordering[:2] == ["A", "B"]
        _assert_permutation(graph, ordering)

    def test_self_loop_only(self) -> None:
        graph = GraphBuilder().connect("X", "X").build()
        assert feedback_arc_set_order(graph) == ["X"]

    def test_disconnected_components(self) -> None:
        graph = DirectedGraph.from_edges([("A", "B"), ("C", "D"), ("D", "C"), ("E", "E")])
        ordering = feedback_arc_set_order(graph)
        _assert_permutation(graph, ordering)
        assert ordering.index("A") < ordering.index("B")

    def test_input_graph_is_not_modified(self) -> None:
        graph = DirectedGraph.from_edges([("A", "B"), ("B", "A"), ("B", "C")])
        feedback_arc_set_order(graph)
        assert graph.order() == 3
        assert graph.edge_count() == 3

    def test_deterministic(self) -> None:
        edges = [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "B")]
        first = feedback_arc_set_order(DirectedGraph.from_edges(edges))
        second = feedback_arc_set_order(DirectedGraph.from_edges(edges))
        assert first == second

    def test_logs_cycle_breaks(self, caplog: pytest.LogCaptureFixture) -> None:
        graph = GraphBuilder().connect("A", "B").connect("B", "A").build()
        with caplog.at_level(logging.DEBUG, logger="dsm._graph._algorithms"):
            feedback_arc_set_order(graph)
        assert "Breaking cycle at 'B'" in caplog.text

    @pytest.mark.parametrize("seed", range(5))
    def test_random_dag_is_topologically_sorted(self, seed: int) -> None:
        rng = random.Random(seed)
        nodes = [f"n{i}" for i in range(25)]
        rng.shuffle(nodes)
        # Edges only from earlier to later in the shuffled list
        edges = [
            (nodes[i], nodes[j]) for i in range(len(nodes)) for j in range(i + 1, len(nodes)) if rng.random() < 0.15
        ]
        builder: GraphBuilder[str] = GraphBuilder()
        for node in sorted(nodes):
            builder.add_node(node)
        for source, target in edges:
            builder.connect(source, target)
        graph = builder.build()

        ordering = feedback_arc_set_order(graph)

        _assert_permutation(graph, ordering)
        position = {node: index for index, node in enumerate(ordering)}
        for source, target in edges:
            assert position[source] < position[target]
        assert count_backward_edges(graph, ordering) == 0

    @pytest.mark.parametrize("seed", range(5))
    def test_random_cyclic_graph_is_permutation(self, seed: int) -> None:
        rng = random.Random(seed)
        nodes = [f"n{i}" for i in range(20)]
        edges = [(a, b) for a in nodes for b in nodes if rng.random() < 0.2]
        graph = DirectedGraph.from_edges(edges)

        ordering = feedback_arc_set_order(graph)

        _assert_permutation(graph, ordering)
        assert count_backward_edges(graph, ordering) < graph.edge_count()


class TestCountBackwardEdges:
    """Tests for count_backward_edges."""

    def test_forward_ordering(self) -> None:
        graph = DirectedGraph.from_edges([("A", "B"), ("B", "C")])
        assert count_backward_edges(graph, ["A", "B", "C"]) == 0

    def test_reversed_ordering(self) -> None:
        graph = DirectedGraph.from_edges([("A", "B"), ("B", "C")])
        assert count_backward_edges(graph, ["C", "B", "A"]) == 2

    def test_self_loops_not_counted(self) -> None:
        graph = DirectedGraph.from_edges([("A", "A"), ("A", "B")])
        assert count_backward_edges(graph, ["A", "B"]) == 0

    def test_cycle_has_one_backward_edge(self) -> None:
        graph = DirectedGraph.from_edges([("A", "B"), ("B", "C"), ("C", "A")])
        assert count_backward_edges(graph, feedback_arc_set_order(graph)) == 1
