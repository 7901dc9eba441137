"""Tests for graph/traversal.py"""

import pytest

from constants import SAMPLE_GRAPH_EDGES, SAMPLE_GRAPH_NODES
from errors import ErrorKind
from graph import GraphEdge, run_bfs, run_dfs
from steps import Action


def recursive_dfs(nodes, edges, start):
    """Reference order of the recursive formulation."""
    neighbors = {node: [] for node in nodes}
    for a, b in edges:
        neighbors[a].append(b)
        neighbors[b].append(a)
    order = []

    def visit(node):
        order.append(node)
        for neighbor in neighbors[node]:
            if neighbor not in order:
                visit(neighbor)

    visit(start)
    return tuple(order)


class TestBFS:
    def test_sample_graph_visit_order(self):
        sequence = run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "A")
        assert sequence.outcome == ("A", "B", "C", "D")
        assert sequence.final.metrics["visit_order"] == ("A", "B", "C", "D")

    def test_two_phase_steps_per_visit(self):
        sequence = run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "A")
        assert sequence.actions() == (
            Action.VISIT, Action.DISCOVER,
            Action.VISIT, Action.DISCOVER,
            Action.VISIT, Action.DISCOVER,
            Action.VISIT, Action.DISCOVER,
            Action.COMPLETE,
        )

        visit_a, discover_a = sequence[0], sequence[1]
        assert visit_a.highlighted_nodes == {"A"}
        assert visit_a.highlighted_edges == frozenset()
        assert discover_a.highlighted_nodes == {"A"}
        assert discover_a.highlighted_edges == {("A", "B"), ("A", "C")}
        assert discover_a.metrics["frontier"] == ("B", "C")

        # B only discovers C, which is already queued
        discover_b = sequence[3]
        assert discover_b.highlighted_edges == {("B", "C")}
        assert discover_b.metrics["queue"] == ("C",)

    def test_final_step_has_no_highlights(self):
        final = run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "A").final
        assert final.terminal
        assert final.action is Action.COMPLETE
        assert not final.highlighted_nodes
        assert not final.highlighted_edges

    def test_edge_list_order_decides_ties(self):
        edges = [("A", "C"), ("A", "B"), ("B", "C"), ("C", "D")]
        assert run_bfs(SAMPLE_GRAPH_NODES, edges, "A").outcome == ("A", "C", "B", "D")

    def test_unreachable_nodes_are_not_visited(self):
        sequence = run_bfs(["A", "B", "C", "Z"], [("A", "B"), ("B", "C")], "A")
        assert sequence.outcome == ("A", "B", "C")
        assert sequence.ok

    def test_input_is_not_mutated(self):
        edges = [GraphEdge("A", "B"), GraphEdge("B", "C")]
        nodes = ["A", "B", "C"]
        run_bfs(nodes, edges, "A")
        assert edges == [GraphEdge("A", "B"), GraphEdge("B", "C")]
        assert nodes == ["A", "B", "C"]

    def test_deterministic(self):
        first = run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "C")
        second = run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "C")
        assert first == second


class TestDFS:
    def test_sample_graph_visit_order(self):
        sequence = run_dfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "A")
        assert sequence.outcome == ("A", "B", "C", "D")

    def test_edge_step_before_each_descent(self):
        sequence = run_dfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "A")
        assert sequence.actions() == (
            Action.VISIT,     # A
            Action.TRAVERSE,  # A-B
            Action.VISIT,     # B
            Action.TRAVERSE,  # B-C
            Action.VISIT,     # C
            Action.TRAVERSE,  # C-D
            Action.VISIT,     # D
            Action.COMPLETE,
        )
        assert sequence[1].highlighted_edges == {("A", "B")}
        assert sequence[3].highlighted_edges == {("B", "C")}
        assert sequence[5].highlighted_edges == {("C", "D")}

    @pytest.mark.parametrize("start", ["A", "B", "C", "D", "E", "F"])
    def test_matches_recursive_formulation(self, start):
        nodes = ["A", "B", "C", "D", "E", "F"]
        edges = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E"), ("B", "F"), ("E", "F")]
        assert run_dfs(nodes, edges, start).outcome == recursive_dfs(nodes, edges, start)

    def test_deep_chain_does_not_hit_recursion_limit(self):
        size = 5000
        nodes = list(range(size))
        edges = [(i, i + 1) for i in range(size - 1)]
        sequence = run_dfs(nodes, edges, 0)
        assert sequence.outcome == tuple(nodes)


class TestReachability:
    @pytest.mark.parametrize("engine", [run_bfs, run_dfs])
    def test_each_reachable_node_once(self, engine):
        nodes = ["A", "B", "C", "D", "E", "X", "Y"]
        edges = [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "E"), ("X", "Y")]
        order = engine(nodes, edges, "A").outcome
        assert sorted(order) == ["A", "B", "C", "D", "E"]
        assert len(order) == len(set(order))


class TestErrors:
    @pytest.mark.parametrize("engine", [run_bfs, run_dfs])
    def test_unknown_start(self, engine):
        sequence = engine(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, "Z")
        assert len(sequence) == 1
        assert sequence.error is ErrorKind.UNKNOWN_START_NODE
        assert sequence.final.terminal

    @pytest.mark.parametrize(
        "edges, kind",
        [
            ([("A", "A")], ErrorKind.SELF_LOOP),
            ([("A", "B"), ("B", "A")], ErrorKind.DUPLICATE_EDGE),
        ],
    )
    def test_malformed_graph(self, edges, kind):
        sequence = run_bfs(["A", "B"], edges, "A")
        assert len(sequence) == 1
        assert sequence.error is kind
