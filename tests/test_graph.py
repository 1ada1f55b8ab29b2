"""Tests for graph traversal, Dijkstra and graph editing."""

import math

import pytest

from algorithms.step import StepKind
from engine import InvalidInput, PreconditionViolation, edit_graph, run, validate
from structures import GraphState, sample_graph


def _two_components():
    g = GraphState()
    for label in "ABCDE":
        g.create_node(label)
    g.create_edge("node1", "node2")
    g.create_edge("node2", "node3")
    g.create_edge("node4", "node5")
    return g


def _visits(steps):
    return [s.get("node") for s in steps if s.kind == StepKind.VISIT]


# ── Dijkstra ─────────────────────────────────────────────────────────

class TestDijkstra:
    def test_sample_shortest_path(self, do):
        final, steps = do("graph", "dijkstra", sample_graph(), start="node1", end="node6")
        outcome = steps[-1]
        assert outcome.get("reachable") is True
        assert outcome.get("distance") == 8
        assert outcome.get("path") == ["node1", "node2", "node3", "node6"]
        assert final.get_node("node6").distance == 8
        assert final.get_node("node6").predecessor == "node3"

    def test_path_is_highlighted(self, do):
        final, _ = do("graph", "dijkstra", sample_graph(), start="node1", end="node6")
        for node_id in ["node1", "node2", "node3", "node6"]:
            assert final.get_node(node_id).highlighted

    def test_unreachable(self, do):
        g = edit_graph(sample_graph(), "add_node", {"label": "G"})
        _, steps = do("graph", "dijkstra", g, start="node1", end="node7")
        assert steps[-1].get("reachable") is False
        assert math.isinf(steps[-1].get("distance"))
        assert steps[-1].get("path") == []

    def test_start_equals_end(self, do):
        _, steps = do("graph", "dijkstra", sample_graph(), start="node3", end="node3")
        assert steps[-1].get("distance") == 0
        assert steps[-1].get("path") == ["node3"]

    def test_initialises_every_distance(self):
        steps = run("graph", "dijkstra", sample_graph(), {"start": "node1", "end": "node6"})
        first = [s for s in steps if s.kind == StepKind.DISTANCE_UPDATE][:6]
        assert [s.get("node") for s in first] == [f"node{i}" for i in range(1, 7)]
        assert first[0].get("distance") == 0
        assert all(math.isinf(s.get("distance")) for s in first[1:])

    def test_unweighted_rejected(self):
        g = sample_graph(weighted=False)
        assert run("graph", "dijkstra", g, {"start": "node1", "end": "node6"}) == []
        with pytest.raises(PreconditionViolation):
            validate("graph", "dijkstra", g, {"start": "node1", "end": "node6"})

    def test_negative_weight_rejected(self):
        g = sample_graph()
        g.edges[0].weight = -1
        with pytest.raises(PreconditionViolation):
            validate("graph", "dijkstra", g, {"start": "node1", "end": "node6"})

    def test_unknown_node_rejected(self):
        with pytest.raises(PreconditionViolation):
            validate("graph", "dijkstra", sample_graph(), {"start": "node1", "end": "node99"})


# ── DFS / BFS ────────────────────────────────────────────────────────

class TestTraversal:
    def test_dfs_order(self, do):
        _, steps = do("graph", "dfs", sample_graph(), start="node1")
        expected = ["node1", "node2", "node3", "node6", "node5", "node4"]
        assert _visits(steps) == expected
        assert steps[-1].get("order") == expected

    def test_bfs_order(self, do):
        _, steps = do("graph", "bfs", sample_graph(), start="node1")
        expected = ["node1", "node2", "node4", "node3", "node5", "node6"]
        assert _visits(steps) == expected
        assert steps[-1].get("order") == expected

    @pytest.mark.parametrize("algo", ["dfs", "bfs"])
    def test_disconnected_graph_stays_in_component(self, do, algo):
        final, steps = do("graph", algo, _two_components(), start="node1")
        assert sorted(_visits(steps)) == ["node1", "node2", "node3"]
        assert not final.get_node("node4").visited
        assert not final.get_node("node5").visited
        assert all(final.get_node(n).visited for n in ["node1", "node2", "node3"])

    @pytest.mark.parametrize("algo", ["dfs", "bfs"])
    def test_each_node_visited_once(self, algo):
        steps = run("graph", algo, sample_graph(), {"start": "node4"})
        visits = _visits(steps)
        assert len(visits) == len(set(visits)) == 6

    def test_directed_edges_followed_one_way(self, do):
        _, steps = do("graph", "bfs", sample_graph(directed=True), start="node6")
        assert steps[-1].get("order") == ["node6"]

    def test_missing_start_rejected(self):
        assert run("graph", "dfs", sample_graph(), {"start": "nope"}) == []


# ── Editing ──────────────────────────────────────────────────────────

class TestEditGraph:
    def test_add_node_assigns_next_id(self):
        g = edit_graph(sample_graph(), "add_node", {"label": "G", "x": 10, "y": 20})
        node = g.get_node("node7")
        assert node.label == "G"
        assert (node.x, node.y) == (10, 20)

    def test_edit_is_pure(self):
        g = sample_graph()
        edit_graph(g, "remove_node", {"node": "node1"})
        assert g.get_node("node1") is not None

    def test_remove_node_drops_edges(self):
        g = edit_graph(sample_graph(), "remove_node", {"node": "node2"})
        assert all("node2" not in (e.source, e.target) for e in g.edges)
        assert len(g.edges) == 4

    def test_add_edge(self):
        g = edit_graph(sample_graph(), "add_edge", {"source": "node1", "target": "node6", "weight": 3})
        assert g.has_edge("node1", "node6")

    def test_self_loop_rejected(self):
        with pytest.raises(InvalidInput):
            edit_graph(sample_graph(), "add_edge", {"source": "node1", "target": "node1"})

    def test_duplicate_edge_rejected(self):
        with pytest.raises(PreconditionViolation):
            edit_graph(sample_graph(), "add_edge", {"source": "node1", "target": "node2"})
        with pytest.raises(PreconditionViolation):
            edit_graph(sample_graph(), "add_edge", {"source": "node2", "target": "node1"})

    def test_reverse_edge_allowed_when_directed(self):
        g = edit_graph(sample_graph(directed=True), "add_edge", {"source": "node2", "target": "node1"})
        assert g.has_edge("node2", "node1")

    def test_remove_edge_either_direction_when_undirected(self):
        g = edit_graph(sample_graph(), "remove_edge", {"source": "node2", "target": "node1"})
        assert not g.has_edge("node1", "node2")
        assert len(g.edges) == 6

    def test_remove_edge_exact_direction_when_directed(self):
        g = edit_graph(sample_graph(directed=True), "remove_edge", {"source": "node2", "target": "node1"})
        assert g.has_edge("node1", "node2")
        g = edit_graph(g, "remove_edge", {"source": "node1", "target": "node2"})
        assert not g.has_edge("node1", "node2")

    def test_edge_to_missing_node_rejected(self):
        with pytest.raises(PreconditionViolation):
            edit_graph(sample_graph(), "add_edge", {"source": "node1", "target": "node42"})

    def test_toggles_and_clear(self):
        g = edit_graph(GraphState(), "set_directed", {"value": True})
        assert g.directed
        g = edit_graph(g, "set_weighted", {})
        assert g.weighted
        g = edit_graph(sample_graph(), "clear")
        assert g.nodes == [] and g.edges == [] and g.next_id == 1

    def test_unknown_action_rejected(self):
        with pytest.raises(InvalidInput):
            edit_graph(GraphState(), "explode")

    def test_edit_wipes_algorithm_marks(self, do):
        final, _ = do("graph", "bfs", sample_graph(), start="node1")
        g = edit_graph(final, "move_node", {"node": "node1", "x": 0, "y": 0})
        assert not any(n.visited or n.highlighted for n in g.nodes)
