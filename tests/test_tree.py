"""Tests for BST insertion and traversal."""

import random

import pytest

from algorithms.step import StepKind
from algorithms.tree import TRAVERSALS
from engine import InvalidInput, PreconditionViolation, apply, run, validate
from structures import TreeState, sample_tree


def _inorder(state):
    steps = run("tree", "traverse", state, {"order": "inorder"})
    return steps[-1].get("order")


class TestInsert:
    def test_descends_and_attaches_leaf(self, do):
        final, steps = do("tree", "insert", sample_tree(), value=45)
        compares = [s.get("path") for s in steps if s.kind == StepKind.COMPARE]
        assert compares == ["", "L", "LR"]
        assert final.node_at("LRR").value == 45
        assert steps[-1].get("inserted") is True
        assert steps[-1].get("path") == "LRR"

    def test_duplicate_is_noop(self, do):
        tree = sample_tree()
        final, steps = do("tree", "insert", tree, value=40)
        assert steps[-1].get("inserted") is False
        assert not any(s.kind == StepKind.NODE_INSERT for s in steps)
        assert final.values() == tree.values()

    def test_empty_tree_gets_root(self, do):
        final, steps = do("tree", "insert", TreeState(), value=7)
        assert steps[0].kind == StepKind.NODE_INSERT
        assert final.root.value == 7

    def test_numeric_string_accepted(self, do):
        final, _ = do("tree", "insert", TreeState(), value="12")
        assert final.root.value == 12

    def test_non_numeric_rejected(self):
        assert run("tree", "insert", sample_tree(), {"value": "abc"}) == []
        with pytest.raises(InvalidInput):
            validate("tree", "insert", sample_tree(), {"value": "abc"})

    def test_random_inserts_keep_inorder_sorted(self, do):
        rng = random.Random(3)
        state = TreeState()
        seen = set()
        for _ in range(40):
            value = rng.randint(0, 50)
            seen.add(value)
            state, _ = do("tree", "insert", state, value=value)
        assert _inorder(state) == sorted(seen)

    def test_highlights_cleared_after_insert(self, do):
        final, _ = do("tree", "insert", sample_tree(), value=65)
        assert not any(node.highlighted for _, node in final.walk())


class TestTraverse:
    @pytest.mark.parametrize("order, expected", [
        ("inorder",   [20, 30, 40, 50, 60, 70, 80]),
        ("preorder",  [50, 30, 20, 40, 70, 60, 80]),
        ("postorder", [20, 40, 30, 60, 80, 70, 50]),
        ("bfs",       [50, 30, 70, 20, 40, 60, 80]),
    ])
    def test_orders(self, do, order, expected):
        _, steps = do("tree", "traverse", sample_tree(), order=order)
        visits = [s.get("value") for s in steps if s.kind == StepKind.VISIT]
        assert visits == expected
        assert steps[-1].get("order") == expected

    def test_traversal_leaves_tree_unchanged(self, do):
        tree = sample_tree()
        final, _ = do("tree", "traverse", tree, order="preorder")
        assert final == tree

    def test_unknown_order_rejected(self):
        with pytest.raises(InvalidInput):
            validate("tree", "traverse", sample_tree(), {"order": "zigzag"})

    def test_empty_tree_rejected(self):
        with pytest.raises(PreconditionViolation):
            validate("tree", "traverse", TreeState(), {"order": "inorder"})

    @pytest.mark.parametrize("order", TRAVERSALS)
    def test_each_visit_highlights_exactly_the_visited_node(self, order):
        state = sample_tree()
        for step in run("tree", "traverse", state, {"order": order}):
            state = apply(state, step)
            lit = [(path, node) for path, node in state.walk() if node.highlighted]
            if step.kind == StepKind.VISIT:
                assert len(lit) == 1
                assert lit[0][0] == step.get("path")
                assert lit[0][1].value == step.get("value")
            elif step.kind in (StepKind.RESET, StepKind.COMPLETE):
                assert lit == []

    def test_each_compare_highlights_one_node_on_insert(self):
        state = sample_tree()
        for step in run("tree", "insert", state, {"value": 45}):
            state = apply(state, step)
            if step.kind == StepKind.COMPARE:
                assert sum(1 for _, node in state.walk() if node.highlighted) == 1
