"""Tests for run recording and comparison."""

import json

import pytest

from engine import InvalidInput, Recorder, compare
from structures import ArrayState, sample_graph


class TestRecorder:
    def test_bubble_metrics(self):
        rec = Recorder()
        m = rec.record("array", "bubble", ArrayState(values=[3, 1, 2]))
        assert m.label == "Bubble Sort"
        assert m.compares == 3
        assert m.swaps == 2
        assert m.total_steps == 6
        assert m.outcome["values"] == [1, 2, 3]
        assert rec.final.values == [1, 2, 3]

    def test_initial_state_untouched(self):
        state = ArrayState(values=[3, 1, 2])
        Recorder().record("array", "quick", state)
        assert state.values == [3, 1, 2]

    def test_visits_counted(self):
        m = Recorder().record("graph", "bfs", sample_graph(), {"start": "node1"})
        assert m.visits == 6

    def test_rejected_request_raises(self):
        with pytest.raises(InvalidInput):
            Recorder().record("array", "bogo", ArrayState(values=[1, 2]))

    def test_export_is_json_safe(self):
        g = sample_graph()
        g.create_node("Z")
        rec = Recorder()
        rec.record("graph", "dijkstra", g, {"start": "node1", "end": "node7"})
        data = json.loads(json.dumps(rec.export()))
        assert data["metrics"]["outcome"]["distance"] == "Infinity"
        assert len(data["steps"]) == rec.metrics.total_steps


class TestCompare:
    def test_merge_beats_bubble_on_swaps(self):
        state = ArrayState(values=[3, 1, 2])
        left, right = Recorder(), Recorder()
        left.record("array", "bubble", state)
        right.record("array", "merge", state)
        result = compare(left, right)
        assert result.winner_swaps == "Merge Sort"
        assert result.left.label == "Bubble Sort"

    def test_tie(self):
        state = ArrayState(values=[1, 2])
        left, right = Recorder(), Recorder()
        left.record("array", "bubble", state)
        right.record("array", "bubble", state)
        assert compare(left, right).winner_steps == "tie"
