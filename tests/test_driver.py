"""Tests for the playback Driver."""

import threading

import pytest

from algorithms.step import StepKind
from config import Config
from engine import Driver, DriverState, OperationInProgress, replay, run
from structures import ArrayState, StackState, sample_graph


def _driver(values=(5, 3, 1, 4)):
    return Driver("array", ArrayState(values=list(values)))


class TestLifecycle:
    def test_starts_idle(self):
        driver = _driver()
        assert driver.status == DriverState.IDLE
        assert not driver.is_running

    def test_start_queues_all_steps(self):
        driver = _driver()
        expected = run("array", "bubble", driver.state)
        assert driver.start("bubble")
        assert driver.is_running
        assert list(driver.pending) == expected

    def test_advance_applies_in_order(self):
        driver = _driver()
        initial = driver.state
        driver.start("insertion")
        seen = []
        while driver.is_running:
            seen.append(driver.advance())
        assert seen == run("array", "insertion", initial)
        assert driver.applied == seen
        assert driver.state == replay(initial, seen)
        assert driver.status == DriverState.IDLE

    def test_advance_when_idle_returns_none(self):
        assert _driver().advance() is None

    def test_finish_drains(self):
        driver = _driver()
        driver.start("merge")
        driver.advance()
        driver.finish()
        assert driver.state.values == [1, 3, 4, 5]
        assert not driver.pending
        assert driver.outcome["values"] == [1, 3, 4, 5]

    def test_rejected_request_stays_idle(self):
        driver = Driver("stack", StackState())
        assert driver.start("pop") is False
        assert driver.status == DriverState.IDLE
        assert driver.applied == []

    def test_on_state_callback(self):
        calls = []
        driver = Driver("graph", sample_graph(), on_state=lambda s, step: calls.append(step.kind))
        driver.start("bfs", {"start": "node1"})
        driver.finish()
        assert len(calls) == len(driver.applied)
        assert calls[-1] == StepKind.COMPLETE


class TestMutualExclusion:
    def test_second_start_is_refused(self):
        driver = _driver()
        driver.start("bubble")
        driver.advance()
        pending = list(driver.pending)
        assert driver.start("quick") is False
        assert driver.operation == "bubble"
        assert list(driver.pending) == pending

    def test_replace_state_refused_mid_run(self):
        driver = _driver()
        driver.start("selection")
        with pytest.raises(OperationInProgress):
            driver.replace_state(ArrayState(values=[1]))

    def test_can_start_again_after_finish(self):
        driver = _driver()
        driver.start("bubble")
        driver.finish()
        assert driver.start("quick")

    def test_concurrent_starts_admit_one(self):
        driver = _driver(range(40, 0, -1))
        barrier = threading.Barrier(2)
        results = {}

        def start(operation):
            barrier.wait()
            results[operation] = driver.start(operation)

        threads = [threading.Thread(target=start, args=(op,)) for op in ("bubble", "selection")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results.values()) == [False, True]
        winner = "bubble" if results["bubble"] else "selection"
        assert driver.operation == winner
        assert list(driver.pending) == run("array", winner, ArrayState(values=list(range(40, 0, -1))))

    def test_load_switches_structure(self):
        driver = _driver()
        driver.start("bubble")
        driver.finish()
        driver.load("stack", StackState(items=["a"]))
        assert driver.state == StackState(items=["a"])
        assert driver.applied == [] and driver.operation == ""

    def test_load_refused_mid_run(self):
        driver = _driver()
        driver.start("bubble")
        with pytest.raises(OperationInProgress):
            driver.load("stack", StackState())
        assert driver.state == ArrayState(values=[5, 3, 1, 4])


class TestSpeed:
    def test_default_speed(self):
        assert _driver().speed == Config.SPEED_PRESETS[Config.default_speed]

    def test_presets(self):
        driver = _driver()
        driver.set_speed("turbo")
        assert driver.speed == Config.SPEED_PRESETS["turbo"]
        driver.set_speed("warp")
        assert driver.speed == Config.SPEED_PRESETS["medium"]

    def test_value_clamped(self):
        driver = _driver()
        driver.set_speed_value(0)
        assert driver.speed == Config.MIN_INTERVAL

    def test_tick_advances_when_due(self):
        driver = _driver()
        driver.start("bubble")
        driver.speed = 0
        assert driver.tick() is True
        assert len(driver.applied) == 1

    def test_tick_waits_for_interval(self):
        driver = _driver()
        driver.start("bubble")
        driver.speed = 3600
        assert driver.tick() is False

    def test_tick_idle(self):
        assert _driver().tick() is False
