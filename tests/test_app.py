"""Flask test-client checks for the JSON host."""

import time

import pytest

import main
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def _create_array(client, values):
    return client.post("/api/array/create", json={"values": values})


class TestCatalogue:
    def test_lists_structures(self, client):
        data = client.get("/api/structures").get_json()
        assert {"array", "tree", "hash_table", "heap", "graph", "stack", "queue"} <= set(data)
        assert "bubble" in [op["key"] for op in data["array"]]
        assert data["graph"][2]["params"] == ["start", "end"]


class TestRun:
    def test_step_through_sort(self, client):
        assert _create_array(client, [3, 1, 2]).status_code == 200
        started = client.post("/api/array/run", json={"operation": "bubble"}).get_json()
        assert started["status"] == "running"
        assert started["total_steps"] == 6

        nxt = client.post("/api/step/next").get_json()
        assert nxt["applied"] == 1
        assert nxt["step"]["kind"] == "compare"

        done = client.post("/api/step/finish").get_json()
        assert done["status"] == "idle"
        assert done["state"]["values"] == [1, 2, 3]

    def test_concurrent_run_conflicts(self, client):
        _create_array(client, [3, 1, 2])
        client.post("/api/array/run", json={"operation": "bubble"})
        resp = client.post("/api/array/run", json={"operation": "quick"})
        assert resp.status_code == 409
        assert client.post("/api/array/create", json={}).status_code == 409

    def test_invalid_operation(self, client):
        _create_array(client, [1, 2])
        resp = client.post("/api/array/run", json={"operation": "bogo"})
        assert resp.status_code == 400
        assert resp.get_json()["type"] == "InvalidInput"

    def test_precondition_failure(self, client):
        client.post("/api/stack/create", json={})
        resp = client.post("/api/stack/run", json={"operation": "pop"})
        assert resp.status_code == 400
        assert resp.get_json()["type"] == "PreconditionViolation"

    def test_kind_mismatch(self, client):
        _create_array(client, [1, 2])
        assert client.post("/api/tree/run", json={"operation": "insert"}).status_code == 400

    def test_unknown_kind(self, client):
        assert client.post("/api/trie/create", json={}).status_code == 400

    def test_next_without_run(self, client):
        _create_array(client, [1])
        assert client.post("/api/step/next").status_code == 400


class TestGraph:
    def test_edit_then_dijkstra(self, client):
        client.post("/api/graph/create", json={"sample": True})
        edited = client.post("/api/graph/edit", json={"action": "add_node", "params": {"label": "G"}})
        assert len(edited.get_json()["state"]["nodes"]) == 7

        client.post("/api/graph/run", json={
            "operation": "dijkstra", "params": {"start": "node1", "end": "node6"},
        })
        done = client.post("/api/step/finish").get_json()
        assert done["step"]["payload"]["distance"] == 8
        isolated = [n for n in done["state"]["nodes"] if n["id"] == "node7"][0]
        assert isolated["unreached"] is True

    def test_edit_requires_graph(self, client):
        _create_array(client, [1])
        assert client.post("/api/graph/edit", json={"action": "clear"}).status_code == 400


class TestSpeedAndState:
    def test_speed_preset(self, client):
        assert client.post("/api/step/speed", json={"speed": "fast"}).get_json()["speed"] == 0.15

    def test_speed_seconds(self, client):
        assert client.post("/api/step/speed", json={"seconds": 0}).get_json()["speed"] == 0.02
        assert client.post("/api/step/speed", json={"seconds": "soon"}).status_code == 400

    def test_state_ticks_running_driver(self, client):
        _create_array(client, [2, 1])
        client.post("/api/step/speed", json={"seconds": 0})
        client.post("/api/array/run", json={"operation": "bubble"})
        time.sleep(0.05)
        state = client.get("/api/state").get_json()
        assert state["applied"] >= 1

    def test_compare(self, client):
        _create_array(client, [3, 1, 2])
        data = client.post("/api/array/compare", json={"left": "bubble", "right": "merge"}).get_json()
        assert data["winner_swaps"] == "Merge Sort"
        assert data["left"]["swaps"] == 2

    def test_compare_refused_mid_run(self, client):
        _create_array(client, [5, 4, 3, 2, 1])
        client.post("/api/array/run", json={"operation": "bubble"})
        for _ in range(12):
            client.post("/api/step/next")
        resp = client.post("/api/array/compare", json={"left": "bubble", "right": "merge"})
        assert resp.status_code == 409
        assert resp.get_json()["type"] == "OperationInProgress"
        assert client.get("/api/state").get_json()["operation"] == "bubble"

    def test_bad_array_size(self, client):
        resp = client.post("/api/array/create", json={"size": "abc"})
        assert resp.status_code == 400
        assert resp.get_json()["type"] == "InvalidInput"


class TestSessions:
    def test_session_store_is_bounded(self, monkeypatch):
        monkeypatch.setattr(main.config, "max_sessions", 3)
        main._DRIVERS.clear()
        for _ in range(20):
            with app.test_client() as fresh:
                assert fresh.get("/api/state").status_code == 200
        assert len(main._DRIVERS) == 3

    def test_recent_session_survives_eviction(self, monkeypatch):
        monkeypatch.setattr(main.config, "max_sessions", 2)
        main._DRIVERS.clear()
        with app.test_client() as keeper:
            _create_array(keeper, [9, 8])
            for _ in range(5):
                with app.test_client() as fresh:
                    fresh.get("/api/state")
                assert keeper.get("/api/state").get_json()["state"]["values"] == [9, 8]
