"""
main.py — Data-Structure Stepper Flask Host
=============================================
JSON web server in front of the engine.  A browser front-end creates a
structure, starts an operation and then pulls the state one step at a
time (or lets `GET /api/state` auto-advance at the chosen speed).

Routes:
  GET  /api/structures         – structures and their operations
  POST /api/<kind>/create      – fresh state for a structure
  POST /api/<kind>/run         – start an operation on the current state
  POST /api/<kind>/compare     – record two operations on the same state
  POST /api/step/next          – apply one step
  POST /api/step/finish        – apply every remaining step
  POST /api/step/speed         – set the auto-advance speed
  GET  /api/state              – current state (ticks the driver when running)
  POST /api/graph/edit         – add/remove/move nodes and edges

State management:
  One Driver per browser session, held in server memory and keyed by a
  random id stored in the Flask session cookie.  At most
  `Config.max_sessions` Drivers are kept; the least recently used one is
  dropped when a new session arrives.  Routes that read the state and
  then act on it hold the Driver's lock for the whole request.
"""

import collections
import logging
import secrets
import threading
from flask import Flask, jsonify, request, session

from config import load_config
from structures import StructureKind
from algorithms import list_algorithms
from engine import (
    Driver, EngineError, InvalidInput, OperationInProgress, Recorder,
    compare, create_initial_state, edit_graph, validate,
)
from engine.api import coerce_kind

config = load_config()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.secret_key

_DRIVERS: "collections.OrderedDict[str, Driver]" = collections.OrderedDict()
_DRIVERS_LOCK = threading.Lock()


# ---------------------------------------------------------------------------
# Session Helpers
# ---------------------------------------------------------------------------
def get_driver() -> Driver:
    """The session's Driver, created on first use with a sorting array."""
    sid = session.get("sid")
    if sid is None:
        sid = session["sid"] = secrets.token_hex(16)
    with _DRIVERS_LOCK:
        driver = _DRIVERS.get(sid)
        if driver is None:
            driver = _DRIVERS[sid] = Driver(StructureKind.ARRAY, create_initial_state(StructureKind.ARRAY))
            while len(_DRIVERS) > config.max_sessions:
                evicted, _ = _DRIVERS.popitem(last=False)
                logger.debug("Dropped idle session %s", evicted)
        else:
            _DRIVERS.move_to_end(sid)
    return driver


def _require_kind(driver: Driver, kind: StructureKind) -> None:
    if driver.kind != kind:
        raise InvalidInput(f"Session holds a {driver.kind.value}; create a {kind.value} first")


def payload() -> dict:
    return request.get_json(silent=True) or {}


def snapshot(driver: Driver) -> dict:
    last = driver.last_step
    return {
        "structure":   driver.kind.value,
        "state":       driver.state.to_dict(),
        "status":      driver.status.value,
        "operation":   driver.operation,
        "step":        last.to_dict() if last else None,
        "applied":     len(driver.applied),
        "remaining":   len(driver.pending),
        "speed":       driver.speed,
    }


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(EngineError)
def handle_engine_error(exc):
    return jsonify({"error": str(exc), "type": type(exc).__name__}), 400


@app.errorhandler(OperationInProgress)
def handle_in_progress(exc):
    return jsonify({"error": str(exc), "type": type(exc).__name__}), 409


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@app.route("/api/structures")
def api_structures():
    return jsonify({
        kind.value: [
            {
                "key":         a.key,
                "label":       a.label,
                "params":      list(a.params),
                "pseudocode":  a.pseudocode,
                "tags":        a.tags,
                "time":        a.complexity_time,
                "space":       a.complexity_space,
                "description": a.description,
            }
            for a in list_algorithms(kind)
        ]
        for kind in StructureKind
    })


# ---------------------------------------------------------------------------
# API: Structures
# ---------------------------------------------------------------------------
@app.route("/api/<kind>/create", methods=["POST"])
def api_create(kind):
    kind = coerce_kind(kind)
    state = create_initial_state(kind, payload())
    driver = get_driver()
    driver.load(kind, state)
    logger.debug("Session %s switched to %s", session["sid"], kind.value)
    return jsonify(snapshot(driver))


@app.route("/api/<kind>/run", methods=["POST"])
def api_run(kind):
    kind = coerce_kind(kind)
    data = payload()
    operation = data.get("operation", "")
    params = data.get("params", {})
    driver = get_driver()
    with driver.lock:
        _require_kind(driver, kind)
        driver.require_idle()
        validate(kind, operation, driver.state, params)
        driver.start(operation, params)
        return jsonify({**snapshot(driver), "total_steps": len(driver.pending)})


@app.route("/api/<kind>/compare", methods=["POST"])
def api_compare(kind):
    kind = coerce_kind(kind)
    data = payload()
    left, right = Recorder(), Recorder()
    driver = get_driver()
    with driver.lock:
        _require_kind(driver, kind)
        driver.require_idle()
        left.record(kind, data.get("left", ""), driver.state, data.get("left_params"))
        right.record(kind, data.get("right", ""), driver.state, data.get("right_params"))
    result = compare(left, right)
    return jsonify({
        "left":            left.export()["metrics"],
        "right":           right.export()["metrics"],
        "winner_steps":    result.winner_steps,
        "winner_compares": result.winner_compares,
        "winner_swaps":    result.winner_swaps,
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    driver = get_driver()
    with driver.lock:
        if driver.advance() is None:
            return jsonify({"error": "No operation in progress"}), 400
        return jsonify(snapshot(driver))


@app.route("/api/step/finish", methods=["POST"])
def api_step_finish():
    driver = get_driver()
    with driver.lock:
        driver.finish()
        return jsonify(snapshot(driver))


@app.route("/api/step/speed", methods=["POST"])
def api_step_speed():
    driver = get_driver()
    data = payload()
    if "seconds" in data:
        try:
            driver.set_speed_value(float(data["seconds"]))
        except (TypeError, ValueError):
            raise InvalidInput("'seconds' must be a number") from None
    else:
        driver.set_speed(data.get("speed", "medium"))
    return jsonify({"speed": driver.speed})


@app.route("/api/state")
def api_state():
    driver = get_driver()
    driver.tick()
    return jsonify(snapshot(driver))


# ---------------------------------------------------------------------------
# API: Graph Editing
# ---------------------------------------------------------------------------
@app.route("/api/graph/edit", methods=["POST"])
def api_graph_edit():
    data = payload()
    driver = get_driver()
    with driver.lock:
        if driver.kind != StructureKind.GRAPH:
            raise InvalidInput("Session does not hold a graph")
        driver.replace_state(edit_graph(driver.state, data.get("action", ""), data.get("params", {})))
        return jsonify(snapshot(driver))


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Starting Flask server on http://%s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port)
