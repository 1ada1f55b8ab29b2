"""
engine/
-------
Validation, reduction, playback & recording layer.

    from engine import create_initial_state, run, apply, Driver, Recorder
"""

from engine.errors   import EngineError, InvalidInput, PreconditionViolation, OperationInProgress, UnsupportedStep
from engine.api      import create_initial_state, run, validate, edit_graph, hash_key, GRAPH_ACTIONS
from engine.reducer  import apply, replay
from engine.driver   import Driver, DriverState
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "EngineError",
    "InvalidInput",
    "PreconditionViolation",
    "OperationInProgress",
    "UnsupportedStep",
    "create_initial_state",
    "run",
    "validate",
    "edit_graph",
    "hash_key",
    "GRAPH_ACTIONS",
    "apply",
    "replay",
    "Driver",
    "DriverState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
