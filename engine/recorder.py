"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete operation run (all Steps), then computes the
metrics a host shows next to the animation and in Comparison Mode.

Usage:
    rec = Recorder()
    rec.record("array", "quick", state)    # drives the run to completion
    rec.metrics                            # the analytics card
    rec.export()                           # serialisable snapshot for save/replay

Comparison Mode:
    Hold two Recorders (one per operation), record both on the SAME
    starting state, then call compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

from algorithms import get_algorithm
from algorithms.step import Step, StepKind
from engine.api import coerce_kind, validate
from engine.driver import Driver

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    structure:    str   = ""
    operation:    str   = ""
    label:        str   = ""
    total_steps:  int   = 0
    compares:     int   = 0
    swaps:        int   = 0
    writes:       int   = 0          # WRITE + BUCKET_WRITE + NODE_INSERT
    visits:       int   = 0
    wall_time_ms: float = 0.0        # wall-clock time to drive the run to completion
    outcome:      Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:    str = ""   # which operation needed fewer steps
    winner_compares: str = ""
    winner_swaps:    str = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every Step of the recorded run, in order.
        metrics : RunMetrics once `record()` has completed, else None.
        initial : The state the run started from.
        final   : The state after the last step.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.initial                       = None
        self.final                         = None

        self._params: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def record(self, kind, operation: str, state, params: Optional[Dict[str, Any]] = None) -> RunMetrics:
        """
        Drive `operation` to completion on `state` and compute metrics.
        Raises InvalidInput / PreconditionViolation for a rejected request.
        """
        kind = coerce_kind(kind)
        validate(kind, operation, state, params)

        driver = Driver(kind, state)
        started = time.monotonic()
        driver.start(operation, params)
        driver.finish()
        wall_ms = (time.monotonic() - started) * 1000

        self.steps   = list(driver.applied)
        self.initial = state
        self.final   = driver.state
        self._params = dict(params or {})

        info = get_algorithm(kind, operation)
        tally = {k: 0 for k in StepKind}
        for s in self.steps:
            tally[s.kind] += 1

        self.metrics = RunMetrics(
            structure=kind.value,
            operation=operation,
            label=info.label,
            total_steps=len(self.steps),
            compares=tally[StepKind.COMPARE],
            swaps=tally[StepKind.SWAP],
            writes=tally[StepKind.WRITE] + tally[StepKind.BUCKET_WRITE] + tally[StepKind.NODE_INSERT],
            visits=tally[StepKind.VISIT],
            wall_time_ms=round(wall_ms, 2),
            outcome=driver.outcome,
        )
        logger.debug("Recorded %s: %d steps", info.label, len(self.steps))
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        m = self.metrics
        return {
            "structure": m.structure if m else "",
            "operation": m.operation if m else "",
            "params":    self._params,
            "initial":   self.initial.to_dict() if self.initial is not None else {},
            "final":     self.final.to_dict() if self.final is not None else {},
            "metrics":   {**asdict(m), "outcome": self.steps[-1].to_dict()["payload"]} if m else {},
            "steps":     [s.to_dict() for s in self.steps],
        }


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.label if l_val < r_val else r.label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps   =winner(l.total_steps, r.total_steps),
        winner_compares=winner(l.compares, r.compares),
        winner_swaps   =winner(l.swaps, r.swaps),
    )
