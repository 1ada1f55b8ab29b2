"""
step.py — Algorithm Step Record
================================
Every stepper is a generator that yields Step objects.  A Step is ONE
observable micro-event (a comparison, a swap, a visit, a bucket write…)
plus the minimal payload the reducer needs to replay it:

    Step(kind=StepKind.SWAP, payload={"i": 3, "j": 4})

Design decisions:
  - Step is a frozen dataclass.  Steppers are the only writers; the
    reducer and any renderer are pure readers.
  - Payloads address things by *position* (array index, tree path,
    bucket index, edge index, node id), never by object reference, so
    a step stays meaningful against any copy of the state.
  - `explanation` is the plain-English operation-log line ("Swapping 7
    with parent 3") a learning-mode panel can show next to the frame.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


# ---------------------------------------------------------------------------
# Step kinds — closed set shared by every structure family
# ---------------------------------------------------------------------------
class StepKind(Enum):
    COMPARE         = "compare"          # two positions are being compared
    SWAP            = "swap"             # two positions exchange values
    WRITE           = "write"            # a single position receives a value (merge sort)
    HIGHLIGHT       = "highlight"        # mark a bucket / node / edge / item as active
    UNHIGHLIGHT     = "unhighlight"      # clear one mark (or all, with no target)
    VISIT           = "visit"            # traversal reaches a node
    DISTANCE_UPDATE = "distance_update"  # Dijkstra tentative distance changes
    BUCKET_WRITE    = "bucket_write"     # insert / overwrite an entry in a chain
    BUCKET_REMOVE   = "bucket_remove"    # drop an entry from a chain
    TABLE_RESIZE    = "table_resize"     # replace the bucket array with an empty one
    NODE_INSERT     = "node_insert"      # new tree leaf / heap slot
    ROOT_REPLACE    = "root_replace"     # heap: last element moves into the root
    PUSH            = "push"             # stack push / queue enqueue
    POP             = "pop"              # stack pop / queue dequeue
    RESET           = "reset"            # wipe every algorithm mark on the structure
    COMPLETE        = "complete"         # terminal step carrying the outcome


_INF = "Infinity"


def _encode(value: Any) -> Any:
    if isinstance(value, float) and math.isinf(value):
        return _INF if value > 0 else "-" + _INF
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def _decode(value: Any) -> Any:
    if value == _INF:
        return math.inf
    if value == "-" + _INF:
        return -math.inf
    if isinstance(value, list):
        return [_decode(v) for v in value]
    return value


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind        : StepKind tag.
        payload     : Kind-specific data (indices, ids, values).
        step_number : 0-based position in the run.
        explanation : Human-readable log line for this step.
    """

    kind:        StepKind
    payload:     Dict[str, Any] = field(default_factory=dict)
    step_number: int            = 0
    explanation: str            = ""

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    # ------------------------------------------------------------------
    # Serialisation (JSON-safe: infinity becomes the string "Infinity")
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "kind":        self.kind.value,
            "payload":     {k: _encode(v) for k, v in self.payload.items()},
            "step_number": self.step_number,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Step":
        return cls(
            kind=StepKind(data["kind"]),
            payload={k: _decode(v) for k, v in data.get("payload", {}).items()},
            step_number=data.get("step_number", 0),
            explanation=data.get("explanation", ""),
        )


# ---------------------------------------------------------------------------
# Convenience builder so steppers don't have to number steps by hand
# ---------------------------------------------------------------------------
class StepLog:
    """
    Numbers steps as they are emitted and keeps a per-kind tally.

    Usage inside a stepper generator:
        log = StepLog()
        yield log.emit(StepKind.COMPARE, f"Compare {a[i]} and {a[j]}", i=i, j=j)
    """

    def __init__(self):
        self.count:  int     = 0
        self.tally:  Counter = Counter()

    def emit(self, kind: StepKind, explanation: str = "", **payload: Any) -> Step:
        step = Step(kind=kind, payload=payload, step_number=self.count, explanation=explanation)
        self.count += 1
        self.tally[kind] += 1
        return step
