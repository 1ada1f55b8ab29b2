"""
driver.py — Step-by-Step Playback Driver
=========================================
The Driver is the ONLY object a host talks to during a run.  It owns
the current state of one structure, the queue of pending Steps and the
append-only list of Steps already applied.

State machine:
    IDLE     →  start()              →  RUNNING
    RUNNING  →  advance() (last one) →  IDLE
    RUNNING  →  finish()             →  IDLE
    RUNNING  →  start()              →  refused (returns False)

While RUNNING nothing else may touch the state: `start()` refuses and
`replace_state()` raises OperationInProgress.  The state a host sees
changes only by `apply(state, step)` calls, in stepper order.

Thread safety:
  Every transition runs under `lock` (a re-entrant lock), so a threaded
  Flask host can hand the same Driver to concurrent requests: one start
  wins, the other is refused, and steps are applied one at a time.  Hosts
  that read the state and act on it take `lock` themselves.
"""

import collections
import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional

from config import Config
from structures import StructureKind
from algorithms.step import Step, StepKind
from engine.api import coerce_kind, run
from engine.errors import OperationInProgress
from engine.reducer import apply

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class DriverState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------
class Driver:
    """
    Attributes:
        kind      : StructureKind this driver steps over.
        state     : Current structure state (replaced, never mutated).
        status    : Current DriverState.
        pending   : Steps of the active run not yet applied.
        applied   : Steps applied during the active (or last) run.
        operation : Key of the active (or last) operation.
        speed     : Seconds between auto-advance ticks.
        on_state  : Optional callback(state, step) fired after every applied step.
        lock      : RLock guarding every state transition.
    """

    def __init__(
        self,
        kind,
        state,
        on_state: Optional[Callable[[Any, Step], None]] = None,
    ):
        self.kind:      StructureKind     = coerce_kind(kind)
        self.state                        = state
        self.status:    DriverState       = DriverState.IDLE
        self.pending:   Deque[Step]       = collections.deque()
        self.applied:   List[Step]        = []
        self.operation: str               = ""
        self.speed:     float             = Config.SPEED_PRESETS[Config.default_speed]
        self.on_state                     = on_state
        self.lock                         = threading.RLock()

        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, operation: str, params: Optional[Dict[str, Any]] = None) -> bool:
        """
        Compute the full step list for `operation` and queue it.
        Returns False (and changes nothing) if a run is already in
        progress or the request was rejected.
        """
        with self.lock:
            if self.is_running:
                logger.warning("Ignoring %s: %s is still running", operation, self.operation)
                return False

            steps = run(self.kind, operation, self.state, params)
            if not steps:
                return False

            self.pending    = collections.deque(steps)
            self.applied    = []
            self.operation  = operation
            self.status     = DriverState.RUNNING
            self._last_tick = time.monotonic()
        logger.info("Started %s/%s with %d step(s)", self.kind.value, operation, len(steps))
        return True

    def load(self, kind, state) -> None:
        """Switch to another structure (fresh state, empty log).  Refused mid-run."""
        with self.lock:
            self.require_idle()
            self.kind      = coerce_kind(kind)
            self.state     = state
            self.applied   = []
            self.operation = ""

    def replace_state(self, state) -> None:
        """Swap in a new state (edits, new sessions).  Refused mid-run."""
        with self.lock:
            self.require_idle()
            self.state   = state
            self.applied = []

    def require_idle(self) -> None:
        if self.is_running:
            raise OperationInProgress(f"{self.operation} is still running")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def advance(self) -> Optional[Step]:
        """Apply the next pending step.  Returns it, or None when idle."""
        with self.lock:
            if not self.pending:
                self.status = DriverState.IDLE
                return None

            step = self.pending.popleft()
            self.state = apply(self.state, step)
            self.applied.append(step)
            if self.on_state is not None:
                self.on_state(self.state, step)

            if not self.pending:
                self.status = DriverState.IDLE
                logger.info("Finished %s/%s after %d step(s)", self.kind.value, self.operation, len(self.applied))
            return step

    def finish(self) -> None:
        """Apply every remaining step immediately."""
        with self.lock:
            while self.advance() is not None:
                pass

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically.  If running and at least `speed` seconds have
        passed since the last advance, applies one step.  Returns True
        if a step was applied.
        """
        with self.lock:
            if not self.is_running:
                return False
            now = time.monotonic()
            if now - self._last_tick >= self.speed:
                self._last_tick = now
                return self.advance() is not None
            return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = Config.SPEED_PRESETS.get(preset, Config.SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(Config.MIN_INTERVAL, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.status == DriverState.RUNNING

    @property
    def last_step(self) -> Optional[Step]:
        return self.applied[-1] if self.applied else None

    @property
    def outcome(self) -> Dict[str, Any]:
        """Payload of the COMPLETE step, once it has been applied."""
        last = self.last_step
        if last is not None and last.kind == StepKind.COMPLETE:
            return dict(last.payload)
        return {}
