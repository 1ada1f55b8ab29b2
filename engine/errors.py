"""
errors.py — Engine Error Taxonomy
==================================
None of these is fatal to the engine.  The public `run()` turns
InvalidInput / PreconditionViolation into an empty step list; hosts that
want the reason call `validate()` and catch them.
"""


class EngineError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidInput(EngineError, ValueError):
    """Malformed request: non-numeric value, empty key/label, unknown operation."""


class PreconditionViolation(EngineError):
    """Well-formed request the current state cannot serve (empty structure, unweighted graph, …)."""


class OperationInProgress(EngineError):
    """A second operation was requested while one is still running."""


class UnsupportedStep(EngineError):
    """A step kind was applied to a structure that has no meaning for it."""
