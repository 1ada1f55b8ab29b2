import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from engine import replay, run


def execute(kind, operation, state, **params):
    """Run an operation, replay it and return (final_state, steps)."""
    steps = run(kind, operation, state, params)
    assert steps, f"{kind}/{operation} was rejected"
    return replay(state, steps), steps


@pytest.fixture
def do():
    return execute
