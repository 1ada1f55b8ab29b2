"""
array.py — Array State
=======================
The state every sorting stepper works over.  A position's identity is
its index; values only move through SWAP / WRITE steps.

`highlighted` holds the indices under comparison right now so the
renderer can colour the two bars being compared.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ArrayState:
    values:      List[float] = field(default_factory=list)
    highlighted: List[int]   = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"values": list(self.values), "highlighted": list(self.highlighted)}

    @classmethod
    def from_dict(cls, data: dict) -> "ArrayState":
        return cls(values=list(data.get("values", [])), highlighted=list(data.get("highlighted", [])))


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def generate_array(size: int = 50, seed: Optional[int] = None) -> ArrayState:
    """Random bar heights in [5, 104], like the sorting page's generator."""
    rng = random.Random(seed)
    return ArrayState(values=[rng.randint(5, 104) for _ in range(size)])
