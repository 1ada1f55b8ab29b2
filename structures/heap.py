"""
heap.py — Binary Heap State
============================
A single list where index i has children 2i+1, 2i+2 and parent
(i-1)//2.  The variant ("max" or "min") is fixed per instance and
decides the heap-order comparison.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

VARIANTS = ("max", "min")

SAMPLE_HEAP: List[float] = [90, 80, 70, 50, 60, 30, 20]


def parent(i: int) -> int:
    return (i - 1) // 2


def children(i: int):
    return 2 * i + 1, 2 * i + 2


@dataclass
class HeapState:
    values:      List[float] = field(default_factory=list)
    variant:     str         = "max"
    highlighted: List[int]   = field(default_factory=list)

    def outranks(self, a: float, b: float) -> bool:
        """True if `a` belongs above `b` under this heap's ordering."""
        return a > b if self.variant == "max" else a < b

    def is_heap(self) -> bool:
        for i in range(1, len(self.values)):
            if self.outranks(self.values[i], self.values[parent(i)]):
                return False
        return True

    def __len__(self) -> int:
        return len(self.values)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"values": list(self.values), "variant": self.variant, "highlighted": list(self.highlighted)}

    @classmethod
    def from_dict(cls, data: dict) -> "HeapState":
        return cls(
            values=list(data.get("values", [])),
            variant=data.get("variant", "max"),
            highlighted=list(data.get("highlighted", [])),
        )


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def sample_heap(variant: str = "max") -> HeapState:
    return HeapState(values=list(SAMPLE_HEAP), variant=variant)


def generate_heap(variant: str = "max", seed: Optional[int] = None) -> HeapState:
    """Random *unordered* array of 5-11 values; run build_heap to fix it."""
    rng = random.Random(seed)
    size = rng.randint(5, 11)
    return HeapState(values=[rng.randint(0, 99) for _ in range(size)], variant=variant)
