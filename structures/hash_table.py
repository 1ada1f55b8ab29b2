"""
hash_table.py — Chained Hash Table State
=========================================
Buckets are either `None` (empty) or a non-empty list of HashEntry.
A bucket whose last entry is removed collapses back to `None`; there
are never dangling empty lists.

Invariants:
  - size == len(buckets)
  - an entry for key K lives only in buckets[hash_key(K, size)]
  - load_factor == occupied buckets / size, recomputed after every
    structural change (chains longer than one do NOT raise it)
"""

import struct
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

DEFAULT_SIZE = 10

SAMPLE_ENTRIES: List[Tuple[str, str]] = [
    ("apple",    "fruit"),
    ("banana",   "fruit"),
    ("carrot",   "vegetable"),
    ("dog",      "animal"),
    ("elephant", "animal"),
    ("frog",     "amphibian"),
    ("guitar",   "instrument"),
]


def hash_key(key: str, size: int) -> int:
    """
    Order-sensitive sum over UTF-16 code units: sum(u * (i + 1)) mod size.

    Characters outside the BMP count as their two surrogate units, so
    keys land in the same bucket as in a JavaScript front-end.
    """
    raw = key.encode("utf-16-le", "surrogatepass")
    h = 0
    for i, unit in enumerate(struct.unpack(f"<{len(raw) // 2}H", raw)):
        h = (h + unit * (i + 1)) % size
    return h


@dataclass
class HashEntry:
    key:         str
    value:       str
    highlighted: bool = False

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value, "highlighted": self.highlighted}

    @classmethod
    def from_dict(cls, data: dict) -> "HashEntry":
        return cls(key=data["key"], value=data["value"], highlighted=data.get("highlighted", False))


@dataclass
class HashTableState:
    size:               int                                = DEFAULT_SIZE
    buckets:            List[Optional[List[HashEntry]]]    = field(default_factory=list)
    collisions:         int                                = 0
    load_factor:        float                              = 0.0
    highlighted_bucket: Optional[int]                      = None

    def __post_init__(self):
        if not self.buckets:
            self.buckets = [None] * self.size

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def bucket_of(self, key: str) -> int:
        return hash_key(key, self.size)

    def find(self, key: str) -> Optional[HashEntry]:
        chain = self.buckets[self.bucket_of(key)]
        if chain is None:
            return None
        for entry in chain:
            if entry.key == key:
                return entry
        return None

    def entries(self) -> Iterator[HashEntry]:
        """Every entry in bucket order, chain order within a bucket."""
        for chain in self.buckets:
            if chain is not None:
                yield from chain

    def occupied(self) -> int:
        return sum(1 for chain in self.buckets if chain)

    def refresh_load_factor(self) -> None:
        self.load_factor = self.occupied() / self.size if self.size else 0.0

    def clear_highlights(self) -> None:
        self.highlighted_bucket = None
        for entry in self.entries():
            entry.highlighted = False

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "size":               self.size,
            "buckets":            [[e.to_dict() for e in chain] if chain else None for chain in self.buckets],
            "collisions":         self.collisions,
            "load_factor":        self.load_factor,
            "highlighted_bucket": self.highlighted_bucket,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HashTableState":
        buckets = [
            [HashEntry.from_dict(e) for e in chain] if chain else None
            for chain in data.get("buckets", [])
        ]
        return cls(
            size=data.get("size", len(buckets) or DEFAULT_SIZE),
            buckets=buckets,
            collisions=data.get("collisions", 0),
            load_factor=data.get("load_factor", 0.0),
            highlighted_bucket=data.get("highlighted_bucket"),
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def sample_table(size: int = DEFAULT_SIZE) -> HashTableState:
    """Table pre-filled with the seven sample entries (chained on collision)."""
    table = HashTableState(size=size)
    for key, value in SAMPLE_ENTRIES:
        idx = table.bucket_of(key)
        chain = table.buckets[idx]
        if chain is None:
            table.buckets[idx] = [HashEntry(key, value)]
            continue
        existing = next((e for e in chain if e.key == key), None)
        if existing is not None:
            existing.value = value
        else:
            chain.append(HashEntry(key, value))
            table.collisions += 1
    table.refresh_load_factor()
    return table
