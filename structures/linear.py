"""
linear.py — Stack & Queue States
=================================
The two linear containers from the data-structures page.  Items are
strings; `highlighted` is the index the running operation is pointing
at (top of stack, front of queue) or None.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class StackState:
    items:       List[str]     = field(default_factory=list)
    highlighted: Optional[int] = None

    def top_index(self) -> int:
        return len(self.items) - 1

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": list(self.items), "highlighted": self.highlighted}

    @classmethod
    def from_dict(cls, data: dict) -> "StackState":
        return cls(items=list(data.get("items", [])), highlighted=data.get("highlighted"))


@dataclass
class QueueState:
    items:       List[str]     = field(default_factory=list)
    highlighted: Optional[int] = None

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {"items": list(self.items), "highlighted": self.highlighted}

    @classmethod
    def from_dict(cls, data: dict) -> "QueueState":
        return cls(items=list(data.get("items", [])), highlighted=data.get("highlighted"))
