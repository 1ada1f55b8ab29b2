"""
tree.py — Binary Search Tree State
===================================
Nodes own their children exclusively; no node is ever shared between
two trees.  A node is addressed by its *path* from the root:

    ""    → root
    "L"   → root.left
    "LR"  → root.left.right

Paths are what BST steps carry, so a step stays valid after the state
it refers to has been deep-copied by the reducer.

Invariant: left subtree values < node.value < right subtree values.
Duplicates cannot be represented.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


@dataclass
class TreeNode:
    value:       float
    left:        Optional["TreeNode"] = None
    right:       Optional["TreeNode"] = None
    highlighted: bool                 = False

    def to_dict(self) -> dict:
        return {
            "value":       self.value,
            "left":        self.left.to_dict() if self.left else None,
            "right":       self.right.to_dict() if self.right else None,
            "highlighted": self.highlighted,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["TreeNode"]:
        if data is None:
            return None
        return cls(
            value=data["value"],
            left=cls.from_dict(data.get("left")),
            right=cls.from_dict(data.get("right")),
            highlighted=data.get("highlighted", False),
        )


@dataclass
class TreeState:
    root: Optional[TreeNode] = None

    # ------------------------------------------------------------------
    # Path addressing
    # ------------------------------------------------------------------
    def node_at(self, path: str) -> Optional[TreeNode]:
        node = self.root
        for direction in path:
            if node is None:
                return None
            node = node.left if direction == "L" else node.right
        return node

    def walk(self) -> Iterator[Tuple[str, TreeNode]]:
        """Level-order (path, node) pairs."""
        if self.root is None:
            return
        queue = deque([("", self.root)])
        while queue:
            path, node = queue.popleft()
            yield path, node
            if node.left:
                queue.append((path + "L", node.left))
            if node.right:
                queue.append((path + "R", node.right))

    def values(self) -> List[float]:
        return [node.value for _, node in self.walk()]

    def clear_highlights(self) -> None:
        for _, node in self.walk():
            node.highlighted = False

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"root": self.root.to_dict() if self.root else None}

    @classmethod
    def from_dict(cls, data: dict) -> "TreeState":
        return cls(root=TreeNode.from_dict(data.get("root")))


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def sample_tree() -> TreeState:
    """Balanced seven-node tree: 50 / 30 70 / 20 40 60 80."""
    return TreeState(
        root=TreeNode(
            50,
            left=TreeNode(30, left=TreeNode(20), right=TreeNode(40)),
            right=TreeNode(70, left=TreeNode(60), right=TreeNode(80)),
        )
    )
