"""
tree.py — Binary Search Tree Steppers
======================================
insert(value)     : COMPARE down the search path, NODE_INSERT at the
                    first empty branch.  Equal values are dropped —
                    the tree is strict and cannot hold duplicates.
traverse(order)   : one VISIT per node in inorder / preorder /
                    postorder / bfs order, framed by RESET steps so the
                    renderer shows exactly one active node at a time.

Nodes are addressed by path strings ("", "L", "LR", …).
"""

from collections import deque
from typing import Generator, List, Optional

from structures import TreeNode, TreeState
from algorithms.step import Step, StepKind, StepLog

TRAVERSALS = ("inorder", "preorder", "postorder", "bfs")


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert(state: TreeState, value: float) -> Generator[Step, None, None]:
    log = StepLog()
    node = state.root
    path = ""

    if node is None:
        yield log.emit(StepKind.NODE_INSERT, f"Tree is empty — {value} becomes the root", path="", value=value)
        yield log.emit(StepKind.COMPLETE, "Insertion complete.", inserted=True, path="")
        return

    while node is not None:
        yield log.emit(StepKind.COMPARE, f"Compare {value} with {node.value}", path=path, value=value)
        if value < node.value:
            direction = "L"
            child = node.left
        elif value > node.value:
            direction = "R"
            child = node.right
        else:
            yield log.emit(StepKind.UNHIGHLIGHT, f"{value} is already in the tree — nothing to insert")
            yield log.emit(StepKind.COMPLETE, "Duplicate ignored.", inserted=False, path=path)
            return
        if child is None:
            side = "left" if direction == "L" else "right"
            yield log.emit(
                StepKind.NODE_INSERT,
                f"Empty {side} branch of {node.value} — insert {value}",
                path=path + direction, value=value,
            )
            yield log.emit(StepKind.UNHIGHLIGHT, "")
            yield log.emit(StepKind.COMPLETE, "Insertion complete.", inserted=True, path=path + direction)
            return
        node = child
        path += direction


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def _inorder(node: Optional[TreeNode], path: str):
    if node is None:
        return
    yield from _inorder(node.left, path + "L")
    yield path, node
    yield from _inorder(node.right, path + "R")


def _preorder(node: Optional[TreeNode], path: str):
    if node is None:
        return
    yield path, node
    yield from _preorder(node.left, path + "L")
    yield from _preorder(node.right, path + "R")


def _postorder(node: Optional[TreeNode], path: str):
    if node is None:
        return
    yield from _postorder(node.left, path + "L")
    yield from _postorder(node.right, path + "R")
    yield path, node


def _level_order(root: TreeNode):
    queue = deque([("", root)])
    while queue:
        path, node = queue.popleft()
        yield path, node
        if node.left:
            queue.append((path + "L", node.left))
        if node.right:
            queue.append((path + "R", node.right))


_ORDERS = {
    "inorder":   lambda root: _inorder(root, ""),
    "preorder":  lambda root: _preorder(root, ""),
    "postorder": lambda root: _postorder(root, ""),
    "bfs":       _level_order,
}


def traverse(state: TreeState, order: str) -> Generator[Step, None, None]:
    log = StepLog()
    result: List[float] = []

    yield log.emit(StepKind.RESET, f"Start {order} traversal")
    for path, node in _ORDERS[order](state.root):
        result.append(node.value)
        yield log.emit(StepKind.VISIT, f"Visit {node.value}", path=path, value=node.value)
    yield log.emit(StepKind.RESET, "Traversal finished — clear highlights")
    yield log.emit(StepKind.COMPLETE, f"{order}: {', '.join(str(v) for v in result)}", order=result)
