"""
dfs.py — Depth-First Search
=============================
Recursive, generator-based DFS over a GraphState.

Yields a Step at:
  1. Start  →  RESET every mark left by a previous run
  2. Node entry  →  VISIT (highlighted + visited)
  3. Before each descent into an unvisited neighbour  →  HIGHLIGHT edge
  4. Node exit  →  UNHIGHLIGHT (stays visited)
  5. Done  →  COMPLETE with the visit order

Only the start node's connected component is reached; nodes in other
components are never visited.
"""

from typing import Generator, List, Set

from structures import GraphState
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, node):",                    # 0
    "    visited.add(node)",                    # 1
    "    for neighbour in adj(node):",          # 2
    "        if neighbour not visited:",        # 3
    "            highlight(node → neighbour)",  # 4
    "            DFS(graph, neighbour)",        # 5
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: GraphState, start: str) -> Generator[Step, None, None]:
    log = StepLog()
    visited: Set[str] = set()
    order:   List[str] = []
    labels = {n.id: n.label for n in graph.nodes}

    yield log.emit(StepKind.RESET, f"Starting DFS from node {labels[start]}")

    def visit(node_id: str):
        visited.add(node_id)
        order.append(node_id)
        yield log.emit(StepKind.VISIT, f"Visiting node {labels[node_id]}", node=node_id)

        for nbr, edge_idx in graph.neighbours(node_id):
            if nbr in visited:
                continue
            yield log.emit(
                StepKind.HIGHLIGHT,
                f"Edge {labels[node_id]} → {labels[nbr]}: '{labels[nbr]}' unseen — descend",
                edge=edge_idx,
            )
            yield from visit(nbr)

        yield log.emit(StepKind.UNHIGHLIGHT, f"Backtrack from {labels[node_id]}", node=node_id)

    yield from visit(start)
    yield log.emit(StepKind.COMPLETE, "DFS traversal complete", order=order)
