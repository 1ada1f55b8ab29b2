"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over a GraphState.

The start node is marked visited BEFORE the loop begins and every
neighbour is marked the moment it is enqueued (not when dequeued), so
no node is ever enqueued twice.

Yields a Step at:
  1. Start  →  RESET, then VISIT the start node
  2. Each newly discovered neighbour  →  HIGHLIGHT edge, VISIT neighbour
  3. Finished with a dequeued node  →  UNHIGHLIGHT it
  4. Queue empty  →  COMPLETE with the visit order
"""

from collections import deque
from typing import Generator, List

from structures import GraphState
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                   # 0
    "    queue ← [start]",                      # 1
    "    visited ← {start}",                    # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        for neighbour in adj(node):",      # 5
    "            if neighbour not visited:",    # 6
    "                visited.add(neighbour)",   # 7
    "                queue.enqueue(neighbour)", # 8
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: GraphState, start: str) -> Generator[Step, None, None]:
    log = StepLog()
    labels = {n.id: n.label for n in graph.nodes}
    queue = deque([start])
    visited = {start}
    order: List[str] = [start]

    yield log.emit(StepKind.RESET, f"Starting BFS from node {labels[start]}")
    yield log.emit(StepKind.VISIT, f"Mark start node {labels[start]} visited", node=start)

    while queue:
        node = queue.popleft()

        for nbr, edge_idx in graph.neighbours(node):
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(nbr)
            order.append(nbr)
            yield log.emit(StepKind.HIGHLIGHT, f"Edge {labels[node]} → {labels[nbr]}", edge=edge_idx)
            yield log.emit(StepKind.VISIT, f"Discover {labels[nbr]} and enqueue it", node=nbr)

        yield log.emit(StepKind.UNHIGHLIGHT, f"Done with node {labels[node]}", node=node)

    yield log.emit(StepKind.COMPLETE, "BFS traversal complete", order=order)
