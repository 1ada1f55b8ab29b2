"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Array-scan Dijkstra over a GraphState (no priority queue: each round
picks the unvisited node with the smallest finite distance by linear
scan, ties broken by the lowest node id).

Yields a Step at:
  1. Start  →  RESET, one DISTANCE_UPDATE per node (0 at start, ∞ elsewhere)
  2. Node selected  →  VISIT (the only highlighted node)
  3. Each unvisited neighbour considered  →  HIGHLIGHT its edge (exclusive)
  4. Strict improvement  →  DISTANCE_UPDATE with the new predecessor
  5. End reached / nothing reachable  →  path HIGHLIGHTs + COMPLETE

An unreachable end is a normal outcome: COMPLETE carries
`reachable=False`, `distance=inf` and an empty path.

Correctness note: Dijkstra requires non-negative weights.
The engine rejects graphs with negative edges before this runs.
"""

import math
from typing import Dict, Generator, List, Optional

from structures import GraphState
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start, end):",                   # 0
    "    dist ← {v: ∞ for v in V}; dist[start] ← 0",      # 1
    "    unvisited ← V",                                  # 2
    "    while unvisited:",                               # 3
    "        u ← argmin dist over unvisited",             # 4
    "        if dist[u] = ∞ or u = end: break",           # 5
    "        unvisited.remove(u)",                        # 6
    "        for v in adj(u) ∩ unvisited:",               # 7
    "            if dist[u] + w(u,v) < dist[v]:",         # 8
    "                dist[v] ← dist[u] + w(u,v)",         # 9
    "                prev[v] ← u",                        # 10
    "    return path(prev, end)",                         # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: GraphState, start: str, end: str) -> Generator[Step, None, None]:
    log = StepLog()
    labels = {n.id: n.label for n in graph.nodes}

    dist:      Dict[str, float]         = {n.id: math.inf for n in graph.nodes}
    previous:  Dict[str, Optional[str]] = {n.id: None for n in graph.nodes}
    unvisited = set(dist)
    dist[start] = 0

    yield log.emit(StepKind.RESET, f"Starting Dijkstra's algorithm from {labels[start]} to {labels[end]}")
    for node in graph.nodes:
        yield log.emit(
            StepKind.DISTANCE_UPDATE,
            f"Initialise dist[{node.label}] = {dist[node.id]}",
            node=node.id, distance=dist[node.id], predecessor=None,
        )
    yield log.emit(StepKind.HIGHLIGHT, f"Start at {labels[start]}", node=start)

    # --- main loop ---
    while unvisited:
        current = _closest(unvisited, dist)
        if current is None or current == end:
            break
        unvisited.remove(current)

        yield log.emit(
            StepKind.VISIT,
            f"Visiting node {labels[current]} with distance {dist[current]}",
            node=current, exclusive=True,
        )

        for nbr, edge_idx in graph.neighbours(current):
            if nbr not in unvisited:
                continue
            weight = graph.edges[edge_idx].weight
            yield log.emit(
                StepKind.HIGHLIGHT,
                f"Consider edge {labels[current]} → {labels[nbr]} (w={weight})",
                edge=edge_idx, exclusive=True,
            )
            candidate = dist[current] + weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                previous[nbr] = current
                yield log.emit(
                    StepKind.DISTANCE_UPDATE,
                    f"Updated distance to {labels[nbr]}: {candidate}",
                    node=nbr, distance=candidate, predecessor=current,
                )

    # --- result ---
    if math.isinf(dist[end]):
        yield log.emit(
            StepKind.COMPLETE,
            f"No path exists from {labels[start]} to {labels[end]}",
            reachable=False, distance=math.inf, path=[],
        )
        return

    path = _reconstruct(previous, start, end)
    for a, b in zip(path, path[1:]):
        yield log.emit(StepKind.HIGHLIGHT, f"Path node {labels[a]}", node=a)
        idx = graph.edge_index_between(a, b)
        if idx is not None:
            yield log.emit(StepKind.HIGHLIGHT, f"Path edge {labels[a]} → {labels[b]}", edge=idx)
    yield log.emit(StepKind.HIGHLIGHT, f"Path node {labels[end]}", node=end)

    yield log.emit(
        StepKind.COMPLETE,
        f"Shortest path found with distance {dist[end]}: {' → '.join(labels[n] for n in path)}",
        reachable=True, distance=dist[end], path=path,
    )


# ---------------------------------------------------------------------------
def _closest(unvisited, dist: Dict[str, float]) -> Optional[str]:
    """Unvisited node with the smallest finite distance; lowest id on ties."""
    best = None
    for node_id in sorted(unvisited):
        if math.isinf(dist[node_id]):
            continue
        if best is None or dist[node_id] < dist[best]:
            best = node_id
    return best


def _reconstruct(previous: Dict[str, Optional[str]], start: str, end: str) -> List[str]:
    path, cur = [], end
    while cur is not None:
        path.append(cur)
        if cur == start:
            break
        cur = previous.get(cur)
    path.reverse()
    return path
