"""
algorithms/__init__.py — Stepper Registry
==========================================
Single source of truth for every operation the engine can step.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a closed dict keyed by (StructureKind, operation name):
    {
        (StructureKind.ARRAY, "bubble"): AlgoInfo(…),
        (StructureKind.GRAPH, "dijkstra"): AlgoInfo(…),
        …
    }

AlgoInfo is a lightweight dataclass.  `params` lists the keyword
arguments the stepper takes after the state, in order; the engine
validators produce exactly those from a request.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from structures import StructureKind

# ---------------------------------------------------------------------------
# Import all stepper modules
# ---------------------------------------------------------------------------
from algorithms import sorting, tree, hashing, heap, linear
from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                      # operation name, e.g. "bubble"
    structure:        StructureKind            # which state it steps over
    label:            str                      # human label, e.g. "Bubble Sort"
    fn:               Callable                 # the generator function
    params:           Tuple[str, ...] = ()     # keyword params after the state
    pseudocode:       List[str] = field(default_factory=list)
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


def _info(structure: StructureKind, key: str, label: str, fn: Callable, **kwargs) -> Tuple[Tuple[StructureKind, str], AlgoInfo]:
    return (structure, key), AlgoInfo(key=key, structure=structure, label=label, fn=fn, **kwargs)


A, T, H, P, G, S, Q = (
    StructureKind.ARRAY, StructureKind.TREE, StructureKind.HASH_TABLE,
    StructureKind.HEAP, StructureKind.GRAPH, StructureKind.STACK, StructureKind.QUEUE,
)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[Tuple[StructureKind, str], AlgoInfo] = dict([

    # -- sorting --
    _info(A, "bubble", "Bubble Sort", sorting.bubble_sort,
          pseudocode=sorting.BUBBLE_PSEUDOCODE, tags=["sorting", "stable"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Repeatedly swaps adjacent out-of-order pairs."),
    _info(A, "selection", "Selection Sort", sorting.selection_sort,
          pseudocode=sorting.SELECTION_PSEUDOCODE, tags=["sorting"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Selects the minimum of the unsorted suffix each pass."),
    _info(A, "insertion", "Insertion Sort", sorting.insertion_sort,
          pseudocode=sorting.INSERTION_PSEUDOCODE, tags=["sorting", "stable"],
          complexity_time="O(n²)", complexity_space="O(1)",
          description="Sinks each element left into the sorted prefix."),
    _info(A, "merge", "Merge Sort", sorting.merge_sort,
          pseudocode=sorting.MERGE_PSEUDOCODE, tags=["sorting", "stable", "divide-and-conquer"],
          complexity_time="O(n log n)", complexity_space="O(n)",
          description="Sorts both halves, then merges them back in place."),
    _info(A, "quick", "Quick Sort", sorting.quick_sort,
          pseudocode=sorting.QUICK_PSEUDOCODE, tags=["sorting", "divide-and-conquer"],
          complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
          description="Lomuto partition around the last element."),

    # -- binary search tree --
    _info(T, "insert", "BST Insert", tree.insert, params=("value",),
          tags=["tree"], complexity_time="O(h)",
          description="Descends by comparison; duplicates are ignored."),
    _info(T, "traverse", "Tree Traversal", tree.traverse, params=("order",),
          tags=["tree", "traversal"], complexity_time="O(n)",
          description="Inorder, preorder, postorder or level-order visit."),

    # -- hash table --
    _info(H, "insert", "Hash Insert", hashing.insert, params=("key", "value"),
          tags=["hashing"], complexity_time="O(1) avg",
          description="Chains on collision; overwrites an existing key."),
    _info(H, "search", "Hash Search", hashing.search, params=("key",),
          tags=["hashing"], complexity_time="O(1) avg"),
    _info(H, "delete", "Hash Delete", hashing.delete, params=("key",),
          tags=["hashing"], complexity_time="O(1) avg"),
    _info(H, "resize", "Hash Resize", hashing.resize, params=("new_size",),
          tags=["hashing"], complexity_time="O(n)",
          description="Full rehash into a fresh bucket array."),

    # -- heap --
    _info(P, "insert", "Heap Insert", heap.insert, params=("value",),
          tags=["heap"], complexity_time="O(log n)"),
    _info(P, "extract_root", "Extract Root", heap.extract_root,
          tags=["heap"], complexity_time="O(log n)"),
    _info(P, "build_heap", "Build Heap", heap.build_heap,
          tags=["heap"], complexity_time="O(n)"),
    _info(P, "heap_sort", "Heap Sort", heap.heap_sort,
          pseudocode=heap.HEAP_SORT_PSEUDOCODE, tags=["heap", "sorting"],
          complexity_time="O(n log n)", complexity_space="O(1)",
          description="Ascending for a max-heap, descending for a min-heap."),

    # -- graph --
    _info(G, "dfs", "Depth-First Search", _dfs, params=("start",), pseudocode=_dfs_pc,
          tags=["traversal"], complexity_time="O(V + E)", complexity_space="O(V)",
          description="Dives deep before backtracking."),
    _info(G, "bfs", "Breadth-First Search", _bfs, params=("start",), pseudocode=_bfs_pc,
          tags=["traversal"], complexity_time="O(V + E)", complexity_space="O(V)",
          description="Explores layer-by-layer from the start node."),
    _info(G, "dijkstra", "Dijkstra's Algorithm", _dijkstra, params=("start", "end"), pseudocode=_dij_pc,
          tags=["weighted", "shortest-path"], complexity_time="O(V²)", complexity_space="O(V)",
          description="Greedily settles the closest node. Non-negative weights only."),

    # -- stack / queue --
    _info(S, "push", "Push", linear.push, params=("value",), tags=["stack"]),
    _info(S, "pop", "Pop", linear.pop, tags=["stack"]),
    _info(S, "peek", "Peek", linear.peek, tags=["stack"]),
    _info(S, "clear", "Clear", linear.clear_stack, tags=["stack"]),
    _info(Q, "enqueue", "Enqueue", linear.enqueue, params=("value",), tags=["queue"]),
    _info(Q, "dequeue", "Dequeue", linear.dequeue, tags=["queue"]),
    _info(Q, "peek", "Peek", linear.peek_front, tags=["queue"]),
    _info(Q, "clear", "Clear", linear.clear_queue, tags=["queue"]),
])


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(structure: StructureKind, key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo for (structure, operation), or None."""
    return REGISTRY.get((structure, key))


def list_algorithms(structure: Optional[StructureKind] = None) -> List[AlgoInfo]:
    """All registered operations in insertion order, optionally for one structure."""
    return [a for a in REGISTRY.values() if structure is None or a.structure == structure]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
