"""
structures/
-----------
State value types for every structure the engine can step over.

    from structures import ArrayState, TreeState, HashTableState, …
    from structures import StructureKind, STATE_TYPES
"""

from structures.kind       import StructureKind
from structures.array      import ArrayState, generate_array
from structures.tree       import TreeNode, TreeState, sample_tree
from structures.hash_table import HashEntry, HashTableState, hash_key, sample_table, DEFAULT_SIZE
from structures.heap       import HeapState, sample_heap, generate_heap, VARIANTS
from structures.graph      import GraphNode, GraphEdge, GraphState, sample_graph
from structures.linear     import StackState, QueueState

STATE_TYPES = {
    StructureKind.ARRAY:      ArrayState,
    StructureKind.TREE:       TreeState,
    StructureKind.HASH_TABLE: HashTableState,
    StructureKind.HEAP:       HeapState,
    StructureKind.GRAPH:      GraphState,
    StructureKind.STACK:      StackState,
    StructureKind.QUEUE:      QueueState,
}

__all__ = [
    "StructureKind", "STATE_TYPES",
    "ArrayState",    "generate_array",
    "TreeNode",      "TreeState",      "sample_tree",
    "HashEntry",     "HashTableState", "hash_key",     "sample_table", "DEFAULT_SIZE",
    "HeapState",     "sample_heap",    "generate_heap", "VARIANTS",
    "GraphNode",     "GraphEdge",      "GraphState",   "sample_graph",
    "StackState",    "QueueState",
]
