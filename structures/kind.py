from enum import Enum


class StructureKind(Enum):
    ARRAY      = "array"
    TREE       = "tree"
    HASH_TABLE = "hash_table"
    HEAP       = "heap"
    GRAPH      = "graph"
    STACK      = "stack"
    QUEUE      = "queue"
