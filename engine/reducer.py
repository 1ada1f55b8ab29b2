"""
reducer.py — Apply One Step
============================
`apply(state, step)` is the pure reducer: it deep-copies the state,
applies the single step to the copy and returns it.  The input state is
never touched, so any intermediate state can be kept for rewind.

`replay(state, steps)` folds `apply` over a whole run.  Replaying a
stepper's output from the state it was produced for reproduces the
stepper's own final state exactly.
"""

import copy
from functools import reduce
from typing import Callable, Dict, Iterable, Type

from structures import (
    ArrayState, GraphState, HashEntry, HashTableState, HeapState,
    QueueState, StackState, TreeNode, TreeState,
)
from algorithms.step import Step, StepKind
from engine.errors import UnsupportedStep

_NOOP = (StepKind.COMPLETE,)


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------
def _apply_array(state: ArrayState, step: Step) -> None:
    kind = step.kind
    if kind == StepKind.COMPARE:
        state.highlighted = [step.get("i"), step.get("j")]
    elif kind == StepKind.SWAP:
        i, j = step.get("i"), step.get("j")
        state.values[i], state.values[j] = state.values[j], state.values[i]
        state.highlighted = [i, j]
    elif kind == StepKind.WRITE:
        state.values[step.get("index")] = step.get("value")
        state.highlighted = [step.get("index")]
    elif kind in (StepKind.UNHIGHLIGHT, StepKind.RESET, StepKind.COMPLETE):
        state.highlighted = []
    else:
        raise UnsupportedStep(f"{kind.value} does not apply to an array")


# ---------------------------------------------------------------------------
# Binary search tree
# ---------------------------------------------------------------------------
def _apply_tree(state: TreeState, step: Step) -> None:
    kind = step.kind
    if kind in (StepKind.COMPARE, StepKind.VISIT):
        # exactly one active node at a time
        state.clear_highlights()
        node = state.node_at(step.get("path"))
        if node is not None:
            node.highlighted = True
    elif kind == StepKind.NODE_INSERT:
        path = step.get("path")
        leaf = TreeNode(step.get("value"))
        if path == "":
            state.root = leaf
        else:
            parent = state.node_at(path[:-1])
            if path[-1] == "L":
                parent.left = leaf
            else:
                parent.right = leaf
    elif kind in (StepKind.UNHIGHLIGHT, StepKind.RESET):
        state.clear_highlights()
    elif kind not in _NOOP:
        raise UnsupportedStep(f"{kind.value} does not apply to a tree")


# ---------------------------------------------------------------------------
# Hash table
# ---------------------------------------------------------------------------
def _apply_hash_table(state: HashTableState, step: Step) -> None:
    kind = step.kind
    if kind == StepKind.HIGHLIGHT:
        state.clear_highlights()
        bucket = step.get("bucket")
        state.highlighted_bucket = bucket
        for entry in state.buckets[bucket] or []:
            entry.highlighted = True
    elif kind in (StepKind.UNHIGHLIGHT, StepKind.RESET):
        state.clear_highlights()
    elif kind == StepKind.BUCKET_WRITE:
        bucket, key, value = step.get("bucket"), step.get("key"), step.get("value")
        chain = state.buckets[bucket]
        highlighted = state.highlighted_bucket == bucket
        if chain is None:
            state.buckets[bucket] = [HashEntry(key, value, highlighted)]
        else:
            existing = next((e for e in chain if e.key == key), None)
            if existing is not None:
                existing.value = value
            else:
                chain.append(HashEntry(key, value, highlighted))
                state.collisions += 1
        state.refresh_load_factor()
    elif kind == StepKind.BUCKET_REMOVE:
        bucket, key = step.get("bucket"), step.get("key")
        chain = [e for e in state.buckets[bucket] or [] if e.key != key]
        state.buckets[bucket] = chain or None
        state.refresh_load_factor()
    elif kind == StepKind.TABLE_RESIZE:
        state.size = step.get("size")
        state.buckets = [None] * state.size
        state.collisions = 0
        state.highlighted_bucket = None
        state.refresh_load_factor()
    elif kind not in _NOOP:
        raise UnsupportedStep(f"{kind.value} does not apply to a hash table")


# ---------------------------------------------------------------------------
# Heap
# ---------------------------------------------------------------------------
def _apply_heap(state: HeapState, step: Step) -> None:
    kind = step.kind
    if kind == StepKind.COMPARE:
        state.highlighted = [step.get("i"), step.get("j")]
    elif kind == StepKind.SWAP:
        i, j = step.get("i"), step.get("j")
        state.values[i], state.values[j] = state.values[j], state.values[i]
        state.highlighted = [i, j]
    elif kind == StepKind.NODE_INSERT:
        state.values.append(step.get("value"))
        state.highlighted = [len(state.values) - 1]
    elif kind == StepKind.ROOT_REPLACE:
        state.values[0] = state.values[-1]
        state.values.pop()
        state.highlighted = [0] if state.values else []
    elif kind in (StepKind.UNHIGHLIGHT, StepKind.RESET, StepKind.COMPLETE):
        state.highlighted = []
    else:
        raise UnsupportedStep(f"{kind.value} does not apply to a heap")


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
def _apply_graph(state: GraphState, step: Step) -> None:
    kind = step.kind
    if kind == StepKind.RESET:
        state.reset_algo_state()
    elif kind == StepKind.VISIT:
        if step.get("exclusive"):
            for node in state.nodes:
                node.highlighted = False
        node = state.get_node(step.get("node"))
        node.highlighted = True
        node.visited = True
    elif kind == StepKind.HIGHLIGHT:
        if "edge" in step.payload:
            if step.get("exclusive"):
                for edge in state.edges:
                    edge.highlighted = False
            state.edges[step.get("edge")].highlighted = True
        else:
            state.get_node(step.get("node")).highlighted = True
    elif kind == StepKind.UNHIGHLIGHT:
        if "node" in step.payload:
            state.get_node(step.get("node")).highlighted = False
        else:
            for node in state.nodes:
                node.highlighted = False
            for edge in state.edges:
                edge.highlighted = False
    elif kind == StepKind.DISTANCE_UPDATE:
        node = state.get_node(step.get("node"))
        node.distance = step.get("distance")
        node.predecessor = step.get("predecessor")
    elif kind not in _NOOP:
        raise UnsupportedStep(f"{kind.value} does not apply to a graph")


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
def _apply_linear(state, step: Step) -> None:
    kind = step.kind
    if kind == StepKind.PUSH:
        state.items.append(step.get("value"))
    elif kind == StepKind.POP:
        state.items.pop(step.get("index"))
        state.highlighted = None
    elif kind == StepKind.HIGHLIGHT:
        state.highlighted = step.get("index")
    elif kind in (StepKind.UNHIGHLIGHT, StepKind.RESET, StepKind.COMPLETE):
        state.highlighted = None
    else:
        raise UnsupportedStep(f"{kind.value} does not apply to a {type(state).__name__}")


_HANDLERS: Dict[Type, Callable[[object, Step], None]] = {
    ArrayState:     _apply_array,
    TreeState:      _apply_tree,
    HashTableState: _apply_hash_table,
    HeapState:      _apply_heap,
    GraphState:     _apply_graph,
    StackState:     _apply_linear,
    QueueState:     _apply_linear,
}


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------
def apply(state, step: Step):
    """Return the state that results from applying `step` to `state`."""
    handler = _HANDLERS.get(type(state))
    if handler is None:
        raise UnsupportedStep(f"No reducer for {type(state).__name__}")
    nxt = copy.deepcopy(state)
    handler(nxt, step)
    return nxt


def replay(state, steps: Iterable[Step]):
    """Fold `apply` over `steps`, starting from `state`."""
    return reduce(apply, steps, state)
