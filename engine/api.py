"""
api.py — Engine Boundary
=========================
The library-level contract a host programs against:

    create_initial_state(kind, params)        → State
    run(kind, operation, state, params)       → List[Step]   (pure)
    apply(state, step)                        → State        (pure, see reducer.py)
    hash_key(key, size)                       → int

Every request is validated BEFORE a stepper runs.  A rejected request
produces no steps and touches no state; `run()` just returns [] and logs
the reason at DEBUG.  Hosts that need the reason call `validate()`.

Graph editing (add/remove nodes and edges, toggles) is not stepped; it
goes through `edit_graph()`, which returns a new GraphState.
"""

import copy
import logging
import math
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from config import Config
from structures import (
    ArrayState, GraphState, HashTableState, HeapState, QueueState,
    StackState, StructureKind, STATE_TYPES, TreeState, VARIANTS,
    generate_array, generate_heap, hash_key, sample_graph, sample_heap,
    sample_table, sample_tree,
)
from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step
from algorithms.tree import TRAVERSALS
from engine.errors import InvalidInput, PreconditionViolation

logger = logging.getLogger(__name__)

Params = Optional[Dict[str, Any]]


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------
def coerce_kind(kind: Union[StructureKind, str]) -> StructureKind:
    if isinstance(kind, StructureKind):
        return kind
    try:
        return StructureKind(kind)
    except ValueError:
        raise InvalidInput(f"Unknown structure: {kind!r}") from None


def _number(params: dict, name: str) -> float:
    raw = params.get(name)
    if isinstance(raw, bool) or raw is None:
        raise InvalidInput(f"'{name}' must be a number")
    if isinstance(raw, str):
        text = raw.strip()
        try:
            raw = int(text)
        except ValueError:
            try:
                raw = float(text)
            except ValueError:
                raise InvalidInput(f"'{name}' must be a number, got {raw!r}") from None
    if not isinstance(raw, (int, float)) or not math.isfinite(raw):
        raise InvalidInput(f"'{name}' must be a finite number")
    return raw


def _text(params: dict, name: str) -> str:
    raw = params.get(name)
    if raw is None or str(raw) == "":
        raise InvalidInput(f"'{name}' must not be empty")
    return str(raw)


def _node_id(graph: GraphState, params: dict, name: str) -> str:
    node_id = _text(params, name)
    if graph.get_node(node_id) is None:
        raise PreconditionViolation(f"No node {node_id!r} in the graph")
    return node_id


# ---------------------------------------------------------------------------
# Per-operation validation → stepper kwargs
# ---------------------------------------------------------------------------
def _non_empty(state, what: str) -> None:
    if len(state) == 0:
        raise PreconditionViolation(f"{what} is empty")


def _sort_args(state: ArrayState, params: dict) -> dict:
    _non_empty(state, "Array")
    return {}


def _tree_insert_args(state: TreeState, params: dict) -> dict:
    return {"value": _number(params, "value")}


def _tree_traverse_args(state: TreeState, params: dict) -> dict:
    order = params.get("order", "inorder")
    if order not in TRAVERSALS:
        raise InvalidInput(f"Unknown traversal {order!r}; expected one of {', '.join(TRAVERSALS)}")
    if state.root is None:
        raise PreconditionViolation("Tree is empty")
    return {"order": order}


def _hash_insert_args(state: HashTableState, params: dict) -> dict:
    return {"key": _text(params, "key"), "value": _text(params, "value")}


def _hash_key_args(state: HashTableState, params: dict) -> dict:
    return {"key": _text(params, "key")}


def _hash_resize_args(state: HashTableState, params: dict) -> dict:
    size = _number(params, "new_size")
    if int(size) != size or size < 1:
        raise InvalidInput("'new_size' must be a positive integer")
    return {"new_size": int(size)}


def _heap_insert_args(state: HeapState, params: dict) -> dict:
    return {"value": _number(params, "value")}


def _heap_sort_args(state: HeapState, params: dict) -> dict:
    if len(state) <= 1:
        raise PreconditionViolation("Heap sort needs at least two values")
    return {}


def _heap_nonempty_args(state: HeapState, params: dict) -> dict:
    _non_empty(state, "Heap")
    return {}


def _traversal_args(state: GraphState, params: dict) -> dict:
    return {"start": _node_id(state, params, "start")}


def _dijkstra_args(state: GraphState, params: dict) -> dict:
    start = _node_id(state, params, "start")
    end = _node_id(state, params, "end")
    if not state.weighted:
        raise PreconditionViolation("Dijkstra needs a weighted graph")
    if state.has_negative_edges():
        raise PreconditionViolation("Dijkstra does not support negative edge weights")
    return {"start": start, "end": end}


def _push_args(state, params: dict) -> dict:
    return {"value": _text(params, "value")}


def _linear_nonempty_args(state, params: dict) -> dict:
    _non_empty(state, type(state).__name__.replace("State", ""))
    return {}


def _no_args(state, params: dict) -> dict:
    return {}


A, T, H, P, G, S, Q = (
    StructureKind.ARRAY, StructureKind.TREE, StructureKind.HASH_TABLE,
    StructureKind.HEAP, StructureKind.GRAPH, StructureKind.STACK, StructureKind.QUEUE,
)

_VALIDATORS: Dict[Tuple[StructureKind, str], Callable[[Any, dict], dict]] = {
    (A, "bubble"):       _sort_args,
    (A, "selection"):    _sort_args,
    (A, "insertion"):    _sort_args,
    (A, "merge"):        _sort_args,
    (A, "quick"):        _sort_args,
    (T, "insert"):       _tree_insert_args,
    (T, "traverse"):     _tree_traverse_args,
    (H, "insert"):       _hash_insert_args,
    (H, "search"):       _hash_key_args,
    (H, "delete"):       _hash_key_args,
    (H, "resize"):       _hash_resize_args,
    (P, "insert"):       _heap_insert_args,
    (P, "extract_root"): _heap_nonempty_args,
    (P, "build_heap"):   _heap_nonempty_args,
    (P, "heap_sort"):    _heap_sort_args,
    (G, "dfs"):          _traversal_args,
    (G, "bfs"):          _traversal_args,
    (G, "dijkstra"):     _dijkstra_args,
    (S, "push"):         _push_args,
    (S, "pop"):          _linear_nonempty_args,
    (S, "peek"):         _linear_nonempty_args,
    (S, "clear"):        _no_args,
    (Q, "enqueue"):      _push_args,
    (Q, "dequeue"):      _linear_nonempty_args,
    (Q, "peek"):         _linear_nonempty_args,
    (Q, "clear"):        _no_args,
}


def _prepare(kind, operation: str, state, params: Params) -> Tuple[AlgoInfo, dict]:
    kind = coerce_kind(kind)
    info = get_algorithm(kind, operation)
    if info is None:
        raise InvalidInput(f"Unknown operation {operation!r} for {kind.value}")
    if not isinstance(state, STATE_TYPES[kind]):
        raise InvalidInput(f"{operation!r} expects a {STATE_TYPES[kind].__name__}, got {type(state).__name__}")
    kwargs = _VALIDATORS[(kind, operation)](state, params or {})
    return info, kwargs


# ---------------------------------------------------------------------------
# Public
# ---------------------------------------------------------------------------
def validate(kind, operation: str, state, params: Params = None) -> None:
    """Raise InvalidInput / PreconditionViolation if `run` would reject the request."""
    _prepare(kind, operation, state, params)


def run(kind, operation: str, state, params: Params = None) -> List[Step]:
    """
    Produce the complete, ordered step sequence for one operation.

    Pure: the stepper works on a deep copy, `state` is never mutated.
    A rejected request yields [].
    """
    try:
        info, kwargs = _prepare(kind, operation, state, params)
    except (InvalidInput, PreconditionViolation) as exc:
        logger.debug("Rejected %s/%s: %s", kind, operation, exc)
        return []
    steps = list(info.fn(copy.deepcopy(state), **kwargs))
    logger.debug("%s produced %d step(s)", info.label, len(steps))
    return steps


def create_initial_state(kind, params: Params = None):
    """
    Fresh state for a structure.

    Recognised params:
        array      : values | size, seed
        tree       : sample (default True)
        hash_table : size, sample (default False)
        heap       : variant ("max"/"min"), values | sample (default True) | random, seed
        graph      : directed, weighted, sample (default False)
        stack/queue: items
    """
    kind = coerce_kind(kind)
    params = params or {}

    if kind == StructureKind.ARRAY:
        if "values" in params:
            return ArrayState(values=[_number({"v": v}, "v") for v in params["values"]])
        size = int(_number(params, "size")) if "size" in params else Config.array_size
        if size < 0:
            raise InvalidInput("'size' must not be negative")
        return generate_array(size, params.get("seed"))

    if kind == StructureKind.TREE:
        return sample_tree() if params.get("sample", True) else TreeState()

    if kind == StructureKind.HASH_TABLE:
        size = int(_number(params, "size")) if "size" in params else Config.hash_table_size
        if size < 1:
            raise InvalidInput("'size' must be a positive integer")
        return sample_table(size) if params.get("sample", False) else HashTableState(size=size)

    if kind == StructureKind.HEAP:
        variant = params.get("variant", "max")
        if variant not in VARIANTS:
            raise InvalidInput(f"Unknown heap variant {variant!r}")
        if "values" in params:
            return HeapState(values=[_number({"v": v}, "v") for v in params["values"]], variant=variant)
        if params.get("random"):
            return generate_heap(variant, params.get("seed"))
        return sample_heap(variant) if params.get("sample", True) else HeapState(variant=variant)

    if kind == StructureKind.GRAPH:
        directed = bool(params.get("directed", False))
        weighted = bool(params.get("weighted", params.get("sample", False)))
        if params.get("sample", False):
            return sample_graph(directed=directed, weighted=weighted)
        return GraphState(directed=directed, weighted=weighted)

    if kind == StructureKind.STACK:
        return StackState(items=[str(i) for i in params.get("items", [])])

    return QueueState(items=[str(i) for i in params.get("items", [])])


# ---------------------------------------------------------------------------
# Graph editing (not stepped)
# ---------------------------------------------------------------------------
GRAPH_ACTIONS = (
    "add_node", "add_edge", "remove_node", "remove_edge",
    "move_node", "set_directed", "set_weighted", "clear", "sample",
)


def edit_graph(graph: GraphState, action: str, params: Params = None) -> GraphState:
    """Return a new GraphState with one editing action applied."""
    params = params or {}
    g = copy.deepcopy(graph)

    if action == "add_node":
        g.create_node(_text(params, "label"), params.get("x", 0.0), params.get("y", 0.0))
    elif action == "add_edge":
        source = _node_id(g, params, "source")
        target = _node_id(g, params, "target")
        if source == target:
            raise InvalidInput("An edge needs two different nodes")
        weight = _number(params, "weight") if "weight" in params else 1
        if not g.directed and g.has_edge(target, source):
            raise PreconditionViolation("Edge already exists between these nodes")
        if g.create_edge(source, target, weight) is None:
            raise PreconditionViolation("Edge already exists between these nodes")
    elif action == "remove_node":
        g.remove_node(_node_id(g, params, "node"))
    elif action == "remove_edge":
        g.remove_edge(_text(params, "source"), _text(params, "target"))
    elif action == "move_node":
        g.move_node(_node_id(g, params, "node"), _number(params, "x"), _number(params, "y"))
    elif action == "set_directed":
        g.directed = bool(params.get("value", not g.directed))
    elif action == "set_weighted":
        g.weighted = bool(params.get("value", not g.weighted))
    elif action == "clear":
        g.clear()
    elif action == "sample":
        g = sample_graph(directed=g.directed, weighted=g.weighted)
    else:
        raise InvalidInput(f"Unknown graph action {action!r}")

    g.reset_algo_state()
    return g


__all__ = [
    "create_initial_state", "run", "validate", "edit_graph",
    "coerce_kind", "hash_key", "GRAPH_ACTIONS",
]
