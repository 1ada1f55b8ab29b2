"""
heap.py — Binary Heap Steppers
===============================
insert        : NODE_INSERT at the end, then sift up.
extract_root  : ROOT_REPLACE (last element into the root), then sift down.
build_heap    : sift down every non-leaf, last one first.
heap_sort     : build, then repeatedly SWAP the root behind the unsorted
                prefix and sift down over what remains.

Every comparison against a parent or child is a COMPARE step, every
exchange a SWAP.  The heap's variant decides the comparison, so heap
sort leaves a max-heap ascending and a min-heap descending.
"""

from typing import Callable, Generator, List

from structures import HeapState
from structures.heap import children, parent
from algorithms.step import Step, StepKind, StepLog


HEAP_SORT_PSEUDOCODE: List[str] = [
    "buildHeap(a)",
    "for i in n-1 .. 1:",
    "    swap(a[0], a[i])",
    "    siftDown(a, 0, limit=i)",
]


def _sift_down(
    arr: List[float],
    index: int,
    limit: int,
    outranks: Callable[[float, float], bool],
    log: StepLog,
) -> Generator[Step, None, None]:
    """Sift arr[index] down within arr[:limit]."""
    current = index
    while True:
        left, right = children(current)
        target = current
        for child in (left, right):
            if child < limit:
                yield log.emit(StepKind.COMPARE, f"Compare {arr[child]} with {arr[target]}", i=child, j=target)
                if outranks(arr[child], arr[target]):
                    target = child
        if target == current:
            return
        arr[current], arr[target] = arr[target], arr[current]
        yield log.emit(StepKind.SWAP, f"Swapping {arr[target]} with child {arr[current]}", i=current, j=target)
        current = target


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert(state: HeapState, value: float) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()

    arr.append(value)
    current = len(arr) - 1
    yield log.emit(StepKind.NODE_INSERT, f"Inserting {value} into the heap...", index=current, value=value)

    while current > 0:
        p = parent(current)
        yield log.emit(StepKind.COMPARE, f"Compare {arr[current]} with parent {arr[p]}", i=current, j=p)
        if not state.outranks(arr[current], arr[p]):
            break
        arr[p], arr[current] = arr[current], arr[p]
        yield log.emit(StepKind.SWAP, f"Swapping {arr[p]} with parent {arr[current]}", i=current, j=p)
        current = p

    yield log.emit(StepKind.COMPLETE, "Insertion complete. Heap is now balanced.", values=list(arr))


# ---------------------------------------------------------------------------
# Extract root
# ---------------------------------------------------------------------------
def extract_root(state: HeapState) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()
    extracted = arr[0]
    which = "maximum" if state.variant == "max" else "minimum"

    arr[0] = arr[-1]
    arr.pop()
    yield log.emit(StepKind.ROOT_REPLACE, f"Extracting {which} value ({extracted}); last element moves to the root", extracted=extracted)

    if arr:
        yield from _sift_down(arr, 0, len(arr), state.outranks, log)

    yield log.emit(StepKind.COMPLETE, f"Extraction complete. Extracted value: {extracted}", extracted=extracted, values=list(arr))


# ---------------------------------------------------------------------------
# Build heap (bottom-up, linear time)
# ---------------------------------------------------------------------------
def _build(arr: List[float], state: HeapState, log: StepLog) -> Generator[Step, None, None]:
    for i in range(len(arr) // 2 - 1, -1, -1):
        yield from _sift_down(arr, i, len(arr), state.outranks, log)


def build_heap(state: HeapState) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()
    yield from _build(arr, state, log)
    yield log.emit(StepKind.COMPLETE, f"{state.variant}-heap construction complete.", values=list(arr))


# ---------------------------------------------------------------------------
# Heap sort
# ---------------------------------------------------------------------------
def heap_sort(state: HeapState) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()
    direction = "ascending" if state.variant == "max" else "descending"

    yield from _build(arr, state, log)

    for i in range(len(arr) - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        yield log.emit(StepKind.SWAP, f"Moving root ({arr[i]}) to the end of the sorted portion", i=0, j=i)
        yield from _sift_down(arr, 0, i, state.outranks, log)

    yield log.emit(
        StepKind.COMPLETE,
        f"Heap sort complete. Array is now sorted in {direction} order.",
        direction=direction, values=list(arr),
    )
