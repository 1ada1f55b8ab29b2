"""
sorting.py — Sorting Steppers
==============================
Five generator-based sorts over an ArrayState.  Each works on a private
copy of the values and yields:

  • COMPARE (i, j)  for every comparison the algorithm makes
  • SWAP    (i, j)  for every real exchange
  • WRITE   (index, value) for merge sort placements
  • COMPLETE        once, at the end (clears the comparison highlight)

Replaying the yielded steps over the original ArrayState ends with the
values sorted ascending.
"""

from typing import Generator, List

from structures import ArrayState
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
BUBBLE_PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",
    "    for j in 0 .. n-i-2:",
    "        if a[j] > a[j+1]:",
    "            swap(a[j], a[j+1])",
]

SELECTION_PSEUDOCODE: List[str] = [
    "for i in 0 .. n-1:",
    "    min ← i",
    "    for j in i+1 .. n-1:",
    "        if a[j] < a[min]: min ← j",
    "    if min ≠ i: swap(a[i], a[min])",
]

INSERTION_PSEUDOCODE: List[str] = [
    "for i in 1 .. n-1:",
    "    j ← i",
    "    while j > 0 and a[j-1] > a[j]:",
    "        swap(a[j-1], a[j])",
    "        j ← j - 1",
]

MERGE_PSEUDOCODE: List[str] = [
    "def mergeSort(a, l, r):",
    "    if l < r:",
    "        m ← (l + r) // 2",
    "        mergeSort(a, l, m)",
    "        mergeSort(a, m+1, r)",
    "        merge(a, l, m, r)      # one write per placed element",
]

QUICK_PSEUDOCODE: List[str] = [
    "def quickSort(a, lo, hi):",
    "    if lo < hi:",
    "        pivot ← a[hi]; i ← lo - 1",
    "        for j in lo .. hi-1:",
    "            if a[j] < pivot: i ← i + 1; swap(a[i], a[j])",
    "        swap(a[i+1], a[hi])",
    "        quickSort(a, lo, i)",
    "        quickSort(a, i+2, hi)",
]


def _finish(log: StepLog, arr: List[float]) -> Step:
    return log.emit(StepKind.COMPLETE, f"Sorted {len(arr)} element(s).", values=list(arr))


# ---------------------------------------------------------------------------
# Bubble
# ---------------------------------------------------------------------------
def bubble_sort(state: ArrayState) -> Generator[Step, None, None]:
    arr = list(state.values)
    n = len(arr)
    log = StepLog()
    for i in range(n):
        for j in range(n - i - 1):
            yield log.emit(StepKind.COMPARE, f"Compare {arr[j]} and {arr[j + 1]}", i=j, j=j + 1)
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                yield log.emit(StepKind.SWAP, f"{arr[j + 1]} > {arr[j]} — swap", i=j, j=j + 1)
    yield _finish(log, arr)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------
def selection_sort(state: ArrayState) -> Generator[Step, None, None]:
    arr = list(state.values)
    n = len(arr)
    log = StepLog()
    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            yield log.emit(StepKind.COMPARE, f"Is {arr[j]} smaller than current minimum {arr[min_idx]}?", i=j, j=min_idx)
            if arr[j] < arr[min_idx]:
                min_idx = j
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield log.emit(StepKind.SWAP, f"Move minimum {arr[i]} into position {i}", i=i, j=min_idx)
    yield _finish(log, arr)


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------
def insertion_sort(state: ArrayState) -> Generator[Step, None, None]:
    """Adjacent-swap formulation: the key sinks left one swap at a time."""
    arr = list(state.values)
    log = StepLog()
    for i in range(1, len(arr)):
        j = i
        while j > 0:
            yield log.emit(StepKind.COMPARE, f"Compare {arr[j - 1]} and {arr[j]}", i=j - 1, j=j)
            if arr[j - 1] <= arr[j]:
                break
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            yield log.emit(StepKind.SWAP, f"Shift {arr[j]} right", i=j - 1, j=j)
            j -= 1
    yield _finish(log, arr)


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------
def merge_sort(state: ArrayState) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()

    def merge(l: int, m: int, r: int):
        left, right = arr[l:m + 1], arr[m + 1:r + 1]
        i = j = 0
        k = l
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                arr[k] = left[i]
                i += 1
            else:
                arr[k] = right[j]
                j += 1
            yield log.emit(StepKind.WRITE, f"Place {arr[k]} at index {k}", index=k, value=arr[k])
            k += 1
        while i < len(left):
            arr[k] = left[i]
            yield log.emit(StepKind.WRITE, f"Copy remaining {arr[k]} to index {k}", index=k, value=arr[k])
            i += 1
            k += 1
        while j < len(right):
            arr[k] = right[j]
            yield log.emit(StepKind.WRITE, f"Copy remaining {arr[k]} to index {k}", index=k, value=arr[k])
            j += 1
            k += 1

    def sort(l: int, r: int):
        if l < r:
            m = l + (r - l) // 2
            yield from sort(l, m)
            yield from sort(m + 1, r)
            yield from merge(l, m, r)

    yield from sort(0, len(arr) - 1)
    yield _finish(log, arr)


# ---------------------------------------------------------------------------
# Quick (Lomuto, last element pivot)
# ---------------------------------------------------------------------------
def quick_sort(state: ArrayState) -> Generator[Step, None, None]:
    arr = list(state.values)
    log = StepLog()

    def partition(low: int, high: int):
        pivot = arr[high]
        i = low - 1
        for j in range(low, high):
            yield log.emit(StepKind.COMPARE, f"Compare {arr[j]} with pivot {pivot}", i=j, j=high)
            if arr[j] < pivot:
                i += 1
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    yield log.emit(StepKind.SWAP, f"{arr[i]} < pivot — move it left", i=i, j=j)
        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        yield log.emit(StepKind.SWAP, f"Place pivot {pivot} at index {i + 1}", i=i + 1, j=high, pivot=True)
        return i + 1

    def sort(low: int, high: int):
        if low < high:
            p = yield from partition(low, high)
            yield from sort(low, p - 1)
            yield from sort(p + 1, high)

    yield from sort(0, len(arr) - 1)
    yield _finish(log, arr)
