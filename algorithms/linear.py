"""
linear.py — Stack & Queue Steppers
===================================
The stack works at its top (last index), the queue enqueues at the rear
and dequeues from the front (index 0).  PUSH appends, POP removes the
item at `index`.
"""

from typing import Generator

from structures import QueueState, StackState
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def push(state: StackState, value: str) -> Generator[Step, None, None]:
    log = StepLog()
    top = len(state.items)
    yield log.emit(StepKind.PUSH, f"Pushing \"{value}\" to the stack...", value=value)
    yield log.emit(StepKind.HIGHLIGHT, "", index=top)
    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, f"\"{value}\" pushed to stack.", value=value, size=top + 1)


def pop(state: StackState) -> Generator[Step, None, None]:
    log = StepLog()
    top = state.top_index()
    value = state.items[top]
    yield log.emit(StepKind.HIGHLIGHT, "Popping item from the stack...", index=top)
    yield log.emit(StepKind.POP, "", index=top)
    yield log.emit(StepKind.COMPLETE, f"\"{value}\" popped from stack.", value=value, size=top)


def peek(state: StackState) -> Generator[Step, None, None]:
    log = StepLog()
    top = state.top_index()
    yield log.emit(StepKind.HIGHLIGHT, "Peeking at the top of the stack...", index=top)
    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, f"Top item is \"{state.items[top]}\".", value=state.items[top])


def clear_stack(state: StackState) -> Generator[Step, None, None]:
    log = StepLog()
    for idx in range(len(state.items) - 1, -1, -1):
        yield log.emit(StepKind.POP, f"Remove \"{state.items[idx]}\"", index=idx)
    yield log.emit(StepKind.COMPLETE, "Stack cleared.", size=0)


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def enqueue(state: QueueState, value: str) -> Generator[Step, None, None]:
    log = StepLog()
    rear = len(state.items)
    yield log.emit(StepKind.PUSH, f"Enqueuing \"{value}\" to the queue...", value=value)
    yield log.emit(StepKind.HIGHLIGHT, "", index=rear)
    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, f"\"{value}\" enqueued.", value=value, size=rear + 1)


def dequeue(state: QueueState) -> Generator[Step, None, None]:
    log = StepLog()
    value = state.items[0]
    yield log.emit(StepKind.HIGHLIGHT, "Dequeuing item from the front...", index=0)
    yield log.emit(StepKind.POP, "", index=0)
    yield log.emit(StepKind.COMPLETE, f"\"{value}\" dequeued.", value=value, size=len(state.items) - 1)


def peek_front(state: QueueState) -> Generator[Step, None, None]:
    log = StepLog()
    yield log.emit(StepKind.HIGHLIGHT, "Peeking at the front of the queue...", index=0)
    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, f"Front item is \"{state.items[0]}\".", value=state.items[0])


def clear_queue(state: QueueState) -> Generator[Step, None, None]:
    log = StepLog()
    for item in state.items:
        yield log.emit(StepKind.POP, f"Remove \"{item}\"", index=0)
    yield log.emit(StepKind.COMPLETE, "Queue cleared.", size=0)
