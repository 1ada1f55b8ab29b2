"""
hashing.py — Chained Hash Table Steppers
=========================================
insert / search / delete all probe exactly one bucket: they HIGHLIGHT
it first (the frame where the renderer shows "this bucket is being
examined"), act on it, then UNHIGHLIGHT and report through COMPLETE.

resize is a full rehash: TABLE_RESIZE throws the bucket layout away and
every collected entry is re-written with BUCKET_WRITE, collisions
recounted from zero.
"""

from typing import Generator, List

from structures import HashEntry, HashTableState, hash_key
from algorithms.step import Step, StepKind, StepLog


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def insert(state: HashTableState, key: str, value: str) -> Generator[Step, None, None]:
    log = StepLog()
    bucket = hash_key(key, state.size)
    chain = state.buckets[bucket]

    yield log.emit(StepKind.HIGHLIGHT, f"Hash value for key \"{key}\" is {bucket}", bucket=bucket)

    updated = collision = False
    if chain is None:
        note = f"Bucket {bucket} was empty. Inserting entry."
    elif any(e.key == key for e in chain):
        updated = True
        note = f"Key \"{key}\" already exists in bucket {bucket}. Updating value."
    else:
        collision = True
        note = f"Collision detected at bucket {bucket}. Adding to chain."

    yield log.emit(StepKind.BUCKET_WRITE, note, bucket=bucket, key=key, value=value)
    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, "Insertion complete.", bucket=bucket, updated=updated, collision=collision)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def search(state: HashTableState, key: str) -> Generator[Step, None, None]:
    log = StepLog()
    bucket = hash_key(key, state.size)
    chain = state.buckets[bucket]

    yield log.emit(StepKind.HIGHLIGHT, f"Hash value for key \"{key}\" is {bucket}", bucket=bucket)

    entry = None
    if chain is not None:
        for candidate in chain:
            if candidate.key == key:
                entry = candidate
                break

    yield log.emit(StepKind.UNHIGHLIGHT, "")
    if entry is None:
        where = f"Bucket {bucket} is empty." if chain is None else f"Key \"{key}\" not found in bucket {bucket}."
        yield log.emit(StepKind.COMPLETE, f"{where} Key not found.", found=False, value=None, bucket=bucket)
    else:
        yield log.emit(
            StepKind.COMPLETE,
            f"Key \"{key}\" found in bucket {bucket} with value \"{entry.value}\".",
            found=True, value=entry.value, bucket=bucket,
        )


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------
def delete(state: HashTableState, key: str) -> Generator[Step, None, None]:
    log = StepLog()
    bucket = hash_key(key, state.size)
    chain = state.buckets[bucket]

    yield log.emit(StepKind.HIGHLIGHT, f"Hash value for key \"{key}\" is {bucket}", bucket=bucket)

    present = chain is not None and any(e.key == key for e in chain)
    if present:
        yield log.emit(StepKind.BUCKET_REMOVE, f"Key \"{key}\" found and deleted from bucket {bucket}.", bucket=bucket, key=key)
        note = "Deletion complete."
    elif chain is None:
        note = f"Bucket {bucket} is empty. Nothing to delete."
    else:
        note = f"Key \"{key}\" not found in bucket {bucket}. Nothing to delete."

    yield log.emit(StepKind.UNHIGHLIGHT, "")
    yield log.emit(StepKind.COMPLETE, note, deleted=present, bucket=bucket)


# ---------------------------------------------------------------------------
# Resize (full rehash)
# ---------------------------------------------------------------------------
def resize(state: HashTableState, new_size: int) -> Generator[Step, None, None]:
    log = StepLog()
    entries: List[HashEntry] = list(state.entries())

    yield log.emit(
        StepKind.TABLE_RESIZE,
        f"Resizing hash table from {state.size} to {new_size}...",
        size=new_size,
    )

    occupied = set()
    collisions = 0
    for entry in entries:
        bucket = hash_key(entry.key, new_size)
        if bucket in occupied:
            collisions += 1
        occupied.add(bucket)
        yield log.emit(
            StepKind.BUCKET_WRITE,
            f"Rehash \"{entry.key}\" into bucket {bucket}",
            bucket=bucket, key=entry.key, value=entry.value,
        )

    yield log.emit(
        StepKind.COMPLETE,
        f"Resize complete. {len(entries)} entries rehashed with {collisions} collisions.",
        entries=len(entries), collisions=collisions,
    )
