"""Sequence Operations — pure alternatives to the mutating list/array methods.

Invariants:
    - All functions are pure (no IO, no async, no global state)
    - Returns NEW containers — never mutates the input sequence
    - Result type follows the input: tuple -> tuple, str -> str, anything else -> list
    - Negative positions count from the end, like Python indexing
    - Out-of-range behaviour is decided by BoundaryPolicy (default RAISE)

Design Decisions:
    - CLAMP reproduces JavaScript Array.prototype.splice; RAISE matches Python list semantics
    - insert_at / remove_at / replace_at are thin wrappers over splice (single boundary check)
    - map_items / reduce_items never rebuild a str: their results are arbitrary values
"""

import functools
import itertools
import logging
from collections.abc import Iterable, Sequence
from typing import Any

from immutable_ops.core.domain_types import (
    BoundaryPolicy, Comparator, KeyFunc, Predicate, Reducer,
)
from immutable_ops.core.errors import (
    EmptySequenceError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    ValueNotFoundError,
)

logger = logging.getLogger(__name__)

_MISSING = object()


# === Helpers ==================================================================

def _rebuild(source: Sequence, items: Iterable) -> Sequence:
    """Build a new container of the same family as source."""
    if isinstance(source, str):
        return "".join(items)
    if isinstance(source, tuple):
        return tuple(items)
    return list(items)


def _collection(source: Iterable, items: Iterable) -> Sequence:
    """Like _rebuild, but str input yields a list (items may not be strings)."""
    if isinstance(source, tuple):
        return tuple(items)
    return list(items)


def _absorbed(operation: str, policy: BoundaryPolicy, detail: str) -> None:
    logger.debug(
        f"{operation}: {detail} absorbed by policy={policy.value}",
        extra={"operation": operation},
    )


# === Ends =====================================================================

def drop_first(seq: Sequence, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE) -> Sequence:
    """New sequence without the first item. Alternative to `items.pop(0)`."""
    if not seq:
        if policy is BoundaryPolicy.RAISE:
            raise EmptySequenceError("drop_first")
        _absorbed("drop_first", policy, "empty sequence")
    return _rebuild(seq, seq[1:])


def drop_last(seq: Sequence, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE) -> Sequence:
    """New sequence without the last item. Alternative to `items.pop()`."""
    if not seq:
        if policy is BoundaryPolicy.RAISE:
            raise EmptySequenceError("drop_last")
        _absorbed("drop_last", policy, "empty sequence")
    return _rebuild(seq, seq[:-1])


def split_first(
    seq: Sequence, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> tuple[Any, Sequence]:
    """Return (first item, rest). Non-mutating form of `items.pop(0)`.

    On an empty sequence with a non-RAISE policy the item is None.
    """
    if not seq:
        if policy is BoundaryPolicy.RAISE:
            raise EmptySequenceError("split_first")
        _absorbed("split_first", policy, "empty sequence")
        return None, _rebuild(seq, seq)
    return seq[0], _rebuild(seq, seq[1:])


def split_last(
    seq: Sequence, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> tuple[Any, Sequence]:
    """Return (last item, rest). Non-mutating form of `items.pop()`."""
    if not seq:
        if policy is BoundaryPolicy.RAISE:
            raise EmptySequenceError("split_last")
        _absorbed("split_last", policy, "empty sequence")
        return None, _rebuild(seq, seq)
    return seq[-1], _rebuild(seq, seq[:-1])


def prepend(seq: Sequence, item: Any) -> Sequence:
    """New sequence with item at the start. Alternative to `items.insert(0, x)`."""
    if isinstance(seq, str):
        return item + seq
    return _rebuild(seq, [item, *seq])


def append(seq: Sequence, item: Any) -> Sequence:
    """New sequence with item at the end. Alternative to `items.append(x)`."""
    if isinstance(seq, str):
        return seq + item
    return _rebuild(seq, [*seq, item])


def concat(seq: Sequence, *others: Iterable) -> Sequence:
    """New sequence with every item of others appended. Alternative to `extend` / `+=`."""
    if isinstance(seq, str):
        return seq + "".join(itertools.chain.from_iterable(others))
    return _rebuild(seq, itertools.chain(seq, *others))


# === Order ====================================================================

def reverse(seq: Sequence) -> Sequence:
    """New sequence in reverse order. Alternative to `items.reverse()`."""
    return _rebuild(seq, seq[::-1])


def sort(
    seq: Sequence,
    *,
    key: KeyFunc | None = None,
    cmp: Comparator | None = None,
    reverse: bool = False,
) -> Sequence:
    """New sequence in ascending order. Alternative to `items.sort()`.

    Stable. Order is given by `key` (key function) or `cmp` (three-way
    comparator returning <0, 0, >0), not both.
    """
    if key is not None and cmp is not None:
        raise InvalidArgumentError("sort", "key/cmp", "pass either key or cmp, not both")
    if cmp is not None:
        key = functools.cmp_to_key(cmp)
    return _rebuild(seq, sorted(seq, key=key, reverse=reverse))


# === Positional ===============================================================

def splice(
    seq: Sequence,
    start: int,
    delete_count: int | None = None,
    *items: Any,
    policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> Sequence:
    """New sequence with `delete_count` items at `start` replaced by `items`.

    `delete_count=None` removes everything from `start` to the end. RAISE
    rejects a start outside [-len, len] or a range running past the end;
    CLAMP pulls both back into range (JavaScript splice); NOOP returns an
    unchanged copy.
    """
    length = len(seq)
    if delete_count is None:
        delete_count = max(length - (start + length if start < 0 else start), 0)

    if delete_count < 0:
        if policy is BoundaryPolicy.RAISE:
            raise InvalidArgumentError("splice", "delete_count", f"{delete_count} < 0")
        _absorbed("splice", policy, f"delete_count={delete_count}")
        if policy is BoundaryPolicy.NOOP:
            return _rebuild(seq, seq)
        delete_count = 0

    position = start + length if start < 0 else start
    out_of_range = position < 0 or position > length or position + delete_count > length
    if out_of_range:
        if policy is BoundaryPolicy.RAISE:
            bad = start if position < 0 or position > length else start + delete_count
            raise IndexOutOfRangeError("splice", bad, length)
        _absorbed("splice", policy, f"start={start} delete_count={delete_count} length={length}")
        if policy is BoundaryPolicy.NOOP:
            return _rebuild(seq, seq)
        position = min(max(position, 0), length)
        delete_count = min(delete_count, length - position)

    if isinstance(seq, str):
        return seq[:position] + "".join(items) + seq[position + delete_count:]
    return _rebuild(seq, [*seq[:position], *items, *seq[position + delete_count:]])


def _check_item_index(
    operation: str, seq: Sequence, index: int, policy: BoundaryPolicy,
) -> int | None:
    """Normalize index for an operation that targets an existing item.

    Returns None when the policy absorbs an out-of-range index.
    """
    length = len(seq)
    position = index + length if index < 0 else index
    if 0 <= position < length:
        return position
    if policy is BoundaryPolicy.RAISE:
        raise IndexOutOfRangeError(operation, index, length)
    _absorbed(operation, policy, f"index={index} length={length}")
    return None


def insert_at(
    seq: Sequence, index: int, item: Any,
    *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> Sequence:
    """New sequence with item inserted before index. Alternative to `items.insert(i, x)`."""
    return splice(seq, index, 0, item, policy=policy)


def remove_at(
    seq: Sequence, index: int, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> Sequence:
    """New sequence without the item at index. Alternative to `del items[i]`."""
    position = _check_item_index("remove_at", seq, index, policy)
    if position is None:
        return _rebuild(seq, seq)
    return splice(seq, position, 1)


def replace_at(
    seq: Sequence, index: int, item: Any,
    *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> Sequence:
    """New sequence with the item at index replaced. Alternative to `items[i] = x`."""
    position = _check_item_index("replace_at", seq, index, policy)
    if position is None:
        return _rebuild(seq, seq)
    return splice(seq, position, 1, item)


def remove_value(
    seq: Sequence, value: Any, *, policy: BoundaryPolicy = BoundaryPolicy.RAISE,
) -> Sequence:
    """New sequence without the first occurrence of value. Alternative to `items.remove(x)`."""
    for position, candidate in enumerate(seq):
        if candidate == value:
            return splice(seq, position, 1)
    if policy is BoundaryPolicy.RAISE:
        raise ValueNotFoundError("remove_value", value)
    _absorbed("remove_value", policy, f"value={value!r} missing")
    return _rebuild(seq, seq)


# === Map / Filter / Reduce ====================================================

def map_items(fn: KeyFunc, seq: Iterable) -> Sequence:
    """New sequence of fn(item) for each item."""
    return _collection(seq, (fn(item) for item in seq))


def filter_items(pred: Predicate, seq: Iterable) -> Sequence:
    """New sequence of the items for which pred is truthy."""
    kept = (item for item in seq if pred(item))
    if isinstance(seq, (str, tuple)):
        return _rebuild(seq, kept)
    return list(kept)


def reduce_items(fn: Reducer, seq: Iterable, initial: Any = _MISSING) -> Any:
    """Fold items left to right: fn(fn(initial, s0), s1) ...

    Without `initial` the first item seeds the fold; an empty input then
    raises EmptySequenceError whatever the policy, since no value exists.
    """
    items = list(seq)
    if initial is _MISSING:
        if not items:
            raise EmptySequenceError("reduce_items")
        return functools.reduce(fn, items)
    return functools.reduce(fn, items, initial)


def reduce_right(fn: Reducer, seq: Iterable, initial: Any = _MISSING) -> Any:
    """Fold items right to left; same seeding rules as reduce_items."""
    items = list(seq)[::-1]
    if initial is _MISSING:
        if not items:
            raise EmptySequenceError("reduce_right")
        return functools.reduce(fn, items)
    return functools.reduce(fn, items, initial)
