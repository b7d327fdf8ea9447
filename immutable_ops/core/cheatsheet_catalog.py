"""Cheatsheet Catalog — every mutating idiom paired with its pure alternative, as runnable data.

Invariants:
    - CATALOG is a tuple of frozen entries — module-level data is never mutated
    - run_entry works on a deep copy of the example; the catalog's own example is never touched
    - run_entry is pure: exceptions raised by an example become a failed EntryResult
    - Every public operation of sequences and records appears in at least one entry

Design Decisions:
    - Examples are (input, apply, expected) triples so one runner covers every entry
    - Non-mutation is checked by comparing the input against a pre-call deep copy
"""

import copy
import operator
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from immutable_ops.core.domain_types import Section
from immutable_ops.core import records as rec
from immutable_ops.core import sequences as seq


@dataclass(frozen=True)
class CheatsheetEntry:
    """One cheatsheet row: the problem, the fix, and a checkable example."""
    section: Section
    title: str
    mutating: str                   # idiom that changes its input
    pure: str                       # side-effect-free replacement
    apply: Callable[[Any], Any]     # runs the replacement on the example
    example: Any
    expected: Any


@dataclass(frozen=True)
class EntryResult:
    """Outcome of running one entry's example."""
    entry: CheatsheetEntry
    passed: bool
    actual: Any = None
    mutated: bool = False
    reason: str | None = None


# ─── Example Records ─────────────────────────────────────────────

@dataclass(frozen=True)
class Counter:
    count: int
    label: str


class CounterModel(BaseModel):
    count: int
    label: str


# ─── Arrays ──────────────────────────────────────────────────────

_ARRAYS: tuple[CheatsheetEntry, ...] = (
    CheatsheetEntry(
        Section.ARRAYS, "Remove the first item",
        "items.pop(0)", "drop_first(items)",
        seq.drop_first, [1, 2, 3, 4, 5], [2, 3, 4, 5],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Remove the last item",
        "items.pop()", "drop_last(items)",
        seq.drop_last, [1, 2, 3], [1, 2],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Take the first item and keep the rest",
        "first = items.pop(0)", "first, rest = split_first(items)",
        seq.split_first, [1, 2, 3], (1, [2, 3]),
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Take the last item and keep the rest",
        "last = items.pop()", "last, rest = split_last(items)",
        seq.split_last, [1, 2, 3], (3, [1, 2]),
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Add an item at the start",
        "items.insert(0, 0)", "prepend(items, 0)",
        lambda items: seq.prepend(items, 0), [1, 2, 3], [0, 1, 2, 3],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Add an item at the end",
        "items.append(4)", "append(items, 4)",
        lambda items: seq.append(items, 4), [1, 2, 3], [1, 2, 3, 4],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Add several items at the end",
        "items.extend([3, 4])", "concat(items, [3, 4])",
        lambda items: seq.concat(items, [3, 4]), [1, 2], [1, 2, 3, 4],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Reverse",
        "items.reverse()", "reverse(items)",
        seq.reverse, [3, 1, 2], [2, 1, 3],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Sort ascending",
        "items.sort()", "sort(items)",
        seq.sort, [5, 3, 1, 4, 2], [1, 2, 3, 4, 5],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Sort by key",
        "words.sort(key=len)", "sort(words, key=len)",
        lambda words: seq.sort(words, key=len), ["ccc", "a", "bb"], ["a", "bb", "ccc"],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Sort with a comparison function",
        "items.sort(key=cmp_to_key(lambda a, b: b - a))",
        "sort(items, cmp=lambda a, b: b - a)",
        lambda items: seq.sort(items, cmp=lambda a, b: b - a), [1, 3, 2], [3, 2, 1],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Replace a run of items",
        'items[1:3] = ["x"]', 'splice(items, 1, 2, "x")',
        lambda items: seq.splice(items, 1, 2, "x"), [1, 2, 3, 4], [1, "x", 4],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Insert at a position",
        "items.insert(1, 9)", "insert_at(items, 1, 9)",
        lambda items: seq.insert_at(items, 1, 9), [1, 2, 3], [1, 9, 2, 3],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Remove at a position",
        "del items[1]", "remove_at(items, 1)",
        lambda items: seq.remove_at(items, 1), [1, 2, 3], [1, 3],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Replace at a position",
        "items[0] = 9", "replace_at(items, 0, 9)",
        lambda items: seq.replace_at(items, 0, 9), [1, 2, 3], [9, 2, 3],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Remove a value",
        "items.remove(2)", "remove_value(items, 2)",
        lambda items: seq.remove_value(items, 2), [1, 2, 3, 2], [1, 3, 2],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Transform every item",
        "for i, x in enumerate(items): items[i] = x * 2",
        "map_items(lambda x: x * 2, items)",
        lambda items: seq.map_items(lambda x: x * 2, items), [1, 2, 3], [2, 4, 6],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Keep matching items",
        "for x in list(items): x % 2 or items.remove(x)",
        "filter_items(lambda x: x % 2 == 0, items)",
        lambda items: seq.filter_items(lambda x: x % 2 == 0, items), [1, 2, 3, 4], [2, 4],
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Combine items into one value",
        "while items: total += items.pop()",
        "reduce_items(operator.add, items, 0)",
        lambda items: seq.reduce_items(operator.add, items, 0), [1, 2, 3, 4, 5], 15,
    ),
    CheatsheetEntry(
        Section.ARRAYS, "Combine items from the end",
        "while items: out.append(items.pop())",
        "reduce_right(lambda acc, x: [*acc, x], items, [])",
        lambda items: seq.reduce_right(lambda acc, x: [*acc, x], items, []),
        [1, 2, 3], [3, 2, 1],
    ),
)


# ─── Objects ─────────────────────────────────────────────────────

_OBJECTS: tuple[CheatsheetEntry, ...] = (
    CheatsheetEntry(
        Section.OBJECTS, "Set a key",
        'record["count"] = 1', "update_record(record, count=1)",
        lambda record: rec.update_record(record, count=1),
        {"count": 0, "label": "a"}, {"count": 1, "label": "a"},
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Update a key from its old value",
        'record["count"] += 1', 'update_field(record, "count", lambda c: c + 1)',
        lambda record: rec.update_field(record, "count", lambda c: c + 1),
        {"count": 0}, {"count": 1},
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Delete a key",
        'del record["label"]', 'omit(record, "label")',
        lambda record: rec.omit(record, "label"),
        {"count": 0, "label": "a"}, {"count": 0},
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Merge another record in",
        "record.update(other)", "merge(record, other)",
        lambda record: rec.merge(record, {"label": "b", "done": True}),
        {"count": 0, "label": "a"}, {"count": 0, "label": "b", "done": True},
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Set a key only if missing",
        'record.setdefault("count", 0)', 'with_default(record, "count", 0)',
        lambda record: rec.with_default(record, "count", 0),
        {"label": "a"}, {"label": "a", "count": 0},
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Update a dataclass field",
        "counter.count = 1", "update_record(counter, count=1)",
        lambda counter: rec.update_record(counter, count=1),
        Counter(count=0, label="a"), Counter(count=1, label="a"),
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Update a model field",
        "model.count = 1", "update_record(model, count=1)",
        lambda model: rec.update_record(model, count=1),
        CounterModel(count=0, label="a"), CounterModel(count=1, label="a"),
    ),
    CheatsheetEntry(
        Section.OBJECTS, "Read every field",
        "vars(counter)", "fields_of(counter)",
        rec.fields_of, Counter(count=0, label="a"), {"count": 0, "label": "a"},
    ),
)


CATALOG: tuple[CheatsheetEntry, ...] = _ARRAYS + _OBJECTS


# === Public API ===============================================================

def entries_for(section: Section, entries: tuple[CheatsheetEntry, ...] = CATALOG) -> list[CheatsheetEntry]:
    """Entries of one section, in catalog order."""
    return [e for e in entries if e.section == section]


def run_entry(entry: CheatsheetEntry) -> EntryResult:
    """Run one example on a deep copy and check result and non-mutation. Pure, no IO."""
    snapshot = copy.deepcopy(entry.example)
    working = copy.deepcopy(entry.example)
    try:
        actual = entry.apply(working)
    except Exception as exc:
        return EntryResult(entry, False, reason=f"{type(exc).__name__}: {exc}")

    if working != snapshot:
        return EntryResult(
            entry, False, actual, mutated=True,
            reason=f"input was mutated: {snapshot!r} became {working!r}",
        )
    if actual != entry.expected:
        return EntryResult(
            entry, False, actual,
            reason=f"expected {entry.expected!r}, got {actual!r}",
        )
    return EntryResult(entry, True, actual)
