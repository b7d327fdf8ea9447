"""Cheatsheet Catalog — every shipped example holds, and run_entry catches the ones that don't.

Tests cover:
    - Every CATALOG entry passes run_entry
    - Every public sequence/record operation is demonstrated at least once
    - The five reference scenarios are in the catalog with their expected values
    - run_entry reports wrong results, mutated inputs and raised exceptions
    - run_entry never touches the entry's own example
"""

import pytest

import immutable_ops
from immutable_ops.core.cheatsheet_catalog import (
    CATALOG,
    CheatsheetEntry,
    entries_for,
    run_entry,
)
from immutable_ops.core.domain_types import Section


def _entry(apply, example, expected, title="sample") -> CheatsheetEntry:
    return CheatsheetEntry(
        Section.ARRAYS, title, "items.mutate()", "pure(items)",
        apply, example, expected,
    )


# ─── Shipped catalog ─────────────────────────────────────────────

@pytest.mark.parametrize("entry", CATALOG, ids=lambda e: e.title)
def test_every_catalog_example_holds(entry):
    result = run_entry(entry)
    assert result.passed, result.reason
    assert result.mutated is False


def test_catalog_titles_are_unique():
    titles = [e.title for e in CATALOG]
    assert len(titles) == len(set(titles))


def test_every_public_operation_is_demonstrated():
    operations = [
        name for name in immutable_ops.__all__
        if name[0].islower()
    ]
    shown = " ".join(e.pure for e in CATALOG)
    missing = [name for name in operations if f"{name}(" not in shown]
    assert missing == []


def test_reference_scenarios_are_in_the_catalog():
    by_pure = {e.pure: e for e in CATALOG}
    assert by_pure["drop_first(items)"].example == [1, 2, 3, 4, 5]
    assert by_pure["drop_first(items)"].expected == [2, 3, 4, 5]
    assert by_pure["append(items, 4)"].expected == [1, 2, 3, 4]
    assert by_pure["reverse(items)"].example == [3, 1, 2]
    assert by_pure["reverse(items)"].expected == [2, 1, 3]
    assert by_pure["sort(items)"].example == [5, 3, 1, 4, 2]
    assert by_pure["sort(items)"].expected == [1, 2, 3, 4, 5]
    increment = by_pure['update_field(record, "count", lambda c: c + 1)']
    assert increment.example == {"count": 0}
    assert increment.expected == {"count": 1}


def test_entries_for_splits_by_section_in_order():
    arrays = entries_for(Section.ARRAYS)
    objects = entries_for(Section.OBJECTS)
    assert len(arrays) + len(objects) == len(CATALOG)
    assert arrays == [e for e in CATALOG if e.section == Section.ARRAYS]
    assert all(e.section == Section.OBJECTS for e in objects)


# ─── run_entry failure modes ─────────────────────────────────────

def test_run_entry_reports_wrong_result():
    result = run_entry(_entry(lambda items: items[1:], [1, 2, 3], [9]))
    assert result.passed is False
    assert result.actual == [2, 3]
    assert result.mutated is False
    assert "expected [9], got [2, 3]" in result.reason


def test_run_entry_detects_mutation_even_when_result_matches():
    def mutating_drop_first(items):
        items.pop(0)
        return items

    example = [1, 2, 3]
    result = run_entry(_entry(mutating_drop_first, example, [2, 3]))
    assert result.passed is False
    assert result.mutated is True
    assert "input was mutated" in result.reason
    assert example == [1, 2, 3]


def test_run_entry_reports_exceptions_as_failures():
    result = run_entry(_entry(lambda items: items[10], [], None))
    assert result.passed is False
    assert result.reason.startswith("IndexError")


def test_run_entry_passes_and_exposes_actual():
    result = run_entry(_entry(lambda items: items[::-1], (1, 2), (2, 1)))
    assert result.passed is True
    assert result.actual == (2, 1)
    assert result.reason is None


def test_catalog_demonstrates_key_and_comparator_sorting():
    by_title = {e.title: e for e in CATALOG}
    assert "key=" in by_title["Sort by key"].pure
    comparator = by_title["Sort with a comparison function"]
    assert "cmp=" in comparator.pure
    assert run_entry(comparator).actual == [3, 2, 1]
