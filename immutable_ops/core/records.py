"""Record Operations — pure alternatives to assigning, deleting and merging object fields.

Invariants:
    - All functions are pure (no IO, no async, no global state)
    - Returns NEW records — the input record is never mutated
    - Copies are shallow: unchanged fields keep the same references
    - Result type equals input type for dict subclasses, dataclasses, named tuples, pydantic models
    - Structured records (dataclass, named tuple, pydantic) reject undeclared fields

Design Decisions:
    - Each record family is copied with its own idiom: model_copy, dataclasses.replace,
      _replace, copy.copy + update
    - copy.copy only for dict subclasses; any other Mapping comes back as a plain dict,
      since a custom mapping's copy may share storage with the original
"""

import copy
import dataclasses
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from immutable_ops.core.errors import UnknownFieldError, UnsupportedRecordError


# === Helpers ==================================================================

def _is_dataclass_instance(record: Any) -> bool:
    return dataclasses.is_dataclass(record) and not isinstance(record, type)


def _is_named_tuple(record: Any) -> bool:
    return isinstance(record, tuple) and hasattr(record, "_fields")


def _declared_fields(record: Any) -> tuple[str, ...] | None:
    """Field names of a structured record; None for mappings."""
    if isinstance(record, BaseModel):
        return (*type(record).model_fields, *(record.model_extra or {}))
    if _is_dataclass_instance(record):
        return tuple(f.name for f in dataclasses.fields(record))
    if _is_named_tuple(record):
        return tuple(record._fields)
    return None


def _updatable_fields(record: Any) -> tuple[str, ...] | None:
    """Fields a copy can set; dataclass fields with init=False are excluded."""
    if _is_dataclass_instance(record):
        return tuple(f.name for f in dataclasses.fields(record) if f.init)
    return _declared_fields(record)


def _reject_unknown(record: Any, keys: Iterable[Hashable]) -> None:
    declared = _updatable_fields(record)
    if declared is None:
        return
    for key in keys:
        if key not in declared:
            raise UnknownFieldError(str(key), type(record).__name__)


def _require_mapping(operation: str, record: Any) -> None:
    if not isinstance(record, Mapping):
        raise UnsupportedRecordError(operation, type(record).__name__)


# === Public API ===============================================================

def fields_of(record: Any) -> dict:
    """Shallow dict of a record's fields. Values are not copied."""
    if isinstance(record, Mapping):
        return dict(record)
    declared = _declared_fields(record)
    if declared is None:
        raise UnsupportedRecordError("fields_of", type(record).__name__)
    return {name: getattr(record, name) for name in declared}


def update_record(record: Any, changes: Mapping | None = None, /, **fields: Any) -> Any:
    """Shallow update: a new record equal to record except for the named keys.

    Alternative to `obj.key = value` / `d[key] = value`. Keys come from
    `changes` and keyword arguments; keyword arguments win.
    """
    merged = {**(changes or {}), **fields}
    _reject_unknown(record, merged)

    if isinstance(record, BaseModel):
        return record.model_copy(update=merged)
    if _is_dataclass_instance(record):
        return dataclasses.replace(record, **merged)
    if _is_named_tuple(record):
        return record._replace(**merged)
    if isinstance(record, dict):
        updated = copy.copy(record)
        updated.update(merged)
        return updated
    if isinstance(record, Mapping):
        return {**record, **merged}
    raise UnsupportedRecordError("update_record", type(record).__name__)


def update_field(record: Any, key: Hashable, fn: Callable[[Any], Any]) -> Any:
    """Shallow update whose new value is fn(old value). Alternative to `obj.count += 1`."""
    current = fields_of(record)
    if key not in current:
        raise UnknownFieldError(str(key), type(record).__name__)
    return update_record(record, {key: fn(current[key])})


def omit(record: Mapping, *keys: Hashable) -> Mapping:
    """New mapping without keys. Alternative to `del d[key]` / `d.pop(key)`.

    Missing keys are ignored. Structured records cannot lose fields.
    """
    _require_mapping("omit", record)
    dropped = set(keys)
    if isinstance(record, dict):
        trimmed = copy.copy(record)
        for key in dropped & set(trimmed):
            del trimmed[key]
        return trimmed
    return {k: v for k, v in record.items() if k not in dropped}


def merge(record: Any, *others: Any) -> Any:
    """Shallow update with the fields of each of others; later ones win.

    Alternative to `d.update(other)` / `Object.assign(obj, other)`.
    """
    changes: dict = {}
    for other in others:
        changes = {**changes, **fields_of(other)}
    return update_record(record, changes)


def with_default(record: Mapping, key: Hashable, value: Any) -> Mapping:
    """New mapping with key set to value only if absent. Alternative to `d.setdefault`."""
    _require_mapping("with_default", record)
    if key in record:
        return update_record(record)
    return update_record(record, {key: value})
