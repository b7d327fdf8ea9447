"""immutable_ops — pure, non-mutating alternatives to list and dict methods.

Invariants:
    - Package root has no import side effects beyond re-exporting the core operations
    - Logging is not configured on import; call setup_logging explicitly
"""

from immutable_ops.core.domain_types import BoundaryPolicy, Section
from immutable_ops.core.errors import (
    EmptySequenceError,
    ExampleFailedError,
    ImmutableOpsError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    UnknownFieldError,
    UnsupportedRecordError,
    ValueNotFoundError,
)
from immutable_ops.core.records import (
    fields_of,
    merge,
    omit,
    update_field,
    update_record,
    with_default,
)
from immutable_ops.core.sequences import (
    append,
    concat,
    drop_first,
    drop_last,
    filter_items,
    insert_at,
    map_items,
    prepend,
    reduce_items,
    reduce_right,
    remove_at,
    remove_value,
    replace_at,
    reverse,
    sort,
    splice,
    split_first,
    split_last,
)

__version__ = "0.1.0"

__all__ = [
    # Sequences
    "append",
    "concat",
    "drop_first",
    "drop_last",
    "filter_items",
    "insert_at",
    "map_items",
    "prepend",
    "reduce_items",
    "reduce_right",
    "remove_at",
    "remove_value",
    "replace_at",
    "reverse",
    "sort",
    "splice",
    "split_first",
    "split_last",
    # Records
    "fields_of",
    "merge",
    "omit",
    "update_field",
    "update_record",
    "with_default",
    # Types
    "BoundaryPolicy",
    "Section",
    # Errors
    "EmptySequenceError",
    "ExampleFailedError",
    "ImmutableOpsError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "UnknownFieldError",
    "UnsupportedRecordError",
    "ValueNotFoundError",
]
