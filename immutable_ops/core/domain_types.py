"""Domain Types — enums and aliases shared by the pure operations.

Invariants:
    - BoundaryPolicy is the only switch for out-of-range behaviour — no booleans, no raw strings
    - Section mirrors the two cheatsheet sections (Arrays, Objects)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON and to env vars without custom encoders
    - Aliases over Protocols for callables: the operations accept any callable
"""

from enum import Enum
from typing import Any, Callable, TypeVar


# ─── Type Variables ──────────────────────────────────────────────

T = TypeVar("T")
U = TypeVar("U")


# ─── Callable Aliases ────────────────────────────────────────────

KeyFunc = Callable[[Any], Any]
Comparator = Callable[[Any, Any], int]          # <0, 0, >0
Predicate = Callable[[Any], bool]
Reducer = Callable[[Any, Any], Any]             # (accumulator, item) -> accumulator


# ─── Enums ───────────────────────────────────────────────────────

class BoundaryPolicy(str, Enum):
    """What an operation does when an index, count or value falls outside the sequence."""
    RAISE = "raise"
    NOOP = "noop"
    CLAMP = "clamp"


class Section(str, Enum):
    """Cheatsheet sections — one per container family."""
    ARRAYS = "arrays"
    OBJECTS = "objects"

    @property
    def heading(self) -> str:
        return self.value.capitalize()
