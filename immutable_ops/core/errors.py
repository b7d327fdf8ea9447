"""Error Hierarchy — typed, categorized exceptions for every immutable_ops failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Boundary/validation errors also subclass the matching builtin (IndexError, KeyError, ...)
    - to_response() produces a JSON-safe envelope (no datetimes, no Enums)

Design Decisions:
    - Single hierarchy with ImmutableOpsError base: callers can catch all library errors at once
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    BOUNDARY = "boundary"
    VALIDATION = "validation"
    VERIFICATION = "verification"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    index: int | None = None
    length: int | None = None
    key: str | None = None
    debug_info: dict[str, Any] | None = None


class ImmutableOpsError(Exception):
    """Base exception for all immutable_ops errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "index": self.context.index,
                    "length": self.context.length,
                    "key": self.context.key,
                },
            }
        }


# ─── Boundary Errors ────────────────────────────────────────────

class EmptySequenceError(ImmutableOpsError, IndexError):
    """Operation needs at least one item."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.length = 0
        super().__init__(
            f"{operation} on an empty sequence",
            "EMPTY_SEQUENCE", ErrorCategory.BOUNDARY,
            ErrorSeverity.ERROR, ctx,
        )


class IndexOutOfRangeError(ImmutableOpsError, IndexError):
    """Position or range falls outside the sequence."""
    def __init__(
        self, operation: str, index: int, length: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        ctx.index = index
        ctx.length = length
        super().__init__(
            f"{operation}: index {index} out of range for length {length}",
            "INDEX_OUT_OF_RANGE", ErrorCategory.BOUNDARY,
            ErrorSeverity.ERROR, ctx,
        )
        self.index = index
        self.length = length


class ValueNotFoundError(ImmutableOpsError, ValueError):
    """Value to remove is not in the sequence."""
    def __init__(self, operation: str, value: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation}: {value!r} not in sequence",
            "VALUE_NOT_FOUND", ErrorCategory.BOUNDARY,
            ErrorSeverity.ERROR, ctx,
        )
        self.value = value


# ─── Validation Errors ──────────────────────────────────────────

class InvalidArgumentError(ImmutableOpsError, ValueError):
    """Argument value is not acceptable for the operation."""
    def __init__(
        self, operation: str, argument: str, reason: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation}: invalid {argument} ({reason})",
            "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.argument = argument


class UnknownFieldError(ImmutableOpsError, KeyError):
    """Record type has no field with this name."""
    def __init__(self, field: str, record_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.key = field
        super().__init__(
            f"{record_type} has no field '{field}'",
            "UNKNOWN_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field
        self.record_type = record_type


class UnsupportedRecordError(ImmutableOpsError, TypeError):
    """Value is not a record type the operation can copy."""
    def __init__(self, operation: str, record_type: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation} does not support records of type {record_type}",
            "UNSUPPORTED_RECORD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.record_type = record_type


# ─── Verification Errors ────────────────────────────────────────

class ExampleFailedError(ImmutableOpsError):
    """One or more cheatsheet examples did not hold."""
    def __init__(self, failed: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"failed": list(failed)}
        super().__init__(
            f"{len(failed)} cheatsheet example(s) failed: {', '.join(failed)}",
            "EXAMPLE_FAILED", ErrorCategory.VERIFICATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.failed = list(failed)
