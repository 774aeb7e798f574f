"""Unified exception hierarchy for recordproxy.

All library exceptions inherit from RecordProxyException, so callers can
catch the base class or a specific subclass.

Categories:
- InvalidRecordError: the wrap target is not a mutable mapping
- UnknownFieldError: a field outside the record's declared set
- WriteRejectedError: a write handler refused an assignment
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class RecordProxyException(Exception):
    """Base exception for all recordproxy errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "RECORD_002").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Record Exceptions
# =============================================================================


class InvalidRecordError(RecordProxyException, TypeError):
    """The object handed to wrap() is not a mutable mapping."""

    def __init__(self, record: object) -> None:
        super().__init__(
            f"Cannot wrap {type(record).__name__!r}: expected a mutable mapping",
            code="RECORD_001",
            context={"type": type(record).__name__},
        )


class UnknownFieldError(RecordProxyException, AttributeError):
    """Field is not part of the wrapped record."""

    def __init__(self, field: str, fields: tuple[str, ...]) -> None:
        super().__init__(
            f"Record has no field {field!r} (known fields: {', '.join(map(str, fields))})",
            code="RECORD_002",
            context={"field": field, "fields": list(fields)},
        )
        self.field = field


class WriteRejectedError(RecordProxyException):
    """A write handler returned a falsy signal for an assignment."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            f"Write to field {field!r} was rejected",
            code="RECORD_003",
            context={"field": field, "value": value},
        )
        self.field = field
