"""Custom exception hierarchy for chainsql.

All public errors inherit from ChainSQLError so callers can catch the base
class for any chainsql-specific failure.

Builder errors are raised synchronously by the fluent builder *before* any
query state is mutated, so a caller may correct the offending argument and
retry without calling ``reset_query()`` first.
"""
from __future__ import annotations

from typing import Any


class ChainSQLError(Exception):
    """Base exception for all chainsql errors."""


class BuilderError(ChainSQLError):
    """Raised when a builder call receives an argument it cannot accept.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. INVALID_TABLE).
        details: Extra context identifying the argument role and value.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for logging or API surfaces."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class InvalidTableArgument(BuilderError):
    """Raised when the table argument is not a string or an absent value."""

    def __init__(self, method: str, value: Any) -> None:
        super().__init__(
            f"{method}(): table must be a string, got {type(value).__name__} {value!r}.",
            code="INVALID_TABLE",
            details={"method": method, "value": value},
        )
        self.value = value


class InvalidPayloadShape(BuilderError):
    """Raised when the data argument is neither a record nor a list of records."""

    def __init__(self, method: str, value: Any, reason: str | None = None) -> None:
        message = (
            f"{method}(): data must be a mapping or a list of non-empty mappings, "
            f"got {type(value).__name__} {value!r}."
        )
        if reason:
            message = f"{message} {reason}"
        super().__init__(
            message,
            code="INVALID_PAYLOAD",
            details={"method": method, "value": value, "reason": reason or ""},
        )
        self.value = value


class InvalidFieldValue(BuilderError):
    """Raised when a record holds a value that cannot be rendered as a literal."""

    def __init__(self, method: str, column: str, value: Any) -> None:
        super().__init__(
            f"{method}(): unsupported value for column '{column}': "
            f"{type(value).__name__} {value!r}.",
            code="INVALID_FIELD",
            details={"method": method, "column": column, "value": value},
        )
        self.column = column
        self.value = value


class InvalidSuffixArgument(BuilderError):
    """Raised when the raw trailing fragment is not a string."""

    def __init__(self, method: str, value: Any) -> None:
        super().__init__(
            f"{method}(): suffix must be a string, got {type(value).__name__}.",
            code="INVALID_SUFFIX",
            details={"method": method, "value": value},
        )
        self.value = value


class MissingTableError(BuilderError):
    """Raised when no table was supplied and none is held in query state."""

    def __init__(self, method: str) -> None:
        super().__init__(
            f"{method}(): no table supplied and none set with from_().",
            code="MISSING_TABLE",
            details={"method": method},
        )


class CompilationError(ChainSQLError):
    """Raised when SQL generation fails for an unexpected reason.

    Args:
        message: Human-readable description.
        clause: The statement clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class AdapterError(ChainSQLError):
    """Raised for misuse of a connection adapter (e.g. releasing a non-pooled one)."""


class AdapterConfigError(AdapterError):
    """Raised when ConnectionSettings cannot be turned into an adapter.

    Detected at :func:`~chainsql.adapters.factory.create_adapter` time, before
    any connection is attempted.

    Args:
        message: Human-readable description.
        missing: Setting name(s) that must be supplied.
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class ExecutionError(AdapterError):
    """Raised when the driver rejects a statement.

    Args:
        message: Human-readable description.
        sql: The statement that failed.
    """

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql
