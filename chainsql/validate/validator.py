"""Argument validation for builder entry points.

``ArgumentValidator`` turns the classification outcomes of
:mod:`chainsql.compile.classify` into either a normalised value or a typed
exception.  Builders call it for every directly supplied argument *before*
touching :class:`~chainsql.compile.state.QueryState`, so a raised error never
leaves state half-updated.

Normalisation rules
-------------------
- table:   ``present`` → stripped name; ``absent`` → ``None``.
- payload: ``absent`` → ``PayloadArg("absent")``; records are field-checked.
- suffix:  ``None`` / whitespace-only → ``None``; other strings unchanged.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from chainsql.compile.classify import (
    PayloadArg,
    classify_field,
    classify_payload,
    classify_table,
)
from chainsql.errors import (
    InvalidFieldValue,
    InvalidPayloadShape,
    InvalidSuffixArgument,
    InvalidTableArgument,
)


class ArgumentValidator:
    """Validates and normalises builder arguments per role.

    The validator is stateless; one instance is shared by a builder for its
    whole lifetime.
    """

    def table(self, value: Any, method: str) -> str | None:
        """Return the table name, or ``None`` when no table was given.

        Raises:
            InvalidTableArgument: If ``value`` cannot name a table.
        """
        result = classify_table(value)
        if result.kind == "invalid":
            raise InvalidTableArgument(method, value)
        return result.name

    def tables(self, value: Any, method: str) -> list[str]:
        """Validate the argument of a table-setting call.

        Accepts a single name, a comma-separated string of names, or a list
        of names.  Absent values yield an empty list.

        Raises:
            InvalidTableArgument: If any entry cannot name a table.
        """
        if isinstance(value, (list, tuple)):
            names: list[str] = []
            for item in value:
                name = self.table(item, method)
                if name is None:
                    raise InvalidTableArgument(method, value)
                names.append(name)
            return names
        name = self.table(value, method)
        if name is None:
            return []
        return [part.strip() for part in name.split(",") if part.strip()]

    def payload(self, value: Any, method: str) -> PayloadArg:
        """Classify the data argument and check every field it carries.

        Raises:
            InvalidPayloadShape: If ``value`` is not a record, a list of
                non-empty records, or an absent value.
            InvalidFieldValue: If any record holds an unsupported value.
        """
        result = classify_payload(value)
        if result.kind == "invalid":
            raise InvalidPayloadShape(method, value, result.reason or None)
        for record in result.records:
            self.record(record, method)
        return result

    def record(self, record: Mapping[str, Any], method: str) -> None:
        for column, field_value in record.items():
            self.field(column, field_value, method)

    def field(self, column: str, value: Any, method: str) -> None:
        """Raises InvalidFieldValue when ``value`` has no SQL literal form."""
        if classify_field(value).kind == "invalid":
            raise InvalidFieldValue(method, column, value)

    def suffix(self, value: Any, method: str) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidSuffixArgument(method, value)
        return value if value.strip() else None
