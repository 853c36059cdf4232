"""Per-builder query state.

``QueryState`` accumulates the table references and column/value pairs
contributed by earlier builder calls.  It trusts its inputs: every value
reaching it has already been accepted by
:class:`~chainsql.validate.validator.ArgumentValidator`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class QueryState:
    """Mutable accumulator owned by exactly one builder.

    Attributes:
        table_refs: Quoted table identifiers, in the order they were set.
        column_values: Column name → scalar value, in first-seen order.
    """

    table_refs: list[str] = field(default_factory=list)
    column_values: dict[str, Any] = field(default_factory=dict)

    @property
    def current_table(self) -> str | None:
        """The most recently established table reference, if any."""
        return self.table_refs[-1] if self.table_refs else None

    def set_table(self, quoted: str) -> None:
        # Re-setting a table moves it to the end: the last entry is the current one.
        if quoted in self.table_refs:
            self.table_refs.remove(quoted)
        self.table_refs.append(quoted)

    def set_tables(self, quoted: Iterable[str]) -> None:
        for name in quoted:
            self.set_table(name)

    def set_columns(self, record: Mapping[str, Any]) -> None:
        # dict.update keeps the original position of keys that already exist.
        self.column_values.update(record)

    def reset(self) -> None:
        self.table_refs.clear()
        self.column_values.clear()

    def copy(self) -> QueryState:
        return QueryState(list(self.table_refs), dict(self.column_values))
