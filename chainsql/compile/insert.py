"""INSERT statement rendering.

Classes
-------
InsertStatementBuilder — ``INSERT [IGNORE] INTO <t> (<cols>) VALUES (<vals>)``
BatchExpander          — one statement, one value group per record

``compose_suffix`` appends a caller-supplied trailing fragment verbatim.

Both builders receive already-validated input: a quoted table identifier and
records whose values all have a literal form.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from chainsql.compile.base import SQLCompiler
from chainsql.errors import CompilationError


def compose_suffix(sql: str, suffix: str | None) -> str:
    """Append ``suffix`` to ``sql`` after exactly one space.

    The fragment is neither validated nor escaped; the caller owns its
    correctness (typically an ``ON DUPLICATE KEY UPDATE …`` clause).
    """
    if not suffix:
        return sql
    return f"{sql} {suffix}"


class InsertStatementBuilder:
    """Builds a single-row ``INSERT`` statement."""

    def __init__(self, compiler: SQLCompiler) -> None:
        self._compiler = compiler

    def head(self, table: str, ignore: bool) -> str:
        return f"{self._compiler.insert_verb(ignore)} INTO {table}"

    def columns(self, names: Sequence[str]) -> str:
        quote = self._compiler.quote_identifier
        return f"({', '.join(quote(name) for name in names)})"

    def values(self, values: Sequence[Any]) -> str:
        literal = self._compiler.quote_literal
        return f"({', '.join(literal(value) for value in values)})"

    def build(
        self,
        table: str,
        record: Mapping[str, Any],
        ignore: bool = False,
        suffix: str | None = None,
    ) -> str:
        sql = (
            f"{self.head(table, ignore)} {self.columns(list(record))} "
            f"VALUES {self.values(list(record.values()))}"
        )
        return compose_suffix(sql, suffix)


class BatchExpander:
    """Builds a multi-row ``INSERT`` statement from a list of records.

    The column list is taken from the keys of the first record.  Each record
    then contributes its own values, in its own key order, as one
    parenthesised group.  Records are not cross-checked: a record whose keys
    differ from the first one yields a value group that does not line up
    with the column list.
    """

    def __init__(self, statement: InsertStatementBuilder) -> None:
        self._statement = statement

    def build(
        self,
        table: str,
        records: Sequence[Mapping[str, Any]],
        ignore: bool = False,
        suffix: str | None = None,
    ) -> str:
        if not records:
            raise CompilationError("Batch insert needs at least one record.", clause="VALUES")
        columns = self._statement.columns(list(records[0]))
        groups = ", ".join(self._statement.values(list(r.values())) for r in records)
        sql = f"{self._statement.head(table, ignore)} {columns} VALUES {groups}"
        return compose_suffix(sql, suffix)
