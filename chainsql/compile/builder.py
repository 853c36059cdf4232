"""Fluent statement builder.

``QueryBuilder`` is the public, chainable surface.  It owns one
:class:`~chainsql.compile.state.QueryState`, validates every directly
supplied argument through
:class:`~chainsql.validate.validator.ArgumentValidator`, and delegates
rendering to the statement builders in :mod:`chainsql.compile.insert`.

Collaborators
-------------
QueryBuilder
  ├── ArgumentValidator       (validate/validator.py)
  ├── QueryState              (state.py)
  ├── InsertStatementBuilder  (insert.py)
  └── BatchExpander           (insert.py)

State lifecycle
---------------
Tables set with :meth:`QueryBuilder.from_` and columns set with
:meth:`QueryBuilder.set` persist across generation calls until
:meth:`QueryBuilder.reset_query` is called::

    qb = QueryBuilder()
    qb.from_("galaxies").set({"id": 3, "name": "Milky Way"})
    qb.insert()                 # uses both
    qb.insert("galaxies_copy")  # same columns, other table
    qb.reset_query()

A builder is not safe for concurrent use; give each logical operation its
own instance or serialise access.
"""

from __future__ import annotations

from typing import Any

import structlog

from chainsql.compile.base import SQLCompiler
from chainsql.compile.insert import BatchExpander, InsertStatementBuilder
from chainsql.compile.mysql import MySQLCompiler
from chainsql.compile.registry import CompilerFactory
from chainsql.compile.state import QueryState
from chainsql.errors import InvalidPayloadShape, MissingTableError
from chainsql.validate.validator import ArgumentValidator

logger = structlog.get_logger(__name__)


class QueryBuilder:
    """Accumulates clause fragments and renders INSERT statements.

    Args:
        compiler: Quoting capability used for identifiers and literals.
            Defaults to :class:`~chainsql.compile.mysql.MySQLCompiler`.
        validator: Optional argument validator; defaults to a fresh
            :class:`ArgumentValidator`.
    """

    def __init__(
        self,
        compiler: SQLCompiler | None = None,
        validator: ArgumentValidator | None = None,
    ) -> None:
        self._compiler = compiler or MySQLCompiler()
        self._validator = validator or ArgumentValidator()
        self._state = QueryState()
        self._insert = InsertStatementBuilder(self._compiler)
        self._batch = BatchExpander(self._insert)

    @classmethod
    def for_dialect(cls, name: str) -> QueryBuilder:
        """Return a builder using the compiler registered for ``name``.

        Raises:
            CompilationError: If no compiler is registered for ``name``.
        """
        return cls(CompilerFactory.create(name))

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def compiler(self) -> SQLCompiler:
        return self._compiler

    @property
    def table_refs(self) -> list[str]:
        """Quoted table identifiers currently held (a copy)."""
        return list(self._state.table_refs)

    @property
    def column_values(self) -> dict[str, Any]:
        """Column → value pairs currently held (a copy)."""
        return dict(self._state.column_values)

    def snapshot(self) -> QueryState:
        """Return an independent copy of the current query state."""
        return self._state.copy()

    # ------------------------------------------------------------------
    # Chainable setters
    # ------------------------------------------------------------------

    def from_(self, tables: Any) -> QueryBuilder:
        """Set the target table(s).

        Args:
            tables: A table name, a comma-separated string of names, or a
                list of names.  ``None``, ``False``, NaN and blank strings
                are accepted and change nothing.

        Raises:
            InvalidTableArgument: If ``tables`` cannot name a table.
        """
        names = self._validator.tables(tables, "from_")
        self._state.set_tables(self._compiler.quote_identifier(n) for n in names)
        return self

    def set(self, key: Any, value: Any = None) -> QueryBuilder:
        """Set column values for later INSERT calls.

        Args:
            key: A column name (paired with ``value``), a record mapping, or
                a list of records merged in order.  ``None`` and ``""`` change
                nothing.
            value: Column value when ``key`` is a column name.

        Raises:
            InvalidPayloadShape: If ``key`` is neither a column name nor a
                valid payload.
            InvalidFieldValue: If any value has no literal form.
        """
        if isinstance(key, str) and key.strip():
            column = key.strip()
            self._validator.field(column, value, "set")
            self._state.set_columns({column: value})
            return self
        if isinstance(key, str) and not key:
            return self
        if isinstance(key, str):
            raise InvalidPayloadShape("set", key, "Column name must not be blank.")
        payload = self._validator.payload(key, "set")
        for record in payload.records:
            self._state.set_columns(record)
        return self

    def reset_query(self) -> QueryBuilder:
        """Clear all tables and column values."""
        self._state.reset()
        logger.debug("query.reset")
        return self

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def insert(
        self,
        table: Any = None,
        data: Any = None,
        ignore: bool = False,
        suffix: Any = None,
    ) -> str:
        """Render an ``INSERT`` statement.

        A list of records is routed to the batch path and yields the same
        text as :meth:`insert_batch`.

        Args:
            table: Target table; falls back to the table set by ``from_()``.
            data: A record, a list of records, or ``None`` / ``""``.
            ignore: Emit ``INSERT IGNORE`` (dialect equivalent); only ``True``
                itself enables it.
            suffix: Raw trailing SQL appended after one space.

        Returns:
            The statement text.

        Raises:
            InvalidTableArgument: On an unusable ``table``.
            InvalidPayloadShape: On an unusable ``data``.
            InvalidFieldValue: On an unsupported value inside ``data``.
            InvalidSuffixArgument: If ``suffix`` is not a string.
            MissingTableError: If no table is available.
        """
        return self._generate("insert", table, data, ignore is True, suffix)

    def insert_ignore(self, table: Any = None, data: Any = None, suffix: Any = None) -> str:
        """Same as ``insert(table, data, True, suffix)``."""
        return self._generate("insert_ignore", table, data, True, suffix)

    def insert_batch(
        self,
        table: Any = None,
        data: Any = None,
        ignore: bool = False,
        suffix: Any = None,
    ) -> str:
        """Render one multi-row ``INSERT`` from a list of records.

        An empty list renders the single-row form, so ``insert_batch(t, [])``
        gives ``INSERT INTO t () VALUES ()`` (or the columns held by ``set()``).

        Raises:
            InvalidPayloadShape: If ``data`` is not a list of non-empty records.
        """
        return self._generate("insert_batch", table, data, ignore is True, suffix, batch_only=True)

    def _generate(
        self,
        method: str,
        table: Any,
        data: Any,
        ignore: bool,
        suffix: Any,
        batch_only: bool = False,
    ) -> str:
        # Every argument is validated before state is read or written.
        name = self._validator.table(table, method)
        payload = self._validator.payload(data, method)
        if batch_only and payload.kind != "multi_record":
            raise InvalidPayloadShape(method, data, "A list of records is required.")
        trailing = self._validator.suffix(suffix, method)

        if name is not None:
            target = self._compiler.quote_identifier(name)
        elif self._state.current_table is not None:
            target = self._state.current_table
        else:
            raise MissingTableError(method)

        if payload.kind == "multi_record" and payload.records:
            sql = self._batch.build(target, payload.records, ignore, trailing)
            rows = len(payload.records)
        else:
            record = dict(self._state.column_values)
            for supplied in payload.records:
                record.update(supplied)
            sql = self._insert.build(target, record, ignore, trailing)
            rows = 1

        if name is not None and not self._state.table_refs:
            self._state.set_table(target)

        logger.debug(
            "insert.compiled",
            method=method,
            table=target,
            rows=rows,
            ignore=ignore,
            dialect=self._compiler.dialect_name,
        )
        return sql
