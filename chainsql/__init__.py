"""chainsql – fluent INSERT statement builder.

Chain calls to collect a target table and column values, then render a
literal SQL string::

    from chainsql import QueryBuilder

    qb = QueryBuilder()
    qb.insert("galaxies", {"id": 3, "name": "Milky Way", "type": "spiral"})
    # INSERT INTO `galaxies` (`id`, `name`, `type`) VALUES (3, 'Milky Way', 'spiral')

Public API
----------
``QueryBuilder``
    The fluent builder (``from_``, ``set``, ``insert``, ``insert_ignore``,
    ``insert_batch``, ``reset_query``).

``create_adapter``
    Build a single-connection or pooled adapter from ``ConnectionSettings``
    to execute the generated statements.

Extensibility
-------------
New quoting dialects can be registered via::

    from chainsql.compile.registry import CompilerFactory

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...

After registration ``QueryBuilder.for_dialect("mariadb")`` picks it up.
"""

from __future__ import annotations

from chainsql.adapters import (
    Adapter,
    PoolAdapter,
    QueryResult,
    SingleAdapter,
    create_adapter,
)
from chainsql.compile.base import SQLCompiler
from chainsql.compile.builder import QueryBuilder
from chainsql.compile.mysql import MySQLCompiler
from chainsql.compile.registry import CompilerFactory
from chainsql.compile.sqlite import SQLiteCompiler
from chainsql.compile.state import QueryState
from chainsql.errors import (
    AdapterConfigError,
    AdapterError,
    BuilderError,
    ChainSQLError,
    CompilationError,
    ExecutionError,
    InvalidFieldValue,
    InvalidPayloadShape,
    InvalidSuffixArgument,
    InvalidTableArgument,
    MissingTableError,
)
from chainsql.schema.settings import ConnectionSettings

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class("mysql", MySQLCompiler)
CompilerFactory.register_class("sqlite", SQLiteCompiler)

__all__ = [
    # Builder
    "QueryBuilder",
    "QueryState",
    # Quoting
    "SQLCompiler",
    "MySQLCompiler",
    "SQLiteCompiler",
    "CompilerFactory",
    # Execution
    "Adapter",
    "ConnectionSettings",
    "PoolAdapter",
    "QueryResult",
    "SingleAdapter",
    "create_adapter",
    # Errors
    "ChainSQLError",
    "BuilderError",
    "InvalidTableArgument",
    "InvalidPayloadShape",
    "InvalidFieldValue",
    "InvalidSuffixArgument",
    "MissingTableError",
    "CompilationError",
    "AdapterError",
    "AdapterConfigError",
    "ExecutionError",
]
