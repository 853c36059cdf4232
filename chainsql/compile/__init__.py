"""chainsql compilation layer: builder state → literal SQL text."""
from chainsql.compile.base import SQLCompiler
from chainsql.compile.builder import QueryBuilder
from chainsql.compile.insert import BatchExpander, InsertStatementBuilder
from chainsql.compile.mysql import MySQLCompiler
from chainsql.compile.sqlite import SQLiteCompiler
from chainsql.compile.state import QueryState

__all__ = [
    "SQLCompiler",
    "QueryBuilder",
    "QueryState",
    "InsertStatementBuilder",
    "BatchExpander",
    "MySQLCompiler",
    "SQLiteCompiler",
]
