"""SQLite dialect compiler."""
from __future__ import annotations

from chainsql.compile.base import SQLCompiler


class SQLiteCompiler(SQLCompiler):
    """Quotes and escapes for SQLite.

    Note: SQLite has no ``INSERT IGNORE``; the equivalent conflict clause is
    ``INSERT OR IGNORE``. Booleans are stored as ``1`` / ``0``.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    def quote_string(self, value: str) -> str:
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def boolean_literal(self, value: bool) -> str:
        return "1" if value else "0"

    def insert_verb(self, ignore: bool) -> str:
        return "INSERT OR IGNORE" if ignore else "INSERT"
