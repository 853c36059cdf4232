"""MySQL dialect compiler."""

from __future__ import annotations

from pymysql.converters import escape_string

from chainsql.compile.base import SQLCompiler


class MySQLCompiler(SQLCompiler):
    """Quotes and escapes for MySQL / MariaDB.

    Identifiers are quoted with backticks (`` ` ``); a dot-qualified name such
    as ``db.table`` is quoted per part. String literals are escaped with
    PyMySQL's ``escape_string`` so the rules match the driver that executes
    them.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def quote_identifier(self, name: str) -> str:
        parts = name.split(".")
        return ".".join(f"`{part.replace('`', '``')}`" for part in parts)

    def quote_string(self, value: str) -> str:
        return f"'{escape_string(value)}'"

    def boolean_literal(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"
