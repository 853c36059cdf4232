"""Unit tests for the dialect compilers and CompilerFactory."""

from __future__ import annotations

from decimal import Decimal

import pytest

from chainsql.compile.base import SQLCompiler
from chainsql.compile.insert import BatchExpander, InsertStatementBuilder, compose_suffix
from chainsql.compile.mysql import MySQLCompiler
from chainsql.compile.registry import CompilerFactory
from chainsql.compile.sqlite import SQLiteCompiler
from chainsql.errors import CompilationError


def _my() -> MySQLCompiler:
    return MySQLCompiler()


def _sq() -> SQLiteCompiler:
    return SQLiteCompiler()


def test_mysql_identifier_backticks():
    assert _my().quote_identifier("galaxies") == "`galaxies`"
    assert _my().quote_identifier("odd`name") == "`odd``name`"
    assert _my().quote_identifier("space.galaxies") == "`space`.`galaxies`"


def test_sqlite_identifier_double_quotes():
    assert _sq().quote_identifier("galaxies") == '"galaxies"'
    assert _sq().quote_identifier('odd"name') == '"odd""name"'


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, "3"),
        (-2, "-2"),
        (2.5, "2.5"),
        (4.0, "4"),
        (Decimal("9.99"), "9.99"),
        (Decimal("1.00000000000000000001E+30"), "1000000000000000000010000000000"),
        (Decimal("1E-3"), "0.001"),
        (True, "TRUE"),
        (False, "FALSE"),
        (None, "NULL"),
        ("Milky Way", "'Milky Way'"),
        ("it's", "'it\\'s'"),
        ("back\\slash", "'back\\\\slash'"),
        ("line\nbreak", "'line\\nbreak'"),
    ],
)
def test_mysql_literals(value, expected):
    assert _my().quote_literal(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "1"),
        (False, "0"),
        ("it's", "'it''s'"),
        ("back\\slash", "'back\\slash'"),
    ],
)
def test_sqlite_literals(value, expected):
    assert _sq().quote_literal(value) == expected


@pytest.mark.parametrize("value", [float("inf"), float("nan"), Decimal("Infinity"), [1], object()])
def test_literal_without_sql_form_raises(value):
    with pytest.raises(CompilationError):
        _my().quote_literal(value)


def test_insert_verbs():
    assert _my().insert_verb(True) == "INSERT IGNORE"
    assert _sq().insert_verb(True) == "INSERT OR IGNORE"
    assert _sq().insert_verb(False) == "INSERT"


def test_statement_builder_empty_record():
    builder = InsertStatementBuilder(_my())
    assert builder.build("`t`", {}) == "INSERT INTO `t` () VALUES ()"


def test_batch_expander_requires_records():
    with pytest.raises(CompilationError):
        BatchExpander(InsertStatementBuilder(_my())).build("`t`", [])


def test_compose_suffix():
    assert compose_suffix("INSERT", None) == "INSERT"
    assert compose_suffix("INSERT", "") == "INSERT"
    assert compose_suffix("INSERT", "ON CONFLICT DO NOTHING") == "INSERT ON CONFLICT DO NOTHING"
    assert compose_suffix("INSERT", " RAW") == "INSERT  RAW"


def test_compiler_factory_registered_dialects():
    assert {"mysql", "sqlite"} <= set(CompilerFactory.registered_dialects())
    assert isinstance(CompilerFactory.create("mysql"), MySQLCompiler)


def test_compiler_factory_register_decorator():
    @CompilerFactory.register("test_dialect")
    class _TestCompiler(SQLiteCompiler):
        @property
        def dialect_name(self) -> str:
            return "test_dialect"

    try:
        assert CompilerFactory.create("test_dialect").dialect_name == "test_dialect"
    finally:
        CompilerFactory._compilers.pop("test_dialect", None)


def test_compiler_factory_unknown_raises():
    with pytest.raises(CompilationError, match="Unsupported dialect"):
        CompilerFactory.create("oracle")
