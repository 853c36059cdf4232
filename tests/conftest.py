"""Shared pytest fixtures for chainsql unit and integration tests."""
from __future__ import annotations

import pytest

from chainsql.compile.builder import QueryBuilder
from chainsql.compile.mysql import MySQLCompiler
from chainsql.compile.sqlite import SQLiteCompiler


@pytest.fixture()
def qb() -> QueryBuilder:
    """A fresh MySQL-quoting builder per test."""
    return QueryBuilder(MySQLCompiler())


@pytest.fixture()
def sqlite_qb() -> QueryBuilder:
    return QueryBuilder(SQLiteCompiler())
