"""Integration tests: build INSERT statements → execute against real SQLite.

Covers single-row, batch, INSERT OR IGNORE, NULL / boolean / float values,
string escaping, and both connection strategies (single and pooled).
"""
from __future__ import annotations

from pathlib import Path

import pytest

from chainsql import ConnectionSettings, create_adapter
from chainsql.adapters import PoolAdapter, QueryResult, SingleAdapter
from chainsql.errors import ExecutionError
from tests.fixtures import GALAXIES_DDL, GALAXY, galaxy_records


@pytest.fixture()
def adapter() -> SingleAdapter:
    single = create_adapter(ConnectionSettings(driver="sqlite"))
    single.connect()
    single.connection.executescript(GALAXIES_DDL)
    yield single
    single.disconnect()


@pytest.fixture()
def pool(tmp_path: Path) -> PoolAdapter:
    settings = ConnectionSettings(
        driver="sqlite",
        connection_type="pool",
        database=str(tmp_path / "galaxies.db"),
        pool_size=2,
        debug=True,
    )
    pooled = create_adapter(settings)
    pooled.connect()
    conn = pooled.acquire()
    conn.connection.executescript(GALAXIES_DDL)
    conn.release()
    yield pooled
    pooled.disconnect()


def _names(adapter) -> list[str]:
    return [row[0] for row in adapter.execute("SELECT name FROM galaxies ORDER BY id").rows]


def test_single_row_insert(adapter: SingleAdapter):
    sql = adapter.builder().insert("galaxies", GALAXY)
    result = adapter.execute(sql)
    assert result.affected_rows == 1
    assert result.insert_id == 3
    assert _names(adapter) == ["Milky Way"]


def test_batch_insert(adapter: SingleAdapter):
    sql = adapter.builder().insert("galaxies", galaxy_records())
    assert adapter.execute(sql).affected_rows == 2
    assert _names(adapter) == ["Milky Way", "Andromeda"]


def test_insert_or_ignore_skips_duplicates(adapter: SingleAdapter):
    qb = adapter.builder()
    adapter.execute(qb.insert("galaxies", GALAXY))
    result = adapter.execute(qb.insert_ignore("galaxies", galaxy_records()))
    assert result.affected_rows == 1
    assert _names(adapter) == ["Milky Way", "Andromeda"]


def test_duplicate_without_ignore_raises(adapter: SingleAdapter):
    qb = adapter.builder()
    sql = qb.insert("galaxies", GALAXY)
    adapter.execute(sql)
    with pytest.raises(ExecutionError) as exc_info:
        adapter.execute(sql)
    assert exc_info.value.sql == sql


def test_upsert_suffix(adapter: SingleAdapter):
    qb = adapter.builder()
    adapter.execute(qb.insert("galaxies", GALAXY))
    sql = qb.insert(
        "galaxies",
        {"id": 3, "name": "Milky Way", "type": "barred spiral"},
        suffix="ON CONFLICT(id) DO UPDATE SET type = excluded.type",
    )
    adapter.execute(sql)
    rows = adapter.execute("SELECT type FROM galaxies WHERE id = 3").rows
    assert rows == [("barred spiral",)]


def test_literal_types_round_trip(adapter: SingleAdapter):
    qb = adapter.builder()
    sql = qb.insert(
        "galaxies",
        {"id": 7, "name": "Bode's Galaxy", "type": None, "visible": True, "distance": 11.8},
    )
    adapter.execute(sql)
    rows = adapter.execute("SELECT name, type, visible, distance FROM galaxies").rows
    assert rows == [("Bode's Galaxy", None, 1, 11.8)]


def test_builder_state_reuse(adapter: SingleAdapter):
    qb = adapter.builder().from_("galaxies")
    for record in galaxy_records():
        adapter.execute(qb.set(record).insert())
    qb.reset_query()
    assert _names(adapter) == ["Milky Way", "Andromeda"]


def test_execute_callback_receives_result(adapter: SingleAdapter):
    seen: list[QueryResult] = []
    result = adapter.execute(adapter.builder().insert("galaxies", GALAXY), callback=seen.append)
    assert seen == [result]


def test_pool_executes_and_returns_connections(pool: PoolAdapter):
    qb = pool.builder()
    pool.execute(qb.insert("galaxies", galaxy_records()))
    assert _names(pool) == ["Milky Way", "Andromeda"]
    assert pool.pool.checkedout() == 0


def test_pool_acquire_release(pool: PoolAdapter):
    conn = pool.acquire()
    assert conn.pooled
    conn.execute(conn.builder().insert("galaxies", GALAXY))
    assert pool.pool.checkedout() == 1
    conn.release()
    assert pool.pool.checkedout() == 0
    assert _names(pool) == ["Milky Way"]
