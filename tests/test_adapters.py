"""Unit tests for ConnectionSettings and create_adapter."""
from __future__ import annotations

import pytest

from chainsql.adapters import Adapter, PoolAdapter, SingleAdapter, create_adapter
from chainsql.compile.mysql import MySQLCompiler
from chainsql.errors import AdapterConfigError, AdapterError
from chainsql.schema.settings import ConnectionSettings


def test_settings_defaults():
    settings = ConnectionSettings(user="app")
    assert settings.driver == "mysql"
    assert settings.connection_type == "single"
    assert settings.host == "localhost"


def test_mysql_connect_kwargs_merge_options():
    settings = ConnectionSettings(
        user="app",
        password="secret",
        database="astronomy",
        port=3307,
        options={"charset": "utf8mb4"},
    )
    assert settings.to_connect_kwargs() == {
        "host": "localhost",
        "user": "app",
        "password": "secret",
        "database": "astronomy",
        "port": 3307,
        "charset": "utf8mb4",
    }


def test_sqlite_connect_kwargs_default_to_memory():
    settings = ConnectionSettings(driver="sqlite")
    assert settings.to_connect_kwargs() == {"database": ":memory:"}


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(AdapterConfigError):
        ConnectionSettings.from_mapping({"user": "app", "qb_debug": True})


def test_from_mapping_rejects_empty():
    with pytest.raises(AdapterConfigError, match="No connection information"):
        ConnectionSettings.from_mapping({})


def test_from_mapping_rejects_bad_enum():
    with pytest.raises(AdapterConfigError):
        ConnectionSettings.from_mapping({"user": "app", "connection_type": "sharded"})


def test_create_adapter_single_from_mapping():
    adapter = create_adapter({"driver": "sqlite"})
    assert isinstance(adapter, SingleAdapter)
    assert isinstance(adapter, Adapter)


def test_create_adapter_pool():
    adapter = create_adapter(ConnectionSettings(driver="sqlite", connection_type="pool"))
    assert isinstance(adapter, PoolAdapter)
    assert isinstance(adapter, Adapter)


def test_create_adapter_mysql_requires_user_key():
    with pytest.raises(AdapterConfigError) as exc_info:
        create_adapter({"host": "db.internal"})
    assert exc_info.value.missing == ["user"]


def test_create_adapter_mysql_user_may_be_none():
    adapter = create_adapter({"user": None})
    assert isinstance(adapter, SingleAdapter)
    assert isinstance(adapter.builder().compiler, MySQLCompiler)


def test_create_adapter_cluster_not_supported():
    with pytest.raises(AdapterConfigError) as exc_info:
        create_adapter({"driver": "sqlite", "connection_type": "cluster"})
    assert exc_info.value.missing == ["connection_type"]


def test_single_adapter_release_requires_pool():
    adapter = create_adapter({"driver": "sqlite"})
    with pytest.raises(AdapterError):
        adapter.release()


def test_pool_adapter_release_is_not_allowed():
    adapter = create_adapter({"driver": "sqlite", "connection_type": "pool"})
    with pytest.raises(AdapterError):
        adapter.release()


def test_connection_before_connect_raises():
    adapter = create_adapter({"driver": "sqlite"})
    with pytest.raises(AdapterError, match="Not connected"):
        _ = adapter.connection


def test_adapter_escape_delegates_to_compiler():
    adapter = create_adapter({"user": "app"})
    assert adapter.escape("it's") == "'it\\'s'"
    assert adapter.escape_id("galaxies") == "`galaxies`"
