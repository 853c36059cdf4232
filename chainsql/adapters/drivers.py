"""DB-API driver lookup: connect function and base error class per driver."""
from __future__ import annotations

import sqlite3
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import pymysql

from chainsql.errors import AdapterConfigError


@dataclass(frozen=True)
class DriverSpec:
    """How to open a connection for one driver and which errors it raises.

    Attributes:
        name: Driver name, also the dialect name of its compiler.
        connect: DB-API ``connect`` callable.
        error: Base exception class of the driver.
    """

    name: str
    connect: Callable[..., Any]
    error: type[Exception]


_DRIVERS: dict[str, DriverSpec] = {
    "mysql": DriverSpec("mysql", pymysql.connect, pymysql.Error),
    "sqlite": DriverSpec("sqlite", sqlite3.connect, sqlite3.Error),
}


def get_driver(name: str) -> DriverSpec:
    """Return the :class:`DriverSpec` for ``name``.

    Raises:
        AdapterConfigError: If the driver is unknown.
    """
    spec = _DRIVERS.get(name)
    if spec is None:
        raise AdapterConfigError(
            f"Unsupported driver: '{name}'. Supported drivers: {sorted(_DRIVERS)}.",
            missing=["driver"],
        )
    return spec
