"""Pydantic model for the connection settings handed to ``create_adapter``.

Settings are always an explicit value: nothing is read from the environment
or from module-level defaults.  Unknown top-level keys are rejected;
driver-specific keyword arguments go in ``options`` and are merged into the
driver's connect call::

    from chainsql import ConnectionSettings, create_adapter

    settings = ConnectionSettings(
        driver="mysql",
        connection_type="pool",
        host="db.internal",
        user="app",
        password="secret",
        database="astronomy",
        options={"charset": "utf8mb4"},
    )
    adapter = create_adapter(settings)
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from chainsql.errors import AdapterConfigError

#: Drivers with a registered compiler and connect function.
DriverName = Literal["mysql", "sqlite"]

#: Connection strategies understood by ``create_adapter``.
ConnectionType = Literal["single", "pool", "cluster"]


class ConnectionSettings(BaseModel):
    """Connection configuration for one adapter.

    Attributes:
        driver: Backend driver (``'mysql'`` or ``'sqlite'``).
        connection_type: ``'single'``, ``'pool'`` or ``'cluster'``.
        host: Server host (MySQL only).
        user: Login user.  Must be supplied for MySQL, but may be ``None``.
        password: Login password.
        database: Database (schema) name; for SQLite the file path.
        port: Server port (MySQL only).
        pool_size: Number of pooled connections kept open.
        debug: Log driver activity and health-check new pools.
        options: Extra driver keyword arguments.
    """

    model_config = ConfigDict(extra="forbid")

    driver: DriverName = "mysql"
    connection_type: ConnectionType = "single"
    host: str = "localhost"
    user: str | None = None
    password: str | None = None
    database: str | None = None
    port: int | None = Field(default=None, gt=0)
    pool_size: int = Field(default=5, ge=1)
    debug: bool = False
    options: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConnectionSettings:
        """Build settings from a plain mapping.

        Raises:
            AdapterConfigError: If the mapping is empty or fails validation.
        """
        if not data:
            raise AdapterConfigError("No connection information provided.")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise AdapterConfigError(f"Invalid connection settings: {exc}") from exc

    def to_connect_kwargs(self) -> dict[str, Any]:
        """Map the settings onto the driver's connect() keyword arguments."""
        if self.driver == "sqlite":
            kwargs: dict[str, Any] = {"database": self.database or ":memory:"}
        else:
            kwargs = {"host": self.host, "user": self.user, "password": self.password}
            if self.database is not None:
                kwargs["database"] = self.database
            if self.port is not None:
                kwargs["port"] = self.port
        kwargs.update(self.options)
        return kwargs
