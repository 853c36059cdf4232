"""Single-connection adapter."""
from __future__ import annotations

from typing import Any

import structlog

from chainsql.adapters.drivers import DriverSpec, get_driver
from chainsql.adapters.protocol import QueryResult, ResultCallback
from chainsql.compile.builder import QueryBuilder
from chainsql.compile.registry import CompilerFactory
from chainsql.errors import AdapterError, ExecutionError
from chainsql.schema.settings import ConnectionSettings

logger = structlog.get_logger(__name__)


class SingleAdapter:
    """Executes statements over one DB-API connection.

    The connection is opened lazily by :meth:`connect` (or by the first
    :meth:`execute`).  When created by :class:`~chainsql.adapters.pool.PoolAdapter`
    the adapter wraps a pooled connection, and :meth:`release` hands it back.

    Args:
        settings: Connection settings.
        driver: Driver spec; resolved from ``settings.driver`` when omitted.
        pooled_connection: A connection checked out of a pool.
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        driver: DriverSpec | None = None,
        pooled_connection: Any = None,
    ) -> None:
        self.settings = settings
        self._driver = driver or get_driver(settings.driver)
        self._compiler = CompilerFactory.create(self._driver.name)
        self._connection = pooled_connection
        self._pooled = pooled_connection is not None

    @property
    def pooled(self) -> bool:
        return self._pooled

    @property
    def connection(self) -> Any:
        if self._connection is None:
            raise AdapterError("Not connected. Call connect() first.")
        return self._connection

    def builder(self) -> QueryBuilder:
        """Return a fresh builder that quotes for this adapter's driver."""
        return QueryBuilder(self._compiler)

    def connect(self) -> None:
        if self._connection is not None:
            return
        try:
            self._connection = self._driver.connect(**self.settings.to_connect_kwargs())
        except self._driver.error as exc:
            raise AdapterError(f"Could not connect to {self._driver.name}: {exc}") from exc
        logger.info("connection.opened", driver=self._driver.name, host=self.settings.host)

    def execute(
        self,
        sql: str,
        params: Any = None,
        callback: ResultCallback | None = None,
    ) -> QueryResult:
        """Run ``sql`` exactly as given and commit.

        Args:
            sql: Statement text, typically produced by :class:`QueryBuilder`.
            params: Optional driver parameters.
            callback: Called with the result before it is returned.

        Raises:
            ExecutionError: If the driver rejects the statement.
        """
        self.connect()
        cursor = self.connection.cursor()
        try:
            if params is None:
                cursor.execute(sql)
            else:
                cursor.execute(sql, params)
            rows = list(cursor.fetchall()) if cursor.description else []
            result = QueryResult(
                rows=rows,
                affected_rows=cursor.rowcount,
                insert_id=cursor.lastrowid or None,
            )
            self.connection.commit()
        except self._driver.error as exc:
            raise ExecutionError(f"Statement failed: {exc}", sql=sql) from exc
        finally:
            cursor.close()

        if self.settings.debug:
            logger.debug("statement.executed", sql=sql, affected_rows=result.affected_rows)
        if callback is not None:
            callback(result)
        return result

    def escape(self, value: Any) -> str:
        return self._compiler.quote_literal(value)

    def escape_id(self, name: str) -> str:
        return self._compiler.quote_identifier(name)

    def disconnect(self) -> None:
        if self._connection is None:
            return
        self._connection.close()
        self._connection = None
        logger.info("connection.closed", driver=self._driver.name, pooled=self._pooled)

    def release(self) -> None:
        """Return a pooled connection to its pool.

        Raises:
            AdapterError: If this adapter does not hold a pooled connection.
        """
        if not self._pooled:
            raise AdapterError("Cannot release a connection that did not come from a pool.")
        if self._connection is not None:
            self._connection.close()
            self._connection = None
