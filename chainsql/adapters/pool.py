"""Connection-pool adapter backed by SQLAlchemy's ``QueuePool``."""
from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy.pool import QueuePool

from chainsql.adapters.drivers import DriverSpec, get_driver
from chainsql.adapters.protocol import QueryResult, ResultCallback
from chainsql.adapters.single import SingleAdapter
from chainsql.compile.builder import QueryBuilder
from chainsql.compile.registry import CompilerFactory
from chainsql.errors import AdapterError
from chainsql.schema.settings import ConnectionSettings

logger = structlog.get_logger(__name__)


class PoolAdapter:
    """Hands out pooled connections wrapped as :class:`SingleAdapter`.

    ``execute`` checks a connection out, runs the statement and returns the
    connection to the pool.  For several statements on one connection use
    :meth:`acquire` and call ``release()`` on the returned adapter.

    Args:
        settings: Connection settings; ``pool_size`` bounds the pool.
        driver: Driver spec; resolved from ``settings.driver`` when omitted.
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        driver: DriverSpec | None = None,
    ) -> None:
        self.settings = settings
        self._driver = driver or get_driver(settings.driver)
        self._compiler = CompilerFactory.create(self._driver.name)
        self._pool: QueuePool | None = None

    @property
    def pool(self) -> QueuePool:
        if self._pool is None:
            raise AdapterError("Connection pool not available. Call connect() first.")
        return self._pool

    def builder(self) -> QueryBuilder:
        return QueryBuilder(self._compiler)

    def connect(self) -> None:
        if self._pool is not None:
            return
        kwargs = self.settings.to_connect_kwargs()
        self._pool = QueuePool(
            lambda: self._driver.connect(**kwargs),
            pool_size=self.settings.pool_size,
            max_overflow=0,
        )
        logger.info(
            "pool.created",
            driver=self._driver.name,
            host=self.settings.host,
            pool_size=self.settings.pool_size,
        )
        if self.settings.debug:
            self.execute("SELECT 1 + 1 AS solution")
            logger.debug("pool.health_check", driver=self._driver.name, ok=True)

    def acquire(self) -> SingleAdapter:
        """Check out a connection; call ``release()`` on the result when done."""
        self.connect()
        return SingleAdapter(
            self.settings,
            driver=self._driver,
            pooled_connection=self.pool.connect(),
        )

    def execute(
        self,
        sql: str,
        params: Any = None,
        callback: ResultCallback | None = None,
    ) -> QueryResult:
        adapter = self.acquire()
        try:
            return adapter.execute(sql, params, callback)
        finally:
            adapter.release()

    def escape(self, value: Any) -> str:
        return self._compiler.quote_literal(value)

    def escape_id(self, name: str) -> str:
        return self._compiler.quote_identifier(name)

    def disconnect(self) -> None:
        if self._pool is None:
            return
        self._pool.dispose()
        self._pool = None
        logger.info("pool.disposed", driver=self._driver.name)

    def release(self) -> None:
        raise AdapterError("release() applies to adapters returned by acquire().")
