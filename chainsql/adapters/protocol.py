"""The execution capability shared by every connection strategy.

Strategies (single connection, pool) are independent classes that satisfy
:class:`Adapter` structurally; there is no shared base class.  Pick one with
:func:`~chainsql.adapters.factory.create_adapter`.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass
class QueryResult:
    """Outcome of one executed statement.

    Attributes:
        rows: Fetched rows (empty for statements that return none).
        affected_rows: Driver-reported row count (``-1`` when unknown).
        insert_id: Last auto-generated id, when the driver reports one.
    """

    rows: list[Any] = field(default_factory=list)
    affected_rows: int = -1
    insert_id: int | None = None


ResultCallback = Callable[[QueryResult], None]


@runtime_checkable
class Adapter(Protocol):
    """Connect, execute generated SQL, escape values, and disconnect."""

    def connect(self) -> None: ...

    def execute(
        self,
        sql: str,
        params: Any = None,
        callback: ResultCallback | None = None,
    ) -> QueryResult: ...

    def escape(self, value: Any) -> str: ...

    def escape_id(self, name: str) -> str: ...

    def disconnect(self) -> None: ...

    def release(self) -> None: ...
