"""Adapter factory: pick a connection strategy from settings."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from chainsql.adapters.pool import PoolAdapter
from chainsql.adapters.protocol import Adapter
from chainsql.adapters.single import SingleAdapter
from chainsql.errors import AdapterConfigError
from chainsql.schema.settings import ConnectionSettings

_STRATEGIES: dict[str, Callable[[ConnectionSettings], Adapter]] = {
    "single": SingleAdapter,
    "pool": PoolAdapter,
}


def create_adapter(settings: ConnectionSettings | Mapping[str, Any]) -> Adapter:
    """Return the adapter for ``settings.connection_type``.

    No connection is opened here; call ``connect()`` (or just ``execute()``)
    on the result.

    Args:
        settings: A :class:`ConnectionSettings` or a plain mapping of the
            same fields.

    Raises:
        AdapterConfigError: On invalid settings, a MySQL configuration with
            no ``user`` key, or an unsupported connection type.
    """
    if not isinstance(settings, ConnectionSettings):
        settings = ConnectionSettings.from_mapping(settings)

    if settings.driver == "mysql" and "user" not in settings.model_fields_set:
        raise AdapterConfigError(
            "No user provided for MySQL. Hint: it can be None.",
            missing=["user"],
        )

    strategy = _STRATEGIES.get(settings.connection_type)
    if strategy is None:
        raise AdapterConfigError(
            f"Connection type '{settings.connection_type}' is not supported. "
            f"Supported types: {sorted(_STRATEGIES)}.",
            missing=["connection_type"],
        )
    return strategy(settings)
