"""chainsql execution layer: run generated SQL over DB-API drivers."""
from chainsql.adapters.factory import create_adapter
from chainsql.adapters.pool import PoolAdapter
from chainsql.adapters.protocol import Adapter, QueryResult
from chainsql.adapters.single import SingleAdapter

__all__ = [
    "Adapter",
    "PoolAdapter",
    "QueryResult",
    "SingleAdapter",
    "create_adapter",
]
