"""chainsql configuration models."""
from chainsql.schema.settings import ConnectionSettings, ConnectionType, DriverName

__all__ = [
    "ConnectionSettings",
    "ConnectionType",
    "DriverName",
]
