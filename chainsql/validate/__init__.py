"""chainsql validation layer: argument checks run before any state change."""
from chainsql.validate.validator import ArgumentValidator

__all__ = ["ArgumentValidator"]
