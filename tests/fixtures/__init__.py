"""Test fixtures: sample records and the SQLite DDL used by integration tests."""

from __future__ import annotations

from typing import Any

GALAXY: dict[str, Any] = {"id": 3, "name": "Milky Way", "type": "spiral"}

GALAXIES: list[dict[str, Any]] = [
    {"id": 3, "name": "Milky Way", "type": "spiral"},
    {"id": 4, "name": "Andromeda", "type": "spiral"},
]

GALAXIES_DDL = """
CREATE TABLE galaxies (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    type TEXT,
    visible INTEGER,
    distance REAL
);
"""


def galaxy_records() -> list[dict[str, Any]]:
    """Return a fresh copy of the two-galaxy record set."""
    return [dict(r) for r in GALAXIES]
