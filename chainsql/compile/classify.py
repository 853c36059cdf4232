"""Argument classification for the fluent builder.

Three independent taxonomies, one per argument role:

``classify_table``    — the table argument of a generation call.
``classify_payload``  — the data argument (one record or a list of records).
``classify_field``    — a single value inside a record.

The functions are pure and total: every Python value maps to exactly one
outcome, and nothing is raised here.  Turning an ``invalid`` outcome into an
exception is the job of :mod:`chainsql.validate.validator`.

The taxonomies are deliberately asymmetric.  ``False`` and whitespace-only
strings mean "no table given" for the table role, but are rejected outright
as a data payload.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

TableKind = Literal["present", "absent", "invalid"]
PayloadKind = Literal["single_record", "multi_record", "absent", "invalid"]
FieldKind = Literal["scalar", "absent", "invalid"]


@dataclass(frozen=True)
class TableArg:
    """Outcome of :func:`classify_table`.

    Attributes:
        kind: Classification outcome.
        name: Stripped, unquoted table name when ``kind == "present"``.
    """

    kind: TableKind
    name: str | None = None


@dataclass(frozen=True)
class PayloadArg:
    """Outcome of :func:`classify_payload`.

    Attributes:
        kind: Classification outcome.
        records: The record(s) carried by the payload.  One element for
            ``single_record``, zero or more for ``multi_record``.
        reason: Why the payload was rejected, when ``kind == "invalid"``.
    """

    kind: PayloadKind
    records: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
    reason: str = ""


@dataclass(frozen=True)
class FieldArg:
    """Outcome of :func:`classify_field`."""

    kind: FieldKind


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_record(value: Any) -> bool:
    return isinstance(value, Mapping) and all(isinstance(k, str) for k in value)


def classify_table(value: Any) -> TableArg:
    if value is None or value is False or _is_nan(value):
        return TableArg("absent")
    if isinstance(value, str):
        name = value.strip()
        return TableArg("present", name) if name else TableArg("absent")
    return TableArg("invalid")


def classify_payload(value: Any) -> PayloadArg:
    if value is None or (isinstance(value, str) and value == ""):
        return PayloadArg("absent")
    if isinstance(value, Mapping):
        if not _is_record(value):
            return PayloadArg("invalid", reason="Record keys must be column name strings.")
        return PayloadArg("single_record", (value,))
    if isinstance(value, (list, tuple)):
        for item in value:
            if not _is_record(item) or len(item) == 0:
                return PayloadArg(
                    "invalid",
                    reason="Every element must be a non-empty mapping of column names to values.",
                )
        return PayloadArg("multi_record", tuple(value))
    return PayloadArg("invalid")


def classify_field(value: Any) -> FieldArg:
    if value is None:
        return FieldArg("absent")
    if isinstance(value, (str, bool, int)):
        return FieldArg("scalar")
    if isinstance(value, float):
        return FieldArg("scalar") if math.isfinite(value) else FieldArg("invalid")
    if isinstance(value, Decimal):
        return FieldArg("scalar") if value.is_finite() else FieldArg("invalid")
    return FieldArg("invalid")
