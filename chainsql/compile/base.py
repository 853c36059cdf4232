"""Quoting capability: the SQLCompiler ABC.

The Strategy pattern (GoF) is used:
- ``SQLCompiler`` declares the dialect-specific primitives the statement
  builders need (identifier quoting, literal escaping, the INSERT verb).
- ``MySQLCompiler`` and ``SQLiteCompiler`` implement them.

Builders never hard-code escaping rules; everything goes through the
compiler instance the builder was created with.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from chainsql.errors import CompilationError


class SQLCompiler(ABC):
    """Abstract base for dialect-specific quoting and escaping.

    Subclasses implement the string primitives; :meth:`quote_literal`
    dispatches on the Python type and is shared by every dialect.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'mysql'`` or ``'sqlite'``)."""

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return a properly-quoted SQL identifier.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Quoted identifier.
        """

    @abstractmethod
    def quote_string(self, value: str) -> str:
        """Return ``value`` as an escaped, quoted SQL string literal."""

    @abstractmethod
    def boolean_literal(self, value: bool) -> str:
        """Return the dialect's literal form of a boolean."""

    def null_literal(self) -> str:
        return "NULL"

    def insert_verb(self, ignore: bool) -> str:
        """Return the leading keyword(s) of an INSERT statement.

        Args:
            ignore: Whether duplicate-key rows should be skipped silently.
        """
        return "INSERT IGNORE" if ignore else "INSERT"

    def quote_literal(self, value: Any) -> str:
        """Render a scalar Python value as a SQL literal.

        Args:
            value: ``None``, ``bool``, ``int``, ``float``, ``Decimal`` or ``str``.

        Returns:
            The literal text, ready to be placed in a VALUES list.

        Raises:
            CompilationError: If ``value`` has no literal form.
        """
        if value is None:
            return self.null_literal()
        if isinstance(value, bool):
            return self.boolean_literal(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, (float, Decimal)):
            if isinstance(value, float) and not math.isfinite(value):
                raise CompilationError(f"Non-finite number {value!r} has no SQL literal.", clause="VALUES")
            if isinstance(value, Decimal) and not value.is_finite():
                raise CompilationError(f"Non-finite number {value!r} has no SQL literal.", clause="VALUES")
            return self._number_literal(value)
        if isinstance(value, str):
            return self.quote_string(value)
        raise CompilationError(
            f"Cannot render {type(value).__name__} as a SQL literal.", clause="VALUES"
        )

    @staticmethod
    def _number_literal(value: float | Decimal) -> str:
        # Exponent notation would make MySQL read a Decimal as DOUBLE.
        if isinstance(value, Decimal):
            return format(value, "f")
        if value.is_integer():
            return str(int(value))
        return str(value)
