"""Dialect registry for the quoting capability.

A :class:`~chainsql.compile.base.SQLCompiler` decides how identifiers and
literals are written.  ``CompilerFactory`` keeps one compiler class per
dialect name; :meth:`QueryBuilder.for_dialect` and the connection adapters
look dialects up here instead of importing concrete compilers.

Adding a dialect::

    from chainsql.compile.mysql import MySQLCompiler
    from chainsql.compile.registry import CompilerFactory

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...

    QueryBuilder.for_dialect("mariadb").insert("galaxies", {"id": 3})
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from chainsql.compile.base import SQLCompiler
from chainsql.errors import CompilationError


class CompilerFactory:
    """Dialect name → compiler class lookup shared by builders and adapters.

    ``mysql`` and ``sqlite`` are registered when :mod:`chainsql` is imported.
    Registering an existing name replaces the previous class.
    """

    _compilers: ClassVar[dict[str, type[SQLCompiler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLCompiler]], type[SQLCompiler]]:
        """Class decorator: make the decorated compiler available as ``name``."""

        def add(compiler_cls: type[SQLCompiler]) -> type[SQLCompiler]:
            cls.register_class(name, compiler_cls)
            return compiler_cls

        return add

    @classmethod
    def register_class(cls, name: str, compiler_cls: type[SQLCompiler]) -> None:
        """Make ``compiler_cls`` available as dialect ``name``."""
        cls._compilers[name] = compiler_cls

    @classmethod
    def create(cls, name: str) -> SQLCompiler:
        """Return a new compiler for dialect ``name``.

        Raises:
            CompilationError: If ``name`` was never registered.
        """
        try:
            compiler_cls = cls._compilers[name]
        except KeyError:
            raise CompilationError(
                f"Unsupported dialect: '{name}'. Registered dialects: {sorted(cls._compilers)}."
            ) from None
        return compiler_cls()

    @classmethod
    def registered_dialects(cls) -> list[str]:
        return sorted(cls._compilers)
