"""Engine-specific SQL behaviour and the dialect registry."""

from __future__ import annotations

import abc
from typing import Any

from psqlkit.engine import Engine


class Dialect(abc.ABC):
    """Engine-specific SQL rendering rules."""

    @abc.abstractmethod
    def placeholder(self, n: int) -> str:
        """Return the placeholder for the nth (1-indexed) parameter."""

    @abc.abstractmethod
    def export_arg(self, v: Any) -> Any:
        """Transform a value for use as a query parameter."""

    @abc.abstractmethod
    def limit_offset(self, a: int, b: int) -> str:
        """Render a two-argument LIMIT clause."""


class DefaultDialect(Dialect):
    """Fallback dialect: ``?`` placeholders and MySQL-like LIMIT syntax."""

    def placeholder(self, n: int) -> str:
        return "?"

    def export_arg(self, v: Any) -> Any:
        return default_export_arg(v)

    def limit_offset(self, a: int, b: int) -> str:
        return f"LIMIT {a}, {b}"


_dialects: dict[Engine, Dialect] = {}

_PASSTHROUGH = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def register_dialect(engine: Engine, dialect: Dialect) -> None:
    """Register the dialect used for an engine."""
    _dialects[engine] = dialect


def get_dialect(engine: Engine) -> Dialect:
    """Return the dialect registered for an engine, or the default one."""
    return _dialects.get(engine) or DefaultDialect()


def registered_dialects() -> list[Dialect]:
    """Return every registered dialect."""
    return list(_dialects.values())


def placeholders(engine: Engine, n: int, offset: int) -> str:
    """Return ``n`` comma-separated placeholders starting at ``offset``."""
    dialect = get_dialect(engine)
    return ",".join(dialect.placeholder(offset + i) for i in range(n))


def _has_own_str(v: Any) -> bool:
    return type(v).__str__ is not object.__str__


def default_export_arg(v: Any) -> Any:
    """Shared export logic for values common to all engines."""
    if v is None:
        return None
    if isinstance(v, _PASSTHROUGH):
        return v
    if _has_own_str(v):
        return str(v)
    return v


def export(engine: Engine, value: Any) -> Any:
    """Export a value through the engine's dialect."""
    return get_dialect(engine).export_arg(value)