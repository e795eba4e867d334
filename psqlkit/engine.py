"""SQL database engine identifiers."""

from __future__ import annotations

import enum


class Engine(enum.IntEnum):
    """The SQL database engine in use."""

    UNKNOWN = 0
    MYSQL = 1
    POSTGRESQL = 2
    SQLITE = 3

    def __str__(self) -> str:
        return _ENGINE_LABELS.get(self, "Unknown Engine")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_ENGINE_LABELS = {
    Engine.MYSQL: "MySQL Engine",
    Engine.POSTGRESQL: "PostgreSQL Engine",
    Engine.SQLITE: "SQLite Engine",
}