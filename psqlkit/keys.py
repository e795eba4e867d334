"""Table key and index metadata."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from psqlkit.dialect import get_dialect
from psqlkit.engine import Engine
from psqlkit.names import quote_name

_log = logging.getLogger(__name__)


class KeyType(enum.IntEnum):
    """Kind of key or index."""

    PRIMARY = 1
    UNIQUE = 2
    INDEX = 3
    FULLTEXT = 4
    SPATIAL = 5
    VECTOR = 6


@runtime_checkable
class _KeyRenderer(Protocol):
    def key_def(self, key: StructKey, table_name: str) -> str: ...

    def inline_key_def(self, key: StructKey, table_name: str) -> str: ...

    def create_index(self, key: StructKey, table_name: str) -> str: ...


_GENERIC_PREFIXES = {
    KeyType.UNIQUE: "UNIQUE INDEX ",
    KeyType.INDEX: "INDEX ",
    KeyType.FULLTEXT: "FULLTEXT INDEX ",
    KeyType.SPATIAL: "SPATIAL INDEX ",
}


@dataclass
class StructKey:
    """Metadata for a table key: its type, column list and attributes."""

    index: int = 0
    name: str = ""
    key: str = ""
    typ: KeyType = KeyType.INDEX
    attrs: dict[str, str] = field(default_factory=dict)
    fields: list[str] = field(default_factory=list)

    def load_attrs(self, attrs: dict[str, str]) -> None:
        """Set the key type and field list from parsed attributes."""
        self.typ = KeyType.INDEX
        if "type" in attrs:
            t = attrs["type"]
            try:
                self.typ = KeyType[t.upper()]
            except KeyError:
                _log.warning(
                    "unsupported index key type %s assumed as INDEX (index %s)", t, self.name
                )
        elif self.key == "PRIMARY":
            self.typ = KeyType.PRIMARY
        self.attrs = attrs
        self.fields = attrs.get("fields", "").split(",")

    def load_key_name(self, kn: str) -> None:
        """Set the key name; "PRIMARY" and a "UNIQUE:" prefix also set the type."""
        if kn == "PRIMARY":
            self.typ = KeyType.PRIMARY
        elif kn.startswith("UNIQUE:"):
            kn = kn[len("UNIQUE:"):]
            self.typ = KeyType.UNIQUE
        self.name = kn
        self.key = kn

    def keyname(self) -> str:
        """Return "PRIMARY" for primary keys, the key name otherwise."""
        return "PRIMARY" if self.typ == KeyType.PRIMARY else self.key

    def sql_key_name(self) -> str:
        """Return "PRIMARY KEY" for primary keys, "INDEX <name>" otherwise."""
        if self.typ == KeyType.PRIMARY:
            return "PRIMARY KEY"
        return "INDEX " + quote_name(self.key)

    def def_string(self, engine: Engine) -> str:
        """Return the key definition for the engine."""
        dialect = get_dialect(engine)
        if isinstance(dialect, _KeyRenderer):
            return dialect.key_def(self, "")
        return self._generic_def_string()

    def inline_def_string(self, engine: Engine, table_name: str) -> str:
        """Return the inline key definition used inside CREATE TABLE."""
        dialect = get_dialect(engine)
        if isinstance(dialect, _KeyRenderer):
            return dialect.inline_key_def(self, table_name)
        return self._generic_def_string()

    def create_index_sql(self, engine: Engine, table_name: str) -> str:
        """Return a CREATE INDEX statement, or "" when the key is defined inline."""
        dialect = get_dialect(engine)
        if isinstance(dialect, _KeyRenderer):
            return dialect.create_index(self, table_name)
        return ""

    def is_unique(self) -> bool:
        """Return True for primary keys and unique indexes."""
        return self.typ in (KeyType.PRIMARY, KeyType.UNIQUE)

    def _generic_def_string(self) -> str:
        if self.typ == KeyType.PRIMARY:
            head = "PRIMARY KEY "
        elif self.typ in _GENERIC_PREFIXES:
            head = _GENERIC_PREFIXES[self.typ] + quote_name(self.key)
        else:
            return ""
        columns = ", ".join(quote_name(f) for f in self.fields)
        return f"{head}({columns})"