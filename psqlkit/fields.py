"""Column metadata and column definition rendering."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from psqlkit.dialect import get_dialect
from psqlkit.engine import Engine
from psqlkit.escape import escape
from psqlkit.names import quote_name


@runtime_checkable
class _TypeMapper(Protocol):
    def sql_type(self, base_type: str, attrs: dict[str, str]) -> str: ...

    def field_def(
        self, column: str, sql_type: str, nullable: bool, attrs: dict[str, str]
    ) -> str: ...

    def field_def_alter(
        self, column: str, sql_type: str, nullable: bool, attrs: dict[str, str]
    ) -> str: ...


def _json_list(value: str) -> str:
    text = json.dumps([value], separators=(",", ":"), ensure_ascii=False)
    return text.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


@dataclass
class StructField:
    """Metadata for one table column: its name, type attributes and nullability."""

    index: int = 0
    name: str = ""
    column: str = ""
    nullable: bool = False
    attrs: dict[str, str] = field(default_factory=dict)

    def sql_type(self, engine: Engine) -> str:
        """Return the SQL type for the engine, or "" when no type is set."""
        if "type" not in self.attrs:
            return ""
        base = self.attrs["type"].lower()
        dialect = get_dialect(engine)
        if isinstance(dialect, _TypeMapper):
            return dialect.sql_type(base, self.attrs)
        if "size" in self.attrs:
            return f"{base}({self.attrs['size']})"
        return base

    def def_string(self, engine: Engine) -> str:
        """Return the full column definition, or "" when it cannot be built."""
        typ = self.sql_type(engine)
        if not typ:
            return ""
        dialect = get_dialect(engine)
        if isinstance(dialect, _TypeMapper):
            return dialect.field_def(self.column, typ, self.nullable, self.attrs)
        return self._generic_def_string(engine, typ)

    def def_string_alter(self, engine: Engine) -> str:
        """Return a column definition suitable for ALTER TABLE ADD COLUMN."""
        typ = self.sql_type(engine)
        if not typ:
            return ""
        dialect = get_dialect(engine)
        if isinstance(dialect, _TypeMapper):
            return dialect.field_def_alter(self.column, typ, self.nullable, self.attrs)
        return self._generic_def_string(engine, typ)

    def _generic_def_string(self, engine: Engine, typ: str) -> str:
        set_type = engine == Engine.POSTGRESQL and typ == "set"
        if set_type:
            typ = "jsonb"
        parts = [quote_name(self.column), typ]

        null = self.attrs.get("null")
        if null is not None:
            if null in ("0", "false"):
                parts.append("NOT NULL")
            elif null in ("1", "true"):
                parts.append("NULL")
            else:
                return ""

        default = self.attrs.get("default")
        if default is not None:
            if set_type:
                default = _json_list(default)
            if default == "\\N":
                parts.append("DEFAULT NULL")
            else:
                parts.append("DEFAULT " + escape(default))

        collation = self.attrs.get("collation")
        if collation is not None and engine != Engine.SQLITE:
            parts.append("COLLATE " + collation)

        return " ".join(parts)