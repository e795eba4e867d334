"""Field, table and sort references and identifier quoting."""

from __future__ import annotations

from dataclasses import dataclass

NAME_QUOTE_CHAR = '"'


def quote_name(v: str) -> str:
    """Quote an SQL identifier, doubling embedded quote characters."""
    q = NAME_QUOTE_CHAR
    return q + v.replace(q, q + q) + q


class FieldName(str):
    """A column reference; a single dot separates table and column."""

    def escape_value(self) -> str:
        if self == "*":
            return "*"
        q = NAME_QUOTE_CHAR
        inner = str(self).replace(q, q + q).replace(".", q + "." + q, 1)
        return q + inner + q

    def sort_escape_value(self) -> str:
        return self.escape_value()


class TableName(str):
    """A table reference."""

    def escape_table(self) -> str:
        return quote_name(str(self))


@dataclass(frozen=True)
class FullField:
    """A column reference with an explicit table part."""

    table: TableName
    field: FieldName

    def escape_value(self) -> str:
        if not self.table:
            return quote_name(str(self.field))
        return quote_name(str(self.table)) + "." + quote_name(str(self.field))

    def sort_escape_value(self) -> str:
        return self.escape_value()

    def __str__(self) -> str:
        return self.escape_value()


@dataclass(frozen=True)
class OrderedField:
    """A sort expression: a field and an optional ASC/DESC direction."""

    field: FieldName | FullField
    order: str = ""

    def sort_escape_value(self) -> str:
        if not self.order:
            return self.field.escape_value()
        return f"{self.field.escape_value()} {self.order}"


def F(*args: str) -> FieldName | FullField:
    """Reference a field as ``F("field")``, ``F("table.field")`` or ``F("table", "field")``."""
    if len(args) == 1:
        return FieldName(args[0])
    if len(args) == 2:
        return FullField(TableName(args[0]), FieldName(args[1]))
    raise ValueError(f"F() expects only one or two args, got {len(args)}")


def S(*args: str) -> OrderedField:
    """Create a sort expression; a trailing "ASC" or "DESC" sets the direction."""
    if not args:
        raise ValueError("S() expects at least one arg, got none")
    last = args[-1]
    if last in ("ASC", "DESC"):
        return OrderedField(F(*args[:-1]), last)
    return OrderedField(F(*args))


def _upper_char(c: str) -> str:
    up = c.upper()
    return up if len(up) == 1 else c


def format_camel_snake_case(name: str) -> str:
    """Format a name as Camel_Snake_Case."""
    if not name:
        return ""
    parts = [_upper_char(name[0])]
    for c in name[1:]:
        if not c.isalpha():
            if c.isnumeric():
                parts.append(c)
            continue
        if c.isupper():
            parts.append("_")
        parts.append(c)
    return "".join(parts)