"""Rendering of Python values and WHERE conditions as SQL text."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from psqlkit.engine import Engine
from psqlkit.names import FieldName, TableName

_ZERO_TIME = "'0000-00-00 00:00:00.000000'"
_EXACT_BINARY = (bytes, bytearray, memoryview)
_RANGE_OPERATORS = {"$gt": ">", "$lt": "<", "$gte": ">=", "$lte": "<="}


@dataclass
class FindInSet:
    """A FIND_IN_SET() call searching ``value`` in a comma-separated column."""

    field: Any = None
    value: str = ""

    def escape_value(self) -> str:
        return f"FIND_IN_SET({escape(self.value)},{escape(self.field)})"

    def _escape_value_ctx(self, engine: Engine | None) -> str:
        return self.escape_value()

    def __str__(self) -> str:
        return self.escape_value()


def _format_float(v: float) -> str:
    """Format a float with the shortest representation, %g style."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    if v == 0:
        return "-0" if math.copysign(1.0, v) < 0 else "0"
    sign = "-" if v < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(v))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    nd = len(digits)
    dp = nd + exponent
    exp = dp - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if dp <= 0:
        return f"{sign}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return sign + digits + "0" * (dp - nd)
    return f"{sign}{digits[:dp]}.{digits[dp:]}"


def _format_complex(v: complex) -> str:
    real = _format_float(v.real)
    imag = _format_float(v.imag)
    if imag[0] not in "+-":
        imag = "+" + imag
    return f"({real}{imag}i)"


def _format_time(v: datetime) -> str:
    if v.tzinfo is not None:
        v = v.astimezone(timezone.utc).replace(tzinfo=None)
    if v == datetime.min:
        return _ZERO_TIME
    text = (
        f"{v.year:04d}-{v.month:02d}-{v.day:02d} "
        f"{v.hour:02d}:{v.minute:02d}:{v.second:02d}"
    )
    if v.microsecond:
        text += "." + f"{v.microsecond:06d}".rstrip("0")
    return f"'{text}'"


def _hex_literal(v: bytes | bytearray | memoryview) -> str:
    return "x'" + bytes(v).hex() + "'"


def _escape(val: Any, engine: Engine | None = None) -> str:
    """Render a value as SQL text for the given engine."""
    if val is None:
        return "NULL"
    ctx_method = getattr(val, "_escape_value_ctx", None)
    if callable(ctx_method):
        return ctx_method(engine)
    method = getattr(val, "escape_value", None)
    if callable(method):
        return method()
    if isinstance(val, TableName):
        return str(val)
    if isinstance(val, bool):
        return "TRUE" if val else "FALSE"
    if isinstance(val, int):
        return str(int(val))
    if isinstance(val, float):
        return _format_float(val)
    if isinstance(val, complex):
        return _format_complex(val)
    if type(val) in _EXACT_BINARY:
        return _hex_literal(val)
    if isinstance(val, str):
        return "'" + str(val).replace("'", "''") + "'"
    if isinstance(val, datetime):
        return _format_time(val)
    valuer = getattr(val, "value", None)
    if callable(valuer):
        try:
            sub = valuer()
        except Exception:
            return ""
        return _escape(sub, engine)
    if isinstance(val, _EXACT_BINARY):
        return _hex_literal(val)
    return str(val)


def escape(val: Any) -> str:
    """Render any value as text that can be included in an SQL query."""
    return _escape(val)


def _where_sub(key: str, val: Any, engine: Engine | None) -> str:
    column = FieldName(key).escape_value()
    if val is None:
        return f"{column} IS NULL"
    if isinstance(val, FindInSet):
        return f"FIND_IN_SET({_escape(val.value, engine)},{column})"
    if isinstance(val, Mapping):
        conds = [
            column + _RANGE_OPERATORS[op] + _escape(operand, engine)
            for op, operand in val.items()
            if op in _RANGE_OPERATORS
        ]
        if not conds:
            return "FALSE"
        if len(conds) == 1:
            return conds[0]
        return "(" + " AND ".join(conds) + ")"
    if isinstance(val, _EXACT_BINARY):
        return column + "=" + _escape(val, engine)
    if isinstance(val, (list, tuple)):
        if not val:
            return "FALSE"
        items = ",".join(_escape(item, engine) for item in val)
        return f"{column} IN({items})"
    return column + "=" + _escape(val, engine)


def escape_where_sub(key: str, val: Any) -> str:
    """Render a single ``column <condition>`` expression for a WHERE clause."""
    return _where_sub(key, val, None)


def _where(val: Any, glue: str, engine: Engine | None) -> str:
    if isinstance(val, Mapping):
        if not val:
            return "1"
        return glue.join(_where_sub(key, val[key], engine) for key in sorted(val))
    if isinstance(val, (list, tuple)):
        if not val:
            return "1"
        return glue.join(_where(sub, glue, engine) for sub in val)
    return _escape(val, engine)


def escape_where(val: Any, glue: str) -> str:
    """Render a WHERE condition; mapping entries and list items are joined by ``glue``."""
    return _where(val, glue, None)