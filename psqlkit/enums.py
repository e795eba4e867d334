"""CHECK constraints that restrict columns to a set of enum values."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field

from psqlkit.escape import escape
from psqlkit.names import quote_name

_log = logging.getLogger(__name__)

_CONSTRAINT_PREFIX = "chk_enum_"


@dataclass
class EnumConstraint:
    """A named CHECK constraint shared by every column with the same enum values."""

    name: str
    values: list[str]
    columns: dict[str, list[str]] = field(default_factory=dict)

    def add_column(self, table_name: str, column: str) -> None:
        """Record that ``column`` of ``table_name`` uses this constraint."""
        self.columns.setdefault(table_name, []).append(column)


def get_enum_constraint_name(values: str) -> str:
    """Return a constraint name derived from a hash of comma-separated values."""
    pipe_values = "|".join(values.split(","))
    digest = hashlib.sha256(pipe_values.encode("utf-8")).hexdigest()
    name = _CONSTRAINT_PREFIX + digest[:8]
    _log.debug(
        "generating enum constraint name for values: %s -> %s -> %s",
        values,
        pipe_values,
        name,
    )
    return name


def get_enum_type_name(values: str) -> str:
    """Return the constraint name for the given values."""
    return get_enum_constraint_name(values)


def generate_enum_check_sql(constraint: EnumConstraint, table_name: str) -> str:
    """Render the CHECK constraint covering every enum column of a table.

    Returns an empty string when the table has no column using the constraint.
    """
    columns = constraint.columns.get(table_name, [])
    if not columns:
        return ""
    allowed = ",".join(escape(v) for v in constraint.values)
    checks = []
    for column in columns:
        quoted = quote_name(column)
        checks.append(f"({quoted} IS NULL OR {quoted} IN ({allowed}))")
    return f"CONSTRAINT {quote_name(constraint.name)} CHECK ({' AND '.join(checks)})"