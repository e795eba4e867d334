"""GREATEST and LEAST expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from psqlkit.engine import Engine
from psqlkit.escape import _escape


@dataclass(frozen=True)
class GreatestExpr:
    """A GREATEST(...) or LEAST(...) call; SQLite renders MAX/MIN instead."""

    args: tuple[Any, ...]
    least: bool = False

    def escape_value(self, engine: Engine | None = None) -> str:
        if engine == Engine.SQLITE:
            name = "MIN" if self.least else "MAX"
        else:
            name = "LEAST" if self.least else "GREATEST"
        rendered = ",".join(_escape(arg, engine) for arg in self.args)
        return f"{name}({rendered})"

    def _escape_value_ctx(self, engine: Engine | None) -> str:
        return self.escape_value(engine)


def greatest(*args: Any) -> GreatestExpr:
    """Return an expression yielding the largest of its arguments."""
    return GreatestExpr(args)


def least(*args: Any) -> GreatestExpr:
    """Return an expression yielding the smallest of its arguments."""
    return GreatestExpr(args, least=True)