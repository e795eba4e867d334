import pytest

from psqlkit.engine import Engine
from psqlkit.escape import escape, escape_where_sub
from psqlkit.expressions import GreatestExpr, greatest, least
from psqlkit.names import F


def test_greatest_default():
    assert greatest(F("user_count"), 0).escape_value() == 'GREATEST("user_count",0)'


def test_greatest_sqlite():
    assert greatest(F("user_count"), 0).escape_value(Engine.SQLITE) == 'MAX("user_count",0)'


def test_least_default():
    assert least(F("stock"), 100).escape_value() == 'LEAST("stock",100)'


def test_least_sqlite():
    assert least(F("stock"), 100).escape_value(Engine.SQLITE) == 'MIN("stock",100)'


@pytest.mark.parametrize("engine", [Engine.MYSQL, Engine.POSTGRESQL, Engine.UNKNOWN])
def test_non_sqlite_engines_match_default(engine):
    expr = greatest(F("a"), 1)
    assert expr.escape_value(engine) == expr.escape_value()
    other = least(F("a"), 1)
    assert other.escape_value(engine) == other.escape_value()


def test_escape_uses_expression():
    expr = least(F("stock"), 100)
    assert escape(expr) == expr.escape_value()


def test_nested_expression_follows_engine():
    inner = greatest(F("a"), 1)
    outer = least(inner, 5)
    assert outer.escape_value(Engine.SQLITE) == "MIN(" + inner.escape_value(Engine.SQLITE) + ",5)"
    assert outer.escape_value() == "LEAST(" + inner.escape_value() + ",5)"


def test_arguments_are_escaped():
    assert greatest("it's", None).escape_value() == "GREATEST(" + escape("it's") + ",NULL)"


def test_no_arguments():
    assert greatest().escape_value() == "GREATEST()"


def test_constructors_keep_arguments():
    g = greatest(1, 2)
    lst = least(1, 2)
    assert g == GreatestExpr((1, 2), least=False)
    assert lst == GreatestExpr((1, 2), least=True)
    assert g.args == lst.args


def test_expression_in_where_condition():
    expr = greatest(F("x"), 0)
    assert escape_where_sub("m", expr) == '"m"=' + expr.escape_value()