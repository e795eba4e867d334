import pytest

from psqlkit.engine import Engine


@pytest.mark.parametrize(
    "engine, label",
    [
        (Engine.MYSQL, "MySQL Engine"),
        (Engine.POSTGRESQL, "PostgreSQL Engine"),
        (Engine.SQLITE, "SQLite Engine"),
        (Engine.UNKNOWN, "Unknown Engine"),
    ],
)
def test_engine_labels(engine, label):
    assert str(engine) == label


def test_formatting_uses_label():
    assert f"{Engine(3)}" == "SQLite Engine"


def test_unknown_is_zero_value():
    assert Engine(0) is Engine.UNKNOWN


def test_engines_are_numbered_as_declared():
    assert [str(Engine(i)) for i in range(4)] == [
        "Unknown Engine",
        "MySQL Engine",
        "PostgreSQL Engine",
        "SQLite Engine",
    ]


def test_invalid_engine_value_rejected():
    with pytest.raises(ValueError):
        Engine(99)