import pytest

import psqlkit.dialect as dialect_module
from psqlkit.dialect import DefaultDialect, register_dialect
from psqlkit.engine import Engine
from psqlkit.errors import (
    BreakLoop,
    DeleteBadAssertError,
    NotNillableError,
    NotReadyError,
    SqlError,
    TxAlreadyProcessedError,
    error_number,
    is_duplicate,
    is_not_exist,
)


class CodedError(Exception):
    def __init__(self, code):
        super().__init__(f"code {code}")
        self.code = code


class CodeDialect(DefaultDialect):
    def error_number(self, err):
        return getattr(err, "code", 0xFFFF)

    def is_not_exist(self, err):
        return False


class DuplicateDialect(DefaultDialect):
    def is_duplicate(self, err):
        return "UNIQUE constraint failed" in str(err)


@pytest.fixture
def clean_registry(monkeypatch):
    monkeypatch.setattr(dialect_module, "_dialects", {})


def test_error_type():
    inner = RuntimeError("connection refused")
    e = SqlError("SELECT 1", inner)
    assert "SELECT 1" in str(e)
    assert "connection refused" in str(e)
    assert e.err is inner


def test_error_unwrap():
    inner = RuntimeError("base error")
    e = SqlError("SELECT 1", inner)
    assert e.__cause__ is inner


def test_error_message_format():
    e = SqlError("SELECT 1", RuntimeError("boom"))
    assert str(e) == "While running SELECT 1: boom"


def test_is_not_exist_with_os_error(clean_registry):
    assert is_not_exist(FileNotFoundError())
    assert not is_not_exist(RuntimeError("some other error"))


def test_error_number(clean_registry):
    assert error_number(None) == 0
    assert error_number(RuntimeError("generic error")) == 0xFFFF
    wrapped = SqlError("SELECT 1", RuntimeError("base error"))
    assert error_number(wrapped) == 0xFFFF


def test_sentinel_messages():
    with pytest.raises(NotReadyError, match="database is not ready"):
        raise NotReadyError()
    assert str(NotNillableError()) == "field is nil but cannot be nil"
    assert str(TxAlreadyProcessedError()) == (
        "transaction has already been committed or rollbacked"
    )
    assert str(DeleteBadAssertError()) == "delete operation failed assertion"
    assert str(BreakLoop()).startswith("exiting loop")


def test_is_duplicate_nil_and_generic(clean_registry):
    assert not is_duplicate(None)
    assert not is_duplicate(RuntimeError("something went wrong"))


def test_error_number_through_classifier(clean_registry):
    register_dialect(Engine.MYSQL, CodeDialect())
    assert error_number(CodedError(1146)) == 1146
    assert error_number(SqlError("SELECT 1", CodedError(1146))) == 1146


def test_is_not_exist_through_error_number(clean_registry):
    register_dialect(Engine.MYSQL, CodeDialect())
    assert is_not_exist(CodedError(1146))
    assert is_not_exist(SqlError("SELECT 1", CodedError(1051)))
    assert not is_not_exist(CodedError(1062))


def test_is_duplicate_mysql_number(clean_registry):
    register_dialect(Engine.MYSQL, CodeDialect())
    assert is_duplicate(CodedError(1062))
    assert not is_duplicate(CodedError(1146))


def test_is_duplicate_checker(clean_registry):
    register_dialect(Engine.SQLITE, DuplicateDialect())
    assert is_duplicate(RuntimeError("UNIQUE constraint failed: users.email"))
    assert not is_duplicate(RuntimeError("no such table"))