"""Error types and engine-aware error classification."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from psqlkit.dialect import registered_dialects

_UNKNOWN_ERROR = 0xFFFF

_NOT_EXIST_NUMBERS = frozenset(
    {
        1008, 1029, 1049, 1051, 1054, 1072, 1091, 1109, 1141, 1146, 1147,
        1176, 1305, 1360, 1431, 1449, 1477, 1539, 1630, 1749, 1974, 1976,
        4031, 4162,
    }
)


@runtime_checkable
class _ErrorClassifier(Protocol):
    def error_number(self, err: BaseException) -> int: ...

    def is_not_exist(self, err: BaseException) -> bool: ...


@runtime_checkable
class _DuplicateChecker(Protocol):
    def is_duplicate(self, err: BaseException) -> bool: ...


class SqlError(Exception):
    """A database error together with the query that caused it."""

    def __init__(self, query: str, err: BaseException) -> None:
        super().__init__(query, err)
        self.query = query
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return f"While running {self.query}: {self.err}"


class NotReadyError(Exception):
    """No database connection is available."""

    def __init__(self, message: str = "database is not ready (no connection is available)") -> None:
        super().__init__(message)


class NotNillableError(Exception):
    """A field is None but cannot be."""

    def __init__(self, message: str = "field is nil but cannot be nil") -> None:
        super().__init__(message)


class TxAlreadyProcessedError(Exception):
    """The transaction was already committed or rolled back."""

    def __init__(
        self, message: str = "transaction has already been committed or rollbacked"
    ) -> None:
        super().__init__(message)


class DeleteBadAssertError(Exception):
    """A delete operation failed its assertion."""

    def __init__(self, message: str = "delete operation failed assertion") -> None:
        super().__init__(message)


class BreakLoop(Exception):
    """Raised from a loop callback to stop iterating; not an actual failure."""

    def __init__(
        self,
        message: str = "exiting loop (not an actual error, used to break out of loop callbacks)",
    ) -> None:
        super().__init__(message)


def _classifiers() -> list[_ErrorClassifier]:
    return [d for d in registered_dialects() if isinstance(d, _ErrorClassifier)]


def error_number(err: BaseException | None) -> int:
    """Return the database error number for an error chain.

    0 for None, 0xFFFF when no registered dialect recognises the error.
    """
    if err is None:
        return 0
    for classifier in _classifiers():
        n = classifier.error_number(err)
        if n not in (0, _UNKNOWN_ERROR):
            return n
    inner = err.__cause__
    if inner is not None and inner is not err:
        return error_number(inner)
    return _UNKNOWN_ERROR


def is_not_exist(err: BaseException | None) -> bool:
    """Return True if the error means that something does not exist."""
    if any(c.is_not_exist(err) for c in _classifiers()):
        return True
    if error_number(err) in _NOT_EXIST_NUMBERS:
        return True
    return isinstance(err, FileNotFoundError)


def is_duplicate(err: BaseException | None) -> bool:
    """Return True if the error is a unique constraint violation."""
    if err is None:
        return False
    for dialect in registered_dialects():
        if isinstance(dialect, _DuplicateChecker) and dialect.is_duplicate(err):
            return True
    return error_number(err) == 1062