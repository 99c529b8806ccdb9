"""Translate database driver errors into BackendError."""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from sqlalchemy.exc import DBAPIError

from core.exceptions import BackendError, StoreErrorCode

P = ParamSpec("P")
T = TypeVar("T")

# SQLite has no SQLSTATE; map its extended constraint codes onto Postgres'.
_SQLITE_ERROR_NAMES = {
    "SQLITE_CONSTRAINT_PRIMARYKEY": StoreErrorCode.UNIQUE_VIOLATION.value,
    "SQLITE_CONSTRAINT_UNIQUE": StoreErrorCode.UNIQUE_VIOLATION.value,
}


def store_code_of(exc: DBAPIError) -> str | None:
    """Read the SQLSTATE from a wrapped driver exception.

    asyncpg and psycopg expose ``sqlstate``, psycopg2 exposes ``pgcode`` and
    sqlite3 exposes ``sqlite_errorname``. SQLite reports a missing table only
    in the message text.
    """
    orig = exc.orig
    if orig is None:
        return None
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return str(code)
    if str(orig).startswith("no such table"):
        return StoreErrorCode.UNDEFINED_TABLE.value
    return _SQLITE_ERROR_NAMES.get(getattr(orig, "sqlite_errorname", ""))


def to_backend_error(exc: DBAPIError) -> BackendError:
    orig = exc.orig
    details = {"detail": getattr(orig, "detail", None)} if getattr(orig, "detail", None) else None
    return BackendError(
        message=str(orig) if orig is not None else str(exc),
        store_code=store_code_of(exc),
        details=details,
    )


def translate_errors(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Decorator for repository methods: re-raise DBAPIError as BackendError."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except DBAPIError as exc:
            raise to_backend_error(exc) from exc

    return wrapper
