"""Parameterized-query executor over a SQLAlchemy engine.

Repositories hand it plain SQL with named bind parameters and a row
mapper; it owns connections, transactions and driver error translation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.sql.expression import Executable
from sqlalchemy.exc import SQLAlchemyError

from catalog.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RowMapper = Callable[[Mapping[str, Any]], T]


class SqlQueryExecutor:

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def update(self, sql: str | Executable, **params: Any) -> int:
        """Run a write statement and return the affected row count."""
        with self._run(sql, params) as result:
            return result.rowcount

    def insert(self, sql: str | Executable, **params: Any) -> tuple[int, int | None]:
        """Run an insert and return (affected rows, generated primary key).

        ``sql`` must be a Core ``insert()`` construct so the key is read
        the same way on every backend.
        """
        with self._run(sql, params) as result:
            key = result.inserted_primary_key
            return result.rowcount, key[0] if key else None

    def query(self, sql: str | Executable, row_mapper: RowMapper[T], **params: Any) -> list[T]:
        with self._run(sql, params) as result:
            return [row_mapper(row) for row in result.mappings()]

    def query_one(
        self, sql: str | Executable, row_mapper: RowMapper[T], **params: Any
    ) -> T | None:
        with self._run(sql, params) as result:
            row = result.mappings().first()
            return row_mapper(row) if row is not None else None

    def exists(self, sql: str | Executable, **params: Any) -> bool:
        with self._run(sql, params) as result:
            return result.first() is not None

    # --- Internal helpers -----------------------------------------------------

    @contextmanager
    def _run(self, sql: str | Executable, params: dict[str, Any]) -> Iterator[CursorResult]:
        """Execute one statement in its own transaction.

        The result must be consumed inside the ``with`` block; the
        transaction commits when the block exits cleanly.
        """
        statement = text(sql) if isinstance(sql, str) else sql
        logger.debug("SQL %s %r", statement, params)
        try:
            with self._engine.begin() as connection:
                yield connection.execute(statement, params)
        except SQLAlchemyError as exc:
            logger.error("Statement failed: %s", exc)
            raise PersistenceError(str(exc)) from exc
