"""Module: gateway."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Executable

from petrecords.core.errors import StoreError

# The sqlite3 driver raises OverflowError for integers wider than 64 bits
# instead of wrapping it in a DBAPI error.
STORE_FAILURES = (SQLAlchemyError, OverflowError)


@dataclass(frozen=True)
class MutationResult:
    insert_id: int | None
    affected_rows: int


class Gateway:
    """
    Runs parameterized statements against the relational store.

    Every call checks a connection out of the engine's pool, runs one
    statement inside its own transaction and returns the connection. There
    is no cross-call transaction: two calls are two independent commits.
    Any SQLAlchemy failure, or an integer too wide for the driver, surfaces
    as ``StoreError``; logging it is left to the HTTP error handler.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def fetch_all(self, stmt: Executable, params: Mapping[str, Any] | None = None) -> list[dict]:
        try:
            with self.engine.begin() as conn:
                rows = conn.execute(stmt, params).mappings().all()
        except STORE_FAILURES as exc:
            raise StoreError() from exc
        return [dict(r) for r in rows]

    def fetch_one(self, stmt: Executable, params: Mapping[str, Any] | None = None) -> dict | None:
        rows = self.fetch_all(stmt, params)
        return rows[0] if rows else None

    def execute(self, stmt: Executable, params: Mapping[str, Any] | None = None) -> MutationResult:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt, params)
                insert_id = None
                if result.is_insert and result.inserted_primary_key:
                    insert_id = result.inserted_primary_key[0]
                affected = result.rowcount
        except STORE_FAILURES as exc:
            raise StoreError() from exc
        return MutationResult(insert_id=insert_id, affected_rows=affected)
