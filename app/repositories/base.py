"""Base repository class."""

from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Shared DuckDB access for the stores, with a per-instance read cache.

    Pass ``conn`` to share one connection between repositories (the container
    does this) or to run against an in-memory database.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized (read_only={})", self.__class__.__name__, read_only)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("{} cache miss: {}", self.__class__.__name__, key)
        return self._cache[key]

    def _require_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    def execute(self, query: str, params: list | None = None) -> duckdb.DuckDBPyConnection:
        return self._db.execute(query, params) if params else self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list[tuple]:
        return self.execute(query, params).fetchall()

    def scalar(self, query: str, params: list | None = None) -> Any:
        """First column of the first row."""
        row = self.execute(query, params).fetchone()
        return row[0] if row else None
