"""DuckDB connection management - one connection per thread."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
import settings

MEMORY = ":memory:"

_local = threading.local()


def db_exists(path: str | None = None) -> bool:
    path = path or settings.DB_PATH
    return path == MEMORY or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the document, question and submission tables if missing."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB schema ensured ({} statements)", len(ALL_DDL))


def connect(path: str | None = None, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a connection. Writable connections always carry the schema.

    A read-only open of a missing file first creates it with an empty schema,
    so readers never fail on a fresh deployment.
    """
    path = path or settings.DB_PATH
    if path == MEMORY:
        read_only = False
    elif read_only and not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        with duckdb.connect(path) as conn:
            init_tables(conn)

    conn = duckdb.connect(path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conn


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Thread-local connection to settings.DB_PATH, opened on first use."""
    if getattr(_local, "conn", None) is None:
        _local.conn = connect(read_only=read_only)
    return _local.conn


def close_db() -> None:
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")
