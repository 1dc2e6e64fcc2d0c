"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Repositories receive the pool
explicitly and pass it to the helpers below.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id             SERIAL PRIMARY KEY,
    username       TEXT NOT NULL,
    email          TEXT NOT NULL UNIQUE,
    password       TEXT NOT NULL,
    salt           TEXT NOT NULL,
    user_type      TEXT NOT NULL,
    date_created   TEXT NOT NULL,
    date_logged_in TEXT
)
"""


# Store failures are explicit and separable from other runtime errors.
class StorageError(RuntimeError):
    pass


class DuplicateRecordError(StorageError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=1,
        max_size=5,
        command_timeout=30,
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def init_schema(executor: asyncpg.Pool) -> None:
    """
    Create the users table if it does not exist yet.
    """
    await execute(executor, SCHEMA_SQL)
    logger.info("database schema ready")


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


# Query timeouts (command_timeout) and dropped connections count as store failures.
_STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError)


def _wrap_error(exc: Exception) -> StorageError:
    if isinstance(exc, asyncpg.UniqueViolationError):
        return DuplicateRecordError(str(exc))
    if isinstance(exc, asyncio.TimeoutError):
        return StorageError(str(exc) or "Database query timed out.")
    return StorageError(str(exc) or type(exc).__name__)


async def fetch_one(executor: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await executor.fetchrow(sql, *args)
    except _STORE_ERRORS as exc:
        raise _wrap_error(exc) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(executor: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await executor.fetch(sql, *args)
    except _STORE_ERRORS as exc:
        raise _wrap_error(exc) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(executor: asyncpg.Pool, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    try:
        await executor.execute(sql, *args)
    except _STORE_ERRORS as exc:
        raise _wrap_error(exc) from exc
