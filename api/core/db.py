"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once per process by the FastAPI lifespan (see
`api/main.py`) and handed to repositories through `core.dependencies.get_pool`.
Nothing in here keeps module-level state.

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

from . import settings
from .errors import StorageError

logger = logging.getLogger(__name__)

# Driver/network failures that repositories surface as StorageError.
_STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


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


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    """
    Open the shared pool and verify it answers before serving traffic.
    """
    pool = await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=settings.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=settings.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=settings.env_int("DB_COMMAND_TIMEOUT_S", 30),
    )
    try:
        await ping(pool)
    except StorageError:
        await pool.close()
        raise
    logger.info("db_pool_ready")
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("db_pool_closed")


async def ping(pool: asyncpg.Pool) -> None:
    await fetch_one(pool, "SELECT 1 AS ok")


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool.fetchrow(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise StorageError(f"fetch_one failed: {exc}") from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool.fetch(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise StorageError(f"fetch_all failed: {exc}") from exc
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the status tag,
    e.g. "DELETE 1".
    """
    try:
        return await pool.execute(sql, *args)
    except _STORAGE_ERRORS as exc:
        raise StorageError(f"execute failed: {exc}") from exc
