"""
Author persistence (raw SQL).

Expected table (see db/schema.sql):
- authors(id bigserial, username unique, full_name, email, role, password_hash,
  bio, avatar_url, created_at, updated_at, is_active)

`password_hash` is written on insert and never selected back.
"""

from __future__ import annotations

from typing import Any, Protocol

import asyncpg

from core import db
from core.errors import StorageError

from . import schemas

_COLUMNS = """
    id, username, full_name, email, role, bio, avatar_url,
    created_at, updated_at, is_active
"""


class AuthorRepository(Protocol):
    async def create(self, payload: schemas.AuthorCreate) -> dict[str, Any]: ...

    async def get_by_id(self, author_id: int) -> dict[str, Any] | None: ...

    async def list_all(self) -> list[dict[str, Any]]: ...

    async def update(self, author_id: int, payload: schemas.AuthorUpdate) -> dict[str, Any] | None: ...

    async def set_active(self, author_id: int, is_active: bool) -> dict[str, Any] | None: ...

    async def delete(self, author_id: int) -> None: ...


class PgAuthorRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def create(self, payload: schemas.AuthorCreate) -> dict[str, Any]:
        row = await db.fetch_one(
            self._pool,
            f"""
            INSERT INTO authors (username, full_name, email, role, password_hash, bio, avatar_url)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            RETURNING {_COLUMNS}
            """,
            payload.username,
            payload.full_name,
            payload.email,
            payload.role,
            payload.password_hash,
            payload.bio,
            payload.avatar_url,
        )
        if row is None:
            raise StorageError("Failed to create author.")
        return row

    async def get_by_id(self, author_id: int) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            f"""
            SELECT {_COLUMNS}
            FROM authors
            WHERE id = $1
            """,
            author_id,
        )

    async def list_all(self) -> list[dict[str, Any]]:
        return await db.fetch_all(
            self._pool,
            f"""
            SELECT {_COLUMNS}
            FROM authors
            ORDER BY created_at DESC, id DESC
            """,
        )

    async def update(self, author_id: int, payload: schemas.AuthorUpdate) -> dict[str, Any] | None:
        """
        Update the provided fields and refresh updated_at.
        Returns None when no author has this id.
        """
        return await db.fetch_one(
            self._pool,
            f"""
            UPDATE authors
            SET username = COALESCE($2, username),
                full_name = COALESCE($3, full_name),
                email = COALESCE($4, email),
                role = COALESCE($5, role),
                bio = COALESCE($6, bio),
                avatar_url = COALESCE($7, avatar_url),
                is_active = COALESCE($8, is_active),
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            author_id,
            payload.username,
            payload.full_name,
            payload.email,
            payload.role,
            payload.bio,
            payload.avatar_url,
            payload.is_active,
        )

    async def set_active(self, author_id: int, is_active: bool) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            f"""
            UPDATE authors
            SET is_active = $2,
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
            """,
            author_id,
            is_active,
        )

    async def delete(self, author_id: int) -> None:
        # Deleting a missing id is not an error.
        await db.execute(self._pool, "DELETE FROM authors WHERE id = $1", author_id)
