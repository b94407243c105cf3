"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any, Protocol

import asyncpg

from core import db
from core.errors import StorageError

from . import schemas


class CommentRepository(Protocol):
    async def create(self, payload: schemas.CommentCreate) -> dict[str, Any]: ...

    async def get_by_id(self, comment_id: int) -> dict[str, Any] | None: ...

    async def list_by_post(self, post_id: int) -> list[dict[str, Any]]: ...

    async def update(self, comment_id: int, payload: schemas.CommentUpdate) -> dict[str, Any] | None: ...

    async def delete(self, comment_id: int) -> None: ...


class PgCommentRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def create(self, payload: schemas.CommentCreate) -> dict[str, Any]:
        row = await db.fetch_one(
            self._pool,
            """
            INSERT INTO comments (post_id, author_id, content)
            VALUES ($1, $2, $3)
            RETURNING id, post_id, author_id, content, created_at, updated_at
            """,
            payload.post_id,
            payload.author_id,
            payload.content,
        )
        if row is None:
            raise StorageError("Failed to create comment.")
        return row

    async def get_by_id(self, comment_id: int) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            """
            SELECT id, post_id, author_id, content, created_at, updated_at
            FROM comments
            WHERE id = $1
            """,
            comment_id,
        )

    async def list_by_post(self, post_id: int) -> list[dict[str, Any]]:
        """
        List comments on a post, newest first.
        An unknown post yields an empty list, not an error.
        """
        return await db.fetch_all(
            self._pool,
            """
            SELECT id, post_id, author_id, content, created_at, updated_at
            FROM comments
            WHERE post_id = $1
            ORDER BY created_at DESC, id DESC
            """,
            post_id,
        )

    async def update(self, comment_id: int, payload: schemas.CommentUpdate) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            """
            UPDATE comments
            SET content = COALESCE($2, content),
                updated_at = now()
            WHERE id = $1
            RETURNING id, post_id, author_id, content, created_at, updated_at
            """,
            comment_id,
            payload.content,
        )

    async def delete(self, comment_id: int) -> None:
        await db.execute(self._pool, "DELETE FROM comments WHERE id = $1", comment_id)
