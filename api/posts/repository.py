"""
Post persistence.
This module is where post-related SQL lives.
"""

from __future__ import annotations

from typing import Any, Protocol

import asyncpg

from core import db
from core.errors import StorageError

from . import schemas


class PostRepository(Protocol):
    async def create(self, payload: schemas.PostCreate) -> dict[str, Any]: ...

    async def get_by_id(self, post_id: int) -> dict[str, Any] | None: ...

    async def list_all(self) -> list[dict[str, Any]]: ...

    async def update(self, post_id: int, payload: schemas.PostUpdate) -> dict[str, Any] | None: ...

    async def delete(self, post_id: int) -> None: ...


class PgPostRepository:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def create(self, payload: schemas.PostCreate) -> dict[str, Any]:
        """
        Insert a post. author_id is enforced by the posts.author_id foreign key,
        so an unknown author surfaces as a StorageError.
        """
        row = await db.fetch_one(
            self._pool,
            """
            INSERT INTO posts (title, content, cover_image, author_id)
            VALUES ($1, $2, $3, $4)
            RETURNING id, title, content, cover_image, author_id, created_at, updated_at
            """,
            payload.title,
            payload.content,
            payload.cover_image,
            payload.author_id,
        )
        if row is None:
            raise StorageError("Failed to create post.")
        return row

    async def get_by_id(self, post_id: int) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            """
            SELECT id, title, content, cover_image, author_id, created_at, updated_at
            FROM posts
            WHERE id = $1
            """,
            post_id,
        )

    async def list_all(self) -> list[dict[str, Any]]:
        return await db.fetch_all(
            self._pool,
            """
            SELECT id, title, content, cover_image, author_id, created_at, updated_at
            FROM posts
            ORDER BY created_at DESC, id DESC
            """,
        )

    async def update(self, post_id: int, payload: schemas.PostUpdate) -> dict[str, Any] | None:
        return await db.fetch_one(
            self._pool,
            """
            UPDATE posts
            SET title = COALESCE($2, title),
                content = COALESCE($3, content),
                cover_image = COALESCE($4, cover_image),
                updated_at = now()
            WHERE id = $1
            RETURNING id, title, content, cover_image, author_id, created_at, updated_at
            """,
            post_id,
            payload.title,
            payload.content,
            payload.cover_image,
        )

    async def delete(self, post_id: int) -> None:
        await db.execute(self._pool, "DELETE FROM posts WHERE id = $1", post_id)
