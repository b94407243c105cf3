"""
Post handlers.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core.errors import storage_failure

from . import schemas
from .repository import PostRepository


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")


def _to_post_response(row: dict) -> schemas.PostResponse:
    return schemas.PostResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
        cover_image=row["cover_image"],
        author_id=int(row["author_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def create_post(repo: PostRepository, payload: schemas.PostCreate) -> schemas.PostResponse:
    with storage_failure("Failed to create post.", "post_create_failed", author_id=payload.author_id):
        row = await repo.create(payload)
    return _to_post_response(row)


async def get_post(repo: PostRepository, post_id: int) -> schemas.PostResponse:
    with storage_failure("Failed to get post.", "post_get_failed", post_id=post_id):
        row = await repo.get_by_id(post_id)
    if row is None:
        raise _post_not_found()
    return _to_post_response(row)


async def list_posts(repo: PostRepository) -> list[schemas.PostResponse]:
    with storage_failure("Failed to get posts.", "post_list_failed"):
        rows = await repo.list_all()
    return [_to_post_response(r) for r in rows]


async def update_post(repo: PostRepository, post_id: int, payload: schemas.PostUpdate) -> schemas.PostResponse:
    with storage_failure("Failed to update post.", "post_update_failed", post_id=post_id):
        row = await repo.update(post_id, payload)
    if row is None:
        raise _post_not_found()
    return _to_post_response(row)


async def delete_post(repo: PostRepository, post_id: int) -> None:
    with storage_failure("Failed to delete post.", "post_delete_failed", post_id=post_id):
        await repo.delete(post_id)
