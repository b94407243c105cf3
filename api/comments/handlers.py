"""
Comment handlers.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core.errors import storage_failure

from . import schemas
from .repository import CommentRepository


def _to_comment_response(row: dict) -> schemas.CommentResponse:
    return schemas.CommentResponse(
        id=int(row["id"]),
        post_id=int(row["post_id"]),
        author_id=int(row["author_id"]),
        content=str(row["content"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def create_comment(repo: CommentRepository, payload: schemas.CommentCreate) -> schemas.CommentResponse:
    with storage_failure(
        "Failed to create comment.",
        "comment_create_failed",
        post_id=payload.post_id,
        author_id=payload.author_id,
    ):
        row = await repo.create(payload)
    return _to_comment_response(row)


async def get_comment(repo: CommentRepository, comment_id: int) -> schemas.CommentResponse:
    with storage_failure("Failed to get comment.", "comment_get_failed", comment_id=comment_id):
        row = await repo.get_by_id(comment_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found.")
    return _to_comment_response(row)


async def list_comments_for_post(repo: CommentRepository, post_id: int) -> list[schemas.CommentResponse]:
    with storage_failure("Failed to get comments.", "comment_list_failed", post_id=post_id):
        rows = await repo.list_by_post(post_id)
    return [_to_comment_response(r) for r in rows]


async def update_comment(
    repo: CommentRepository,
    comment_id: int,
    payload: schemas.CommentUpdate,
) -> schemas.CommentResponse:
    with storage_failure("Failed to update comment.", "comment_update_failed", comment_id=comment_id):
        row = await repo.update(comment_id, payload)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found.")
    return _to_comment_response(row)


async def delete_comment(repo: CommentRepository, comment_id: int) -> None:
    with storage_failure("Failed to delete comment.", "comment_delete_failed", comment_id=comment_id):
        await repo.delete(comment_id)
