"""
Comment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.params import parse_id

from . import handlers, schemas
from .dependencies import get_comment_repository
from .repository import CommentRepository

router = APIRouter()


@router.post("/comments", status_code=status.HTTP_201_CREATED)
async def create_comment(
    payload: schemas.CommentCreate,
    repo: CommentRepository = Depends(get_comment_repository),
) -> schemas.CommentResponse:
    return await handlers.create_comment(repo, payload)


@router.get("/posts/{post_id}/comments")
async def list_comments_for_post(
    post_id: str,
    repo: CommentRepository = Depends(get_comment_repository),
) -> list[schemas.CommentResponse]:
    return await handlers.list_comments_for_post(repo, parse_id(post_id, resource="post"))


@router.get("/comments/{id}")
async def get_comment(
    id: str,
    repo: CommentRepository = Depends(get_comment_repository),
) -> schemas.CommentResponse:
    return await handlers.get_comment(repo, parse_id(id, resource="comment"))


@router.put("/comments/{id}")
async def update_comment(
    id: str,
    payload: schemas.CommentUpdate,
    repo: CommentRepository = Depends(get_comment_repository),
) -> schemas.CommentResponse:
    return await handlers.update_comment(repo, parse_id(id, resource="comment"), payload)


@router.delete("/comments/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    id: str,
    repo: CommentRepository = Depends(get_comment_repository),
) -> Response:
    await handlers.delete_comment(repo, parse_id(id, resource="comment"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
