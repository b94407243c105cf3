"""
Post API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.params import parse_id

from . import handlers, schemas
from .dependencies import get_post_repository
from .repository import PostRepository

router = APIRouter()


@router.post("/posts", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: schemas.PostCreate,
    repo: PostRepository = Depends(get_post_repository),
) -> schemas.PostResponse:
    return await handlers.create_post(repo, payload)


@router.get("/posts")
async def list_posts(
    repo: PostRepository = Depends(get_post_repository),
) -> list[schemas.PostResponse]:
    """
    List every post, newest first.
    """
    return await handlers.list_posts(repo)


@router.get("/posts/{id}")
async def get_post(
    id: str,
    repo: PostRepository = Depends(get_post_repository),
) -> schemas.PostResponse:
    return await handlers.get_post(repo, parse_id(id, resource="post"))


@router.put("/posts/{id}")
async def update_post(
    id: str,
    payload: schemas.PostUpdate,
    repo: PostRepository = Depends(get_post_repository),
) -> schemas.PostResponse:
    return await handlers.update_post(repo, parse_id(id, resource="post"), payload)


@router.delete("/posts/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    id: str,
    repo: PostRepository = Depends(get_post_repository),
) -> Response:
    await handlers.delete_post(repo, parse_id(id, resource="post"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
