"""
Author API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.params import parse_id

from . import handlers, schemas
from .dependencies import get_author_repository
from .repository import AuthorRepository

router = APIRouter()


@router.post("/authors", status_code=status.HTTP_201_CREATED)
async def create_author(
    payload: schemas.AuthorCreate,
    repo: AuthorRepository = Depends(get_author_repository),
) -> schemas.AuthorResponse:
    return await handlers.create_author(repo, payload)


@router.get("/authors")
async def list_authors(
    repo: AuthorRepository = Depends(get_author_repository),
) -> list[schemas.AuthorResponse]:
    return await handlers.list_authors(repo)


@router.get("/authors/{id}")
async def get_author(
    id: str,
    repo: AuthorRepository = Depends(get_author_repository),
) -> schemas.AuthorResponse:
    return await handlers.get_author(repo, parse_id(id, resource="author"))


@router.put("/authors/{id}")
async def update_author(
    id: str,
    payload: schemas.AuthorUpdate,
    repo: AuthorRepository = Depends(get_author_repository),
) -> schemas.AuthorResponse:
    return await handlers.update_author(repo, parse_id(id, resource="author"), payload)


@router.patch("/authors/{id}/status")
async def set_author_status(
    id: str,
    payload: schemas.AuthorStatusUpdate,
    repo: AuthorRepository = Depends(get_author_repository),
) -> schemas.AuthorResponse:
    """
    Activate or deactivate an author without touching other fields.
    """
    return await handlers.set_author_status(repo, parse_id(id, resource="author"), payload)


@router.delete("/authors/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    id: str,
    repo: AuthorRepository = Depends(get_author_repository),
) -> Response:
    await handlers.delete_author(repo, parse_id(id, resource="author"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
