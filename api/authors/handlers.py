"""
Author handlers: HTTP semantics around the author repository.

Responses are built from `schemas.AuthorResponse`, which has no password
field, so the hash cannot leak through any operation.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core.errors import storage_failure

from . import schemas
from .repository import AuthorRepository


def _to_author_response(row: dict) -> schemas.AuthorResponse:
    return schemas.AuthorResponse(
        id=int(row["id"]),
        username=str(row["username"]),
        full_name=row.get("full_name"),
        email=str(row["email"]),
        role=str(row["role"]),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        is_active=bool(row["is_active"]),
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found.")


async def create_author(repo: AuthorRepository, payload: schemas.AuthorCreate) -> schemas.AuthorResponse:
    with storage_failure("Failed to create author.", "author_create_failed", username=payload.username):
        row = await repo.create(payload)
    return _to_author_response(row)


async def get_author(repo: AuthorRepository, author_id: int) -> schemas.AuthorResponse:
    with storage_failure("Failed to get author.", "author_get_failed", author_id=author_id):
        row = await repo.get_by_id(author_id)
    if row is None:
        raise _not_found()
    return _to_author_response(row)


async def list_authors(repo: AuthorRepository) -> list[schemas.AuthorResponse]:
    with storage_failure("Failed to get authors.", "author_list_failed"):
        rows = await repo.list_all()
    return [_to_author_response(r) for r in rows]


async def update_author(
    repo: AuthorRepository,
    author_id: int,
    payload: schemas.AuthorUpdate,
) -> schemas.AuthorResponse:
    with storage_failure("Failed to update author.", "author_update_failed", author_id=author_id):
        row = await repo.update(author_id, payload)
    if row is None:
        raise _not_found()
    return _to_author_response(row)


async def set_author_status(
    repo: AuthorRepository,
    author_id: int,
    payload: schemas.AuthorStatusUpdate,
) -> schemas.AuthorResponse:
    with storage_failure("Failed to update author.", "author_status_failed", author_id=author_id):
        row = await repo.set_active(author_id, payload.is_active)
    if row is None:
        raise _not_found()
    return _to_author_response(row)


async def delete_author(repo: AuthorRepository, author_id: int) -> None:
    with storage_failure("Failed to delete author.", "author_delete_failed", author_id=author_id):
        await repo.delete(author_id)
