"""
Author dependencies for FastAPI routes.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends

from core.dependencies import get_pool

from .repository import AuthorRepository, PgAuthorRepository


def get_author_repository(pool: asyncpg.Pool = Depends(get_pool)) -> AuthorRepository:
    return PgAuthorRepository(pool)
