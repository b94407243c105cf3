"""
Post dependencies for FastAPI routes.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends

from core.dependencies import get_pool

from .repository import PgPostRepository, PostRepository


def get_post_repository(pool: asyncpg.Pool = Depends(get_pool)) -> PostRepository:
    return PgPostRepository(pool)
