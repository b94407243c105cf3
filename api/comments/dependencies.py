"""
Comment dependencies for FastAPI routes.
"""

from __future__ import annotations

import asyncpg
from fastapi import Depends

from core.dependencies import get_pool

from .repository import CommentRepository, PgCommentRepository


def get_comment_repository(pool: asyncpg.Pool = Depends(get_pool)) -> CommentRepository:
    return PgCommentRepository(pool)
