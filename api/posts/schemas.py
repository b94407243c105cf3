"""
Post API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.params import MAX_ID


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: str
    cover_image: str | None = Field(default=None, max_length=2048)
    author_id: int = Field(..., gt=0, le=MAX_ID, strict=True)


class PostUpdate(BaseModel):
    # author_id is fixed at creation.
    title: str | None = Field(default=None, min_length=1, max_length=300)
    content: str | None = None
    cover_image: str | None = Field(default=None, max_length=2048)


class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    cover_image: str | None
    author_id: int
    created_at: datetime
    updated_at: datetime
