"""
Comment API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.params import MAX_ID


class CommentCreate(BaseModel):
    post_id: int = Field(..., gt=0, le=MAX_ID, strict=True)
    author_id: int = Field(..., gt=0, le=MAX_ID, strict=True)
    content: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    content: str | None = Field(default=None, min_length=1)


class CommentResponse(BaseModel):
    id: int
    post_id: int
    author_id: int
    content: str
    created_at: datetime
    updated_at: datetime
