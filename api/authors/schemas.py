"""
Author API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=3, max_length=320)
    # Stored as given; hashing happens upstream of this service.
    password_hash: str = Field(..., min_length=1, max_length=255)
    full_name: str | None = Field(default=None, max_length=200)
    role: str = Field(default="reader", min_length=1, max_length=50)
    bio: str | None = None
    avatar_url: str | None = Field(default=None, max_length=2048)


class AuthorUpdate(BaseModel):
    # Omitted fields keep their stored value.
    username: str | None = Field(default=None, min_length=1, max_length=50)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    full_name: str | None = Field(default=None, max_length=200)
    role: str | None = Field(default=None, min_length=1, max_length=50)
    bio: str | None = None
    avatar_url: str | None = Field(default=None, max_length=2048)
    is_active: bool | None = Field(default=None, strict=True)


class AuthorStatusUpdate(BaseModel):
    is_active: bool = Field(..., strict=True)


class AuthorResponse(BaseModel):
    id: int
    username: str
    full_name: str | None
    email: str
    role: str
    bio: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime
    is_active: bool
