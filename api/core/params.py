"""
Path parameter parsing.
"""

from __future__ import annotations

from fastapi import HTTPException, status

MAX_ID = 2**63 - 1


def parse_id(raw: str, *, resource: str) -> int:
    """
    Parse a path id as a positive int64, or fail with 400.
    """
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()) or len(value) > 19 or not 1 <= int(value) <= MAX_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {resource} ID.",
        )
    return int(value)
