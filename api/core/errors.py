"""
Error types shared by repositories and handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


# Storage failures are explicit and separable from programming errors.
class StorageError(RuntimeError):
    pass


def _format_context(context: dict[str, object]) -> str:
    return " ".join(f"{k}={v}" for k, v in context.items())


@contextmanager
def storage_failure(detail: str, event: str, **context: object) -> Iterator[None]:
    """
    Translate a StorageError raised inside the block into a generic 500.

    The driver message is logged, never returned to the client.
    """
    try:
        yield
    except StorageError:
        logger.exception("%s %s", event, _format_context(context))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        ) from None
