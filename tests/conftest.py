"""
pytest configuration and fixtures.

API tests run against the real FastAPI app with the repositories swapped for
in-memory fakes via `app.dependency_overrides`. The lifespan is never entered,
so no database is needed.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from authors.dependencies import get_author_repository
from comments.dependencies import get_comment_repository
from core.errors import StorageError
from main import app
from posts.dependencies import get_post_repository


class FakeClock:
    """Strictly increasing UTC timestamps, one second apart."""

    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class _InMemoryTable:
    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.rows: dict[int, dict[str, Any]] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def _insert(self, values: dict[str, Any]) -> dict[str, Any]:
        now = self.clock()
        row = {"id": self._next_id, **values, "created_at": now, "updated_at": now}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    def _get(self, row_id: int) -> dict[str, Any] | None:
        row = self.rows.get(row_id)
        return dict(row) if row is not None else None

    def _newest_first(self, rows) -> list[dict[str, Any]]:
        return [dict(r) for r in sorted(rows, key=lambda r: (r["created_at"], r["id"]), reverse=True)]

    def _update(self, row_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
        row = self.rows.get(row_id)
        if row is None:
            return None
        row.update(changes)
        row["updated_at"] = self.clock()
        return dict(row)

    def _delete(self, row_id: int) -> None:
        self.rows.pop(row_id, None)


class InMemoryAuthorRepository(_InMemoryTable):
    # Rows keep password_hash so tests prove handlers drop it.

    async def create(self, payload):
        self.calls.append("create")
        return self._insert({**payload.model_dump(), "is_active": True})

    async def get_by_id(self, author_id):
        self.calls.append("get_by_id")
        return self._get(author_id)

    async def list_all(self):
        self.calls.append("list_all")
        return self._newest_first(self.rows.values())

    async def update(self, author_id, payload):
        self.calls.append("update")
        return self._update(author_id, payload.model_dump(exclude_none=True))

    async def set_active(self, author_id, is_active):
        self.calls.append("set_active")
        return self._update(author_id, {"is_active": is_active})

    async def delete(self, author_id):
        self.calls.append("delete")
        self._delete(author_id)


class InMemoryPostRepository(_InMemoryTable):
    async def create(self, payload):
        self.calls.append("create")
        return self._insert(payload.model_dump())

    async def get_by_id(self, post_id):
        self.calls.append("get_by_id")
        return self._get(post_id)

    async def list_all(self):
        self.calls.append("list_all")
        return self._newest_first(self.rows.values())

    async def update(self, post_id, payload):
        self.calls.append("update")
        return self._update(post_id, payload.model_dump(exclude_none=True))

    async def delete(self, post_id):
        self.calls.append("delete")
        self._delete(post_id)


class InMemoryCommentRepository(_InMemoryTable):
    async def create(self, payload):
        self.calls.append("create")
        return self._insert(payload.model_dump())

    async def get_by_id(self, comment_id):
        self.calls.append("get_by_id")
        return self._get(comment_id)

    async def list_by_post(self, post_id):
        self.calls.append("list_by_post")
        return self._newest_first(r for r in self.rows.values() if r["post_id"] == post_id)

    async def update(self, comment_id, payload):
        self.calls.append("update")
        return self._update(comment_id, payload.model_dump(exclude_none=True))

    async def delete(self, comment_id):
        self.calls.append("delete")
        self._delete(comment_id)


class BrokenRepository:
    """Every operation fails the way a dropped connection would."""

    def __getattr__(self, name: str):
        async def _fail(*args: Any, **kwargs: Any) -> Any:
            raise StorageError("connection refused: password=hunter2 host=db.internal")

        return _fail


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def author_repo(clock) -> InMemoryAuthorRepository:
    return InMemoryAuthorRepository(clock)


@pytest.fixture
def post_repo(clock) -> InMemoryPostRepository:
    return InMemoryPostRepository(clock)


@pytest.fixture
def comment_repo(clock) -> InMemoryCommentRepository:
    return InMemoryCommentRepository(clock)


@pytest.fixture
def client(author_repo, post_repo, comment_repo):
    app.dependency_overrides[get_author_repository] = lambda: author_repo
    app.dependency_overrides[get_post_repository] = lambda: post_repo
    app.dependency_overrides[get_comment_repository] = lambda: comment_repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    broken = BrokenRepository()
    app.dependency_overrides[get_author_repository] = lambda: broken
    app.dependency_overrides[get_post_repository] = lambda: broken
    app.dependency_overrides[get_comment_repository] = lambda: broken
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def author(client) -> dict:
    resp = client.post(
        "/authors",
        json={"username": "ana", "email": "ana@x.com", "password_hash": "h1"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def post(client, author) -> dict:
    resp = client.post(
        "/posts",
        json={"title": "T", "content": "C", "author_id": author["id"]},
    )
    assert resp.status_code == 201
    return resp.json()
