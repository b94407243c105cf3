"""
Tests for core helpers: settings, id parsing, DB URL handling, error translation.
"""

import asyncpg
import pytest
from fastapi import HTTPException

from core import db, settings
from core.errors import StorageError, storage_failure
from core.params import parse_id


class TestParseId:
    @pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (" 7 ", 7), (str(2**63 - 1), 2**63 - 1)])
    def test_valid(self, raw, expected):
        assert parse_id(raw, resource="post") == expected

    @pytest.mark.parametrize("raw", ["", "0", "-3", "+3", "1e3", "abc", "٣", str(2**63), "9" * 5000])
    def test_invalid(self, raw):
        with pytest.raises(HTTPException) as exc_info:
            parse_id(raw, resource="comment")

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid comment ID."


class TestSettings:
    def test_env_int_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("PORT", "eighty")

        assert settings.port() == 8080

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")

        assert settings.port() == 9000

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

        assert settings.cors_origins() == ["https://a.example", "https://b.example"]

    def test_cors_origins_default_is_empty(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        assert settings.cors_origins() == []


class TestDatabaseUrl:
    def test_missing_url_raises(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(RuntimeError):
            db.database_url()

    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/blog?sslmode=disable&application_name=api")

        assert db.database_url() == "postgresql://u:p@db:5432/blog?application_name=api"


class _ClosedPool:
    async def execute(self, sql, *args):
        raise asyncpg.InterfaceError("pool is closed")


@pytest.mark.asyncio
async def test_interface_error_becomes_storage_error():
    with pytest.raises(StorageError) as exc_info:
        await db.execute(_ClosedPool(), "DELETE FROM posts WHERE id = $1", 1)

    assert isinstance(exc_info.value.__cause__, asyncpg.InterfaceError)


def test_storage_failure_hides_driver_message(caplog):
    with pytest.raises(HTTPException) as exc_info:
        with storage_failure("Failed to get post.", "post_get_failed", post_id=3):
            raise StorageError("password authentication failed for user blog")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Failed to get post."
    assert "post_get_failed post_id=3" in caplog.text


def test_storage_failure_lets_other_errors_through():
    with pytest.raises(KeyError):
        with storage_failure("Failed to get post.", "post_get_failed"):
            raise KeyError("id")
