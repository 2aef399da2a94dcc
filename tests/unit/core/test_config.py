"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from rbacadmin.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api/v1"
    assert settings.is_sqlite
    assert settings.default_page_size == 20
    assert settings.max_page_size == 100


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("RBACADMIN_ENVIRONMENT", "production")
    monkeypatch.setenv("RBACADMIN_DEFAULT_PAGE_SIZE", "5")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.default_page_size == 5


def test_cors_origins_comma_separated():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError, match="SQLite does not support"):
        Settings(_env_file=None, workers=4)


def test_postgres_allows_multiple_workers():
    settings = Settings(
        _env_file=None,
        workers=4,
        database_url="postgresql+asyncpg://u:p@localhost/rbac",
    )

    assert settings.workers == 4
    assert not settings.is_sqlite


def test_default_page_size_must_fit_max():
    with pytest.raises(ValidationError, match="default_page_size"):
        Settings(_env_file=None, default_page_size=50, max_page_size=10)


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("RBACADMIN_CORS_ORIGINS", "http://a.test,http://b.test")

    settings = Settings(_env_file=None)

    assert settings.cors_origins == ["http://a.test", "http://b.test"]
