"""
Database handle and environment settings (no server required).
"""

import logging

import pytest

from core import config
from core.db import Database, _first_line, _sanitize_database_url, database_url
from core.log import configure_logging


def test_sanitize_database_url_drops_sslmode():
    url = "postgresql://u:p@db:5432/portfolio?sslmode=require&application_name=api"

    assert _sanitize_database_url(url) == "postgresql://u:p@db:5432/portfolio?application_name=api"


def test_sanitize_database_url_without_query_is_unchanged():
    url = "postgresql://u:p@db:5432/portfolio"
    assert _sanitize_database_url(url) == url


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_from_env_reads_pool_settings(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/portfolio?sslmode=disable")
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "2")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "8")
    monkeypatch.setenv("DB_COMMAND_TIMEOUT_S", "12.5")

    db = Database.from_env()

    assert db.dsn == "postgresql://u:p@db/portfolio"
    assert (db.min_size, db.max_size, db.command_timeout) == (2, 8, 12.5)
    assert db.is_connected is False


def test_pool_before_connect_is_an_error():
    db = Database("postgresql://u:p@db/portfolio")

    with pytest.raises(RuntimeError, match="not initialized"):
        db.pool()


@pytest.mark.asyncio
async def test_close_without_connect_is_a_noop():
    db = Database("postgresql://u:p@db/portfolio")
    await db.close()
    assert db.is_connected is False


def test_first_line_skips_blank_lines():
    assert _first_line("\n\n  SELECT 1\nFROM t") == "SELECT 1"
    assert _first_line("") == ""


def test_pool_sizes_fall_back_on_bad_values(monkeypatch):
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "zero")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "0")

    assert config.pool_min_size() == 1
    # Never smaller than the minimum.
    assert config.pool_max_size() == 1


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False), ("", True)],
)
def test_apply_schema_on_startup(monkeypatch, raw, expected):
    monkeypatch.setenv("APPLY_SCHEMA_ON_STARTUP", raw)
    assert config.apply_schema_on_startup() is expected


def test_cors_origins(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert config.cors_origins() == list(config.DEFAULT_CORS_ORIGINS)

    monkeypatch.setenv("CORS_ORIGINS", "https://me.dev, https://www.me.dev,")
    assert config.cors_origins() == ["https://me.dev", "https://www.me.dev"]


def test_configure_logging_sets_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging()
        assert root.level == logging.DEBUG
        configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
