from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from app.config import AppLinkSettings, get_app_link_settings, get_validation_settings
from app.domain.app_links import build_app_links
from db import config as db_config


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_app_link_settings.cache_clear()
    get_validation_settings.cache_clear()
    yield
    get_app_link_settings.cache_clear()
    get_validation_settings.cache_clear()


def test_validation_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CSV_IMPORT_MAX_VALIDATION_ERRORS", raising=False)
    monkeypatch.delenv("VALIDATION_LOG_ERRORS", raising=False)

    settings = get_validation_settings()

    assert settings.csv_max_validation_errors == 10
    assert settings.log_validation_errors is True


def test_validation_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_IMPORT_MAX_VALIDATION_ERRORS", "25")
    monkeypatch.setenv("VALIDATION_LOG_ERRORS", "off")

    settings = get_validation_settings()

    assert settings.csv_max_validation_errors == 25
    assert settings.log_validation_errors is False


def test_bad_int_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSV_IMPORT_MAX_VALIDATION_ERRORS", "lots")
    assert get_validation_settings().csv_max_validation_errors == 10


def test_base_url_trailing_slash_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_PUBLIC_BASE_URL", "https://events.example.org/")
    assert get_app_link_settings().public_base_url == "https://events.example.org"


def test_build_app_links_encodes_app_url() -> None:
    links = build_app_links(
        "evt-42",
        AppLinkSettings(
            public_base_url="https://app.evonto.com",
            qr_code_service_url="https://api.qrserver.com/v1/create-qr-code/",
            qr_code_size=300,
        ),
    )

    assert links.app_url == "https://app.evonto.com/events/evt-42"
    assert links.qr_code_url == (
        "https://api.qrserver.com/v1/create-qr-code/"
        "?size=300x300&data=https%3A%2F%2Fapp.evonto.com%2Fevents%2Fevt-42"
    )


class TestDatabaseSettings:
    @pytest.fixture(autouse=True)
    def _isolated_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(db_config, "load_env_files", lambda: None)
        for name in (
            "DATABASE_URL",
            "CLOUD_DATABASE_URL",
            "LOCAL_DATABASE_URL",
            "ENVIRONMENT",
            "SQL_ECHO",
            "DB_POOL_RECYCLE",
            "DB_POOL_SIZE",
            "DB_MAX_OVERFLOW",
        ):
            monkeypatch.delenv(name, raising=False)

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("postgres://u:p@db/events", "postgresql+psycopg://u:p@db/events"),
            ("postgresql://u:p@db/events", "postgresql+psycopg://u:p@db/events"),
            ("postgresql+psycopg://u:p@db/events", "postgresql+psycopg://u:p@db/events"),
        ],
    )
    def test_normalize_postgres_url(self, url: str, expected: str) -> None:
        assert db_config.normalize_postgres_url(url) == expected

    def test_cloud_url_only_used_on_cloud_environments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOUD_DATABASE_URL", "postgres://cloud/events")
        monkeypatch.setenv("LOCAL_DATABASE_URL", "postgres://local/events")

        assert db_config.resolve_database_url() == "postgresql+psycopg://local/events"

        monkeypatch.setenv("ENVIRONMENT", "Production")
        assert db_config.resolve_database_url() == "postgresql+psycopg://cloud/events"

        monkeypatch.setenv("DATABASE_URL", "postgresql://direct/events")
        assert db_config.resolve_database_url() == "postgresql+psycopg://direct/events"

    def test_missing_url_raises(self) -> None:
        with pytest.raises(RuntimeError, match="No database URL configured"):
            db_config.get_database_settings()

    def test_pool_settings_are_bounded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql://db/events")
        monkeypatch.setenv("SQL_ECHO", "yes")
        monkeypatch.setenv("DB_POOL_SIZE", "0")
        monkeypatch.setenv("DB_MAX_OVERFLOW", "-3")
        monkeypatch.setenv("DB_POOL_RECYCLE", "soon")

        settings = db_config.get_database_settings()

        assert settings == db_config.DatabaseSettings(
            url="postgresql+psycopg://db/events",
            echo=True,
            pool_recycle=1800,
            pool_size=1,
            max_overflow=0,
        )


def test_env_files_do_not_override_process_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EVENT_APP_PRESET", "from-process")
    monkeypatch.setenv("EVENT_APP_FROM_FILE", "placeholder")
    monkeypatch.delenv("EVENT_APP_FROM_FILE")
    (tmp_path / ".env").write_text(
        "# comment\n"
        "EVENT_APP_PRESET=from-file\n"
        "EVENT_APP_FROM_FILE=\"quoted\"\n"
        "not a pair\n",
        encoding="utf-8",
    )

    db_config.load_env_files(tmp_path)

    assert os.environ["EVENT_APP_PRESET"] == "from-process"
    assert os.environ["EVENT_APP_FROM_FILE"] == "quoted"
