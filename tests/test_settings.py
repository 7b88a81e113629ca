# ==============================================================================
# CONFIGURATION TESTS
# ==============================================================================
# Tests for settings parsing, helpers, DSN conversion and adapter selection
# ==============================================================================

import pytest
from pydantic import ValidationError

from catalog_api.core.exceptions import ConfigurationError
from catalog_api.core.logging import ACCESS_LOGGER_NAME, mask_dsn, setup_logging
from catalog_api.core.settings import DatabaseType, Environment
from catalog_api.database.adapters.mysql_adapter import MySQLAdapter, to_mysql_url
from catalog_api.database.adapters.postgresql_adapter import (
    PostgreSQLAdapter,
    to_postgres_url,
)
from catalog_api.database.adapters.sqlite_adapter import SQLiteAdapter, to_sqlite_url
from catalog_api.database.factory import DatabaseFactory, resolve_driver
from catalog_api.main import create_app
from catalog_api.utils.helpers import parse_duration, parse_positive_int


class TestHelpers:
    """Tests for parsing helpers."""

    @pytest.mark.parametrize(
        "text, seconds",
        [
            ("60", 60.0),
            ("1.5", 1.5),
            ("30s", 30.0),
            ("1m", 60.0),
            ("1h", 3600.0),
            ("500ms", 0.5),
            ("1m30s", 90.0),
            (" 2H ", 7200.0),
        ],
    )
    def test_parse_duration(self, text, seconds):
        assert parse_duration(text) == seconds

    @pytest.mark.parametrize("text", ["", "abc", "1x", "m1", "1m junk"])
    def test_parse_duration_rejects(self, text):
        with pytest.raises(ValueError):
            parse_duration(text)

    @pytest.mark.parametrize(
        "value, expected",
        [("3", 3), (" 7 ", 7), ("0", None), ("-4", None), ("x", None), (None, None), (True, None)],
    )
    def test_parse_positive_int(self, value, expected):
        assert parse_positive_int(value) == expected

    def test_parse_positive_int_default(self):
        assert parse_positive_int("nope", default=10) == 10


class TestSettings:
    """Tests for the settings model."""

    def test_defaults(self, make_settings):
        settings = make_settings()

        assert settings.APP_PORT == 8080
        assert settings.API_V1_PREFIX == "/api/v1"
        assert settings.RATE_LIMIT_MAX == 100
        assert settings.RATE_LIMIT_WINDOW == 60.0
        assert settings.ENVIRONMENT == Environment.DEVELOPMENT
        assert settings.is_production is False

    def test_origins_are_split(self, make_settings):
        settings = make_settings(FRONTEND_ORIGINS="https://a.test, https://b.test,")

        assert settings.FRONTEND_ORIGINS == ["https://a.test", "https://b.test"]

    def test_window_accepts_duration(self, make_settings):
        assert make_settings(RATE_LIMIT_WINDOW="1m30s").RATE_LIMIT_WINDOW == 90.0

    def test_origins_from_environment(self, make_settings, monkeypatch):
        monkeypatch.setenv("FRONTEND_ORIGINS", "https://env.test,https://other.test")

        settings = make_settings()

        assert settings.FRONTEND_ORIGINS == ["https://env.test", "https://other.test"]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"RATE_LIMIT_WINDOW": "soon"},
            {"RATE_LIMIT_MAX": 0},
            {"ENVIRONMENT": "moon"},
            {"LOG_LEVEL": "LOUD"},
        ],
    )
    def test_bad_values_are_rejected(self, make_settings, overrides):
        with pytest.raises(ValidationError):
            make_settings(**overrides)

    def test_settings_are_frozen(self, make_settings):
        settings = make_settings()

        with pytest.raises(ValidationError):
            settings.APP_PORT = 9000


class TestAdapterSelection:
    """Tests for driver resolution and DSN conversion."""

    @pytest.mark.parametrize(
        "driver, expected",
        [
            ("sqlite", DatabaseType.SQLITE),
            ("postgres", DatabaseType.POSTGRESQL),
            ("postgresql", DatabaseType.POSTGRESQL),
            ("MySQL", DatabaseType.MYSQL),
        ],
    )
    def test_resolve_driver(self, driver, expected):
        assert resolve_driver(driver) == expected

    def test_unsupported_driver(self, make_settings):
        with pytest.raises(ConfigurationError):
            DatabaseFactory.create_adapter(make_settings(DB_DRIVER="oracle"))

    def test_unsupported_driver_aborts_app_creation(self, make_settings):
        with pytest.raises(ConfigurationError):
            create_app(make_settings(DB_DRIVER="mongodb"))

    def test_factory_builds_each_adapter(self, make_settings):
        sqlite = DatabaseFactory.create_adapter(make_settings())
        postgres = DatabaseFactory.create_adapter(
            make_settings(DB_DRIVER="postgres", DB_DSN="postgres://app:secret@db:5432/catalog")
        )
        mysql = DatabaseFactory.create_adapter(
            make_settings(DB_DRIVER="mysql", DB_DSN="app:secret@tcp(db:3306)/catalog")
        )

        assert isinstance(sqlite, SQLiteAdapter)
        assert isinstance(postgres, PostgreSQLAdapter)
        assert isinstance(mysql, MySQLAdapter)
        assert postgres.database_url == "postgresql+asyncpg://app:secret@db:5432/catalog"

    @pytest.mark.parametrize(
        "dsn, url",
        [
            ("catalog.db", "sqlite+aiosqlite:///catalog.db"),
            ("/tmp/catalog.db", "sqlite+aiosqlite:////tmp/catalog.db"),
            ("sqlite:///catalog.db", "sqlite+aiosqlite:///catalog.db"),
            ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
        ],
    )
    def test_sqlite_urls(self, dsn, url):
        assert to_sqlite_url(dsn) == url

    def test_postgres_keyword_dsn(self):
        url = to_postgres_url("host=db port=5433 user=app password=secret dbname=catalog sslmode=disable")

        assert url == "postgresql+asyncpg://app:secret@db:5433/catalog"

    def test_postgres_rejects_other_scheme(self):
        with pytest.raises(ConfigurationError):
            to_postgres_url("mysql://app@db/catalog")

    def test_mysql_network_dsn(self):
        url = to_mysql_url("app:secret@tcp(db:3306)/catalog?charset=utf8mb4&parseTime=True")

        assert url == "mysql+aiomysql://app:secret@db:3306/catalog?charset=utf8mb4"

    def test_mysql_rejects_garbage(self):
        with pytest.raises(ConfigurationError):
            to_mysql_url("definitely not a dsn")

    @pytest.mark.parametrize(
        "dsn, masked",
        [
            ("postgres://app:secret@db/catalog", "postgres://app:***@db/catalog"),
            ("app:secret@tcp(db:3306)/catalog", "app:***@tcp(db:3306)/catalog"),
            ("host=db password=secret dbname=c", "host=db password=*** dbname=c"),
            ("catalog.db", "catalog.db"),
        ],
    )
    def test_mask_dsn(self, dsn, masked):
        assert mask_dsn(dsn) == masked


class TestLoggingSetup:
    """Tests for logger configuration."""

    def test_file_handlers_closed_on_reconfigure(self, make_settings, tmp_path):
        """A second setup closes the log files opened by the first."""
        import logging

        settings = make_settings(LOG_TO_FILE=True, LOG_DIR=str(tmp_path / "logs"))
        setup_logging(settings)
        opened = [
            handler
            for name in ("catalog_api", ACCESS_LOGGER_NAME)
            for handler in logging.getLogger(name).handlers
            if isinstance(handler, logging.FileHandler)
        ]
        assert len(opened) == 2

        setup_logging(make_settings())

        assert all(handler.stream is None for handler in opened)
        for name in ("catalog_api", ACCESS_LOGGER_NAME):
            handlers = logging.getLogger(name).handlers
            assert not any(isinstance(h, logging.FileHandler) for h in handlers)
