# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for type-safe environment variable management
# Values come from .env and the process environment, with defaults
# ==============================================================================

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from catalog_api.utils.helpers import parse_duration


class DatabaseType(str, Enum):
    """
    Supported relational backends.

    Attributes:
        SQLITE: File-based database for development/testing
        POSTGRESQL: Production-grade relational database
        MYSQL: MySQL / MariaDB
    """
    SQLITE = "sqlite"
    POSTGRESQL = "postgres"
    MYSQL = "mysql"


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application Settings Configuration.

    Manages all environment variables with type validation and defaults.
    The instance is frozen once loaded; build a new one to change values.

    Attributes:
        APP_PORT: Port the HTTP server listens on
        ENVIRONMENT: Current deployment environment
        DB_DRIVER: Relational backend identifier (sqlite, postgres, mysql)
        DB_DSN: SQLite file path or SQLAlchemy connection URL

    Example:
        >>> from catalog_api.core.settings import get_settings
        >>> get_settings().APP_PORT
        8080
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # --------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # --------------------------------------------------------------------------
    APP_NAME: str = Field(
        default="Product Catalog API",
        description="Application display name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application semantic version"
    )
    APP_HOST: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to"
    )
    APP_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port the HTTP server listens on"
    )
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current deployment environment"
    )

    # --------------------------------------------------------------------------
    # API CONFIGURATION
    # --------------------------------------------------------------------------
    API_V1_PREFIX: str = Field(
        default="/api/v1",
        description="API version 1 route prefix"
    )
    API_DESCRIPTION: str = Field(
        default="CRUD API for managing products, categories, and brands.",
        description="OpenAPI documentation description"
    )
    DOCS_ENABLED: bool = Field(
        default=True,
        description="Expose /docs, /redoc and /openapi.json"
    )

    # --------------------------------------------------------------------------
    # DATABASE
    # --------------------------------------------------------------------------
    DB_DRIVER: str = Field(
        default="sqlite",
        description="Relational backend (sqlite, postgres, mysql)"
    )
    DB_DSN: str = Field(
        default="catalog.db",
        description="SQLite path or SQLAlchemy connection URL"
    )
    DB_ECHO: bool = Field(
        default=False,
        description="Echo every SQL statement to the log"
    )
    DB_SLOW_QUERY_MS: int = Field(
        default=200,
        ge=0,
        description="Statements slower than this are logged as warnings"
    )
    DB_POOL_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Connection pool size (server databases only)"
    )
    DB_MAX_OVERFLOW: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Maximum overflow connections beyond pool size"
    )
    DB_POOL_RECYCLE: int = Field(
        default=3600,
        ge=60,
        description="Connection recycle time in seconds"
    )

    # --------------------------------------------------------------------------
    # CORS SETTINGS
    # --------------------------------------------------------------------------
    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Allowed CORS origins in production (comma-separated)"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True,
        description="Allow credentials in CORS requests"
    )

    # --------------------------------------------------------------------------
    # SECURITY HEADERS & RATE LIMITING
    # --------------------------------------------------------------------------
    ENABLE_HELMET: bool = Field(
        default=True,
        description="Send security headers in production"
    )
    ENABLE_RATE_LIMITER: bool = Field(
        default=True,
        description="Enable rate limiting in production"
    )
    RATE_LIMIT_MAX: int = Field(
        default=100,
        ge=1,
        description="Maximum requests per window per client"
    )
    RATE_LIMIT_WINDOW: float = Field(
        default=60.0,
        gt=0,
        description="Rate limit window; seconds or a duration such as '1m'"
    )

    # --------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # --------------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    LOG_TO_FILE: bool = Field(
        default=True,
        description="Also write logs to LOG_DIR/LOG_FILE"
    )
    LOG_DIR: str = Field(
        default="logs",
        description="Directory for the log file"
    )
    LOG_FILE: str = Field(
        default="server.log",
        description="Log file name"
    )

    # --------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # --------------------------------------------------------------------------
    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    # --------------------------------------------------------------------------
    # VALIDATORS
    # --------------------------------------------------------------------------
    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def parse_frontend_origins(cls, v):
        """Parse CORS origins from a comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("RATE_LIMIT_WINDOW", mode="before")
    @classmethod
    def parse_rate_limit_window(cls, v):
        """Accept bare seconds or a duration string like '30s', '1m', '1h'."""
        if isinstance(v, str):
            return parse_duration(v)
        return v

    @field_validator("DB_DRIVER")
    @classmethod
    def normalize_db_driver(cls, v: str) -> str:
        """Lower-case the driver name; support is checked by the factory."""
        return v.strip().lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Loaded once per process from .env and the environment.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
