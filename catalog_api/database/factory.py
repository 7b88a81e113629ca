# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation
# ==============================================================================
# Factory Pattern for creating database adapters from settings
# The application owns the adapter; the factory keeps no cache
# ==============================================================================

from __future__ import annotations

import logging

from catalog_api.core.constants import DatabaseConstants
from catalog_api.core.exceptions import ConfigurationError
from catalog_api.core.settings import DatabaseType, Settings
from catalog_api.database.adapters.mysql_adapter import MySQLAdapter
from catalog_api.database.adapters.postgresql_adapter import PostgreSQLAdapter
from catalog_api.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from catalog_api.database.adapters.sqlite_adapter import SQLiteAdapter
from catalog_api.domain_models import Brand, Category, Product

logger = logging.getLogger(__name__)

# Alternative spellings accepted for DB_DRIVER
DRIVER_ALIASES = {
    "postgresql": DatabaseType.POSTGRESQL,
}


def resolve_driver(driver: str) -> DatabaseType:
    """
    Map a DB_DRIVER string to a supported backend.

    Raises:
        ConfigurationError: If the driver is not supported
    """
    driver = driver.strip().lower()
    if driver in DRIVER_ALIASES:
        return DRIVER_ALIASES[driver]
    try:
        return DatabaseType(driver)
    except ValueError:
        raise ConfigurationError(f"Unsupported DB driver: {driver}") from None


class DatabaseFactory:
    """
    Factory class for creating database adapters.

    Features:
        - Adapter selection based on DB_DRIVER
        - DSN conversion to the async driver URL
        - Domain model registration

    Example:
        >>> adapter = DatabaseFactory.create_adapter(settings)
        >>> await adapter.connect()
        >>> brands = await adapter.find("brands")
    """

    @classmethod
    def create_adapter(cls, settings: Settings) -> SQLAlchemyAdapter:
        """
        Create the adapter described by the settings.

        The adapter is returned unconnected; call ``connect()`` at startup.

        Args:
            settings: Loaded application settings

        Returns:
            Database adapter with all catalog models registered

        Raises:
            ConfigurationError: If the driver or DSN is not supported
        """
        db_type = resolve_driver(settings.DB_DRIVER)

        adapter: SQLAlchemyAdapter
        if db_type == DatabaseType.SQLITE:
            adapter = SQLiteAdapter(
                settings.DB_DSN,
                echo=settings.DB_ECHO,
                slow_query_ms=settings.DB_SLOW_QUERY_MS,
            )
        elif db_type == DatabaseType.POSTGRESQL:
            adapter = PostgreSQLAdapter(
                settings.DB_DSN,
                echo=settings.DB_ECHO,
                slow_query_ms=settings.DB_SLOW_QUERY_MS,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_recycle=settings.DB_POOL_RECYCLE,
            )
        else:
            adapter = MySQLAdapter(
                settings.DB_DSN,
                echo=settings.DB_ECHO,
                slow_query_ms=settings.DB_SLOW_QUERY_MS,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_recycle=settings.DB_POOL_RECYCLE,
            )

        cls._register_models(adapter)
        logger.info(f"Created {db_type.value} adapter")
        return adapter

    @classmethod
    def _register_models(cls, adapter: SQLAlchemyAdapter) -> None:
        """Register all domain models with the adapter."""
        adapter.register_model(DatabaseConstants.BRANDS_COLLECTION, Brand)
        adapter.register_model(DatabaseConstants.CATEGORIES_COLLECTION, Category)
        adapter.register_model(DatabaseConstants.PRODUCTS_COLLECTION, Product)
