# ==============================================================================
# POSTGRESQL ADAPTER - Async PostgreSQL with asyncpg
# ==============================================================================
# Production relational store with connection pooling
# ==============================================================================

from __future__ import annotations

import logging
import shlex

from sqlalchemy.engine import URL

from catalog_api.core.exceptions import ConfigurationError
from catalog_api.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter

logger = logging.getLogger(__name__)

POSTGRES_SCHEME = "postgresql+asyncpg"


def to_postgres_url(dsn: str) -> str:
    """
    Convert a PostgreSQL DSN to an asyncpg SQLAlchemy URL.

    Accepts ``postgres://`` or ``postgresql://`` URLs as well as libpq
    keyword strings (``host=db user=app password=secret dbname=catalog``).

    Raises:
        ConfigurationError: If the DSN is neither form
    """
    if "://" in dsn:
        scheme, rest = dsn.split("://", 1)
        if scheme not in {"postgres", "postgresql", POSTGRES_SCHEME}:
            raise ConfigurationError(f"Not a PostgreSQL DSN: {scheme}://...")
        return f"{POSTGRES_SCHEME}://{rest}"

    try:
        pairs = dict(part.split("=", 1) for part in shlex.split(dsn))
    except ValueError as e:
        raise ConfigurationError(f"Malformed PostgreSQL DSN: {e}") from e

    ignored = set(pairs) - {"host", "port", "user", "password", "dbname"}
    if ignored:
        logger.warning(f"Ignoring unsupported PostgreSQL DSN keys: {sorted(ignored)}")

    port = pairs.get("port")
    return URL.create(
        POSTGRES_SCHEME,
        username=pairs.get("user"),
        password=pairs.get("password"),
        host=pairs.get("host"),
        port=int(port) if port else None,
        database=pairs.get("dbname"),
    ).render_as_string(hide_password=False)


class PostgreSQLAdapter(SQLAlchemyAdapter):
    """
    PostgreSQL adapter using asyncpg.

    Example:
        >>> adapter = PostgreSQLAdapter("postgres://app:secret@db/catalog")
        >>> await adapter.connect()
    """

    dialect_name = "postgres"

    def __init__(
        self,
        dsn: str,
        echo: bool = False,
        slow_query_ms: int = 200,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_recycle: int = 3600,
    ) -> None:
        super().__init__(
            database_url=to_postgres_url(dsn),
            echo=echo,
            slow_query_ms=slow_query_ms,
            engine_options={
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": pool_recycle,
                "pool_pre_ping": True,
            },
        )
