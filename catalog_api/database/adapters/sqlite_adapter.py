# ==============================================================================
# SQLITE ADAPTER - Async SQLite with aiosqlite
# ==============================================================================
# File-based database for development and testing
# ==============================================================================

from __future__ import annotations

import logging

from catalog_api.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter

logger = logging.getLogger(__name__)

SQLITE_SCHEME = "sqlite+aiosqlite"


def to_sqlite_url(dsn: str) -> str:
    """
    Convert a file path or ``sqlite://`` DSN to an aiosqlite URL.

    Example:
        >>> to_sqlite_url("catalog.db")
        'sqlite+aiosqlite:///catalog.db'
    """
    if dsn.startswith(f"{SQLITE_SCHEME}://"):
        return dsn
    if dsn.startswith("sqlite://"):
        return f"{SQLITE_SCHEME}://" + dsn[len("sqlite://"):]
    return f"{SQLITE_SCHEME}:///{dsn}"


class SQLiteAdapter(SQLAlchemyAdapter):
    """
    SQLite adapter using aiosqlite.

    Features:
        - File-based persistence
        - Automatic table creation
        - Shared connection across the event loop threads

    Example:
        >>> adapter = SQLiteAdapter("./data/catalog.db")
        >>> await adapter.connect()
    """

    dialect_name = "sqlite"

    def __init__(
        self,
        dsn: str,
        echo: bool = False,
        slow_query_ms: int = 200,
    ) -> None:
        super().__init__(
            database_url=to_sqlite_url(dsn),
            echo=echo,
            slow_query_ms=slow_query_ms,
            engine_options={"connect_args": {"check_same_thread": False}},
        )
