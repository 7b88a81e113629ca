# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

Provides unified interface implementations for the relational backends:
- BaseDatabaseAdapter: Abstract interface definition
- SQLAlchemyAdapter: Shared SQLAlchemy async implementation
- SQLiteAdapter: SQLite using aiosqlite
- PostgreSQLAdapter: PostgreSQL using asyncpg
- MySQLAdapter: MySQL using aiomysql
"""

from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter
from catalog_api.database.adapters.sqlite_adapter import SQLiteAdapter
from catalog_api.database.adapters.postgresql_adapter import PostgreSQLAdapter
from catalog_api.database.adapters.mysql_adapter import MySQLAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "SQLAlchemyAdapter",
    "SQLiteAdapter",
    "PostgreSQLAdapter",
    "MySQLAdapter",
]
