# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Database Abstraction Layer with multi-engine support
# ==============================================================================

"""
Database Module
===============

Provides a unified database abstraction layer supporting:
- SQLite (development/testing)
- PostgreSQL (production)
- MySQL (production)

Key Components:
- Adapters: Engine-specific URL and pool configuration
- Factory: Adapter instantiation from settings
"""

from catalog_api.database.factory import DatabaseFactory
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]
