# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract for all database adapters
# Ensures consistent API across SQLite, PostgreSQL, MySQL
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import (
    Any,
    AsyncIterator,
    Dict,
    Generic,
    List,
    Optional,
    Sequence,
    TypeVar,
)

# Type variable for generic database records
T = TypeVar("T")


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Abstract Base Class for Database Adapters.

    Provides a unified interface for CRUD operations across the supported
    relational backends. All concrete adapters must implement these methods
    to ensure consistent behavior.

    Generic Parameters:
        T: The type of records returned by the adapter

    Design Pattern:
        Implements the Adapter Pattern to provide a uniform interface
        for heterogeneous database systems.

    Error Handling:
        Driver/ORM errors are not translated here; the service layer maps
        them to the messages the client sees.

    Example:
        >>> adapter = SQLiteAdapter("catalog.db")
        >>> await adapter.connect()
        >>> brand = await adapter.create("brands", {"name": "Acme", ...})
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish database connection and synchronize the schema.

        Initializes the engine and connection pool, then creates missing
        tables and columns. Must be called before any database operations.

        Raises:
            DatabaseConnectionError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """
        Close database connection.

        Releases all connections in the pool and cleans up resources.
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        pass

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @abstractmethod
    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """
        Provide a transactional session scope.

        Changes are committed on successful exit or rolled back on exception.

        Yields:
            Session object appropriate for the database type

        Raises:
            RuntimeError: If database is not connected
        """
        pass

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def find(
        self,
        collection: str,
        skip: int = 0,
        limit: Optional[int] = None,
        sort_by: str = "id",
        preload: Sequence[str] = (),
    ) -> List[T]:
        """
        Retrieve records in ascending ``sort_by`` order.

        Args:
            collection: Table identifier
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return (None = all)
            sort_by: Column to order by
            preload: Relationship names to eager-load

        Returns:
            List of matching records
        """
        pass

    @abstractmethod
    async def find_by_id(
        self,
        collection: str,
        id: Any,
        preload: Sequence[str] = (),
    ) -> Optional[T]:
        """
        Retrieve a record by its primary identifier.

        Args:
            collection: Table identifier
            id: Primary key value
            preload: Relationship names to eager-load

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """
        Check whether a record with the given primary key exists.

        Args:
            collection: Table identifier
            id: Primary key value

        Returns:
            True if the row exists
        """
        pass

    # ==========================================================================
    # COMMAND OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
        preload: Sequence[str] = (),
    ) -> T:
        """
        Insert a new record.

        Args:
            collection: Table identifier
            data: Column values
            preload: Relationships to load on the returned record

        Returns:
            Created record with its generated ID
        """
        pass

    @abstractmethod
    async def save(
        self,
        collection: str,
        entity: T,
        preload: Sequence[str] = (),
    ) -> T:
        """
        Persist the current state of a previously fetched record.

        Bumps ``updated_at`` even when no other column changed.

        Args:
            collection: Table identifier
            entity: Record returned by an earlier find/create call
            preload: Relationships to load on the returned record

        Returns:
            The saved record
        """
        pass

    @abstractmethod
    async def delete(
        self,
        collection: str,
        entity: T,
    ) -> None:
        """
        Physically delete a previously fetched record.

        Args:
            collection: Table identifier
            entity: Record returned by an earlier find call
        """
        pass
