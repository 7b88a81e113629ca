# ==============================================================================
# SQLALCHEMY ADAPTER - Shared Async Implementation
# ==============================================================================
# One implementation of the adapter contract for every relational engine
# Engine-specific subclasses only resolve the URL and engine options
# ==============================================================================

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence, Type

from sqlalchemy import event, inspect, select, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import selectinload

from catalog_api.core.exceptions import DatabaseConnectionError
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.domain_models.base import SQLBase, TimestampMixin

logger = logging.getLogger(__name__)


def sync_schema(connection: Connection) -> None:
    """
    Create missing tables and add missing columns.

    Additive only: existing columns are never altered or dropped, and
    added columns are nullable so they can be appended to populated tables.

    Args:
        connection: Synchronous connection (run via ``run_sync``)
    """
    SQLBase.metadata.create_all(connection)

    inspector = inspect(connection)
    preparer = connection.dialect.identifier_preparer
    for table in SQLBase.metadata.sorted_tables:
        existing = {column["name"] for column in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in existing:
                continue
            column_type = column.type.compile(dialect=connection.dialect)
            connection.execute(
                text(
                    f"ALTER TABLE {preparer.format_table(table)} "
                    f"ADD COLUMN {preparer.format_column(column)} {column_type}"
                )
            )
            logger.warning(f"Added missing column {table.name}.{column.name}")


class SQLAlchemyAdapter(BaseDatabaseAdapter[Any]):
    """
    Relational adapter using SQLAlchemy 2.0 async sessions.

    Features:
        - Automatic schema synchronization on connect
        - Relationship preloading with ``selectinload``
        - Slow statement logging through cursor events

    Attributes:
        _database_url: Async SQLAlchemy connection URL
        _engine: SQLAlchemy async engine
        _session_factory: Session factory for creating sessions
        _model_registry: Mapping of collection names to model classes

    Example:
        >>> adapter = SQLiteAdapter("catalog.db")
        >>> await adapter.connect()  # Creates tables automatically
        >>> adapter.register_model("brands", Brand)
        >>> brand = await adapter.create("brands", {"name": "Acme", ...})
    """

    dialect_name = "sql"

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        slow_query_ms: int = 200,
        engine_options: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            database_url: Async SQLAlchemy URL
            echo: Echo SQL statements
            slow_query_ms: Threshold for slow statement warnings (0 disables)
            engine_options: Extra keyword arguments for the engine
        """
        self._database_url = database_url
        self._echo = echo
        self._slow_query_ms = slow_query_ms
        self._engine_options = engine_options or {}
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._model_registry: Dict[str, Type[SQLBase]] = {}

    @property
    def database_url(self) -> str:
        """Connection URL used by the engine."""
        return self._database_url

    # ==========================================================================
    # MODEL REGISTRY
    # ==========================================================================

    def register_model(
        self,
        name: str,
        model: Type[SQLBase],
    ) -> None:
        """
        Register a SQLAlchemy model for table mapping.

        Args:
            name: Collection/table identifier
            model: SQLAlchemy model class
        """
        self._model_registry[name] = model
        logger.debug(f"Registered model '{name}' -> {model.__name__}")

    def _get_model(self, collection: str) -> Type[SQLBase]:
        """
        Get registered model by collection name.

        Raises:
            ValueError: If model not registered
        """
        if collection not in self._model_registry:
            raise ValueError(
                f"Model '{collection}' not registered. "
                f"Available models: {list(self._model_registry.keys())}"
            )
        return self._model_registry[collection]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize database engine and synchronize the schema.

        Raises:
            DatabaseConnectionError: If the engine cannot connect or the
                schema cannot be synchronized
        """
        try:
            self._engine = create_async_engine(
                self._database_url,
                echo=self._echo,
                **self._engine_options,
            )
            if self._slow_query_ms:
                self._install_slow_query_log(self._engine)

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with self._engine.begin() as conn:
                await conn.run_sync(sync_schema)

            logger.info(f"{self.dialect_name} adapter connected and schema synchronized")

        except Exception as e:
            logger.error(f"Failed to connect to {self.dialect_name}: {e}")
            if self._engine is not None:
                await self._engine.dispose()
            raise DatabaseConnectionError(
                f"{self.dialect_name} connection failed: {e}"
            ) from e

    async def disconnect(self) -> None:
        """Close database connections and dispose engine."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info(f"{self.dialect_name} adapter disconnected")

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"{self.dialect_name} health check failed: {e}")
            return False

    def _install_slow_query_log(self, engine: AsyncEngine) -> None:
        """Warn about statements slower than the configured threshold."""
        threshold = self._slow_query_ms

        @event.listens_for(engine.sync_engine, "before_cursor_execute")
        def _start_timer(conn, cursor, statement, parameters, context, executemany):
            conn.info.setdefault("query_start_time", []).append(time.perf_counter())

        @event.listens_for(engine.sync_engine, "after_cursor_execute")
        def _stop_timer(conn, cursor, statement, parameters, context, executemany):
            started = conn.info["query_start_time"].pop()
            elapsed_ms = (time.perf_counter() - started) * 1000
            if elapsed_ms >= threshold:
                logger.warning(f"Slow query ({elapsed_ms:.1f}ms): {statement}")

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide transactional session scope.

        Commits on successful exit, rolls back on exception.

        Raises:
            RuntimeError: If database not connected
        """
        if not self._session_factory:
            raise RuntimeError(
                "Database not connected. Call connect() first."
            )

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    def _preload_options(self, model: Type[SQLBase], preload: Sequence[str]) -> list:
        return [selectinload(getattr(model, name)) for name in preload]

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def find(
        self,
        collection: str,
        skip: int = 0,
        limit: Optional[int] = None,
        sort_by: str = "id",
        preload: Sequence[str] = (),
    ) -> List[Any]:
        """Retrieve records in order, with optional offset/limit."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = (
                select(model)
                .options(*self._preload_options(model, preload))
                .order_by(getattr(model, sort_by))
            )
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)

            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_by_id(
        self,
        collection: str,
        id: Any,
        preload: Sequence[str] = (),
    ) -> Optional[Any]:
        """Retrieve record by primary key."""
        model = self._get_model(collection)

        async with self.session() as session:
            if not preload:
                return await session.get(model, id)

            result = await session.execute(
                select(model)
                .options(*self._preload_options(model, preload))
                .where(model.id == id)
            )
            return result.scalar_one_or_none()

    async def exists(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Check whether the primary key is present."""
        model = self._get_model(collection)

        async with self.session() as session:
            result = await session.execute(
                select(model.id).where(model.id == id)
            )
            return result.scalar_one_or_none() is not None

    # ==========================================================================
    # COMMAND OPERATIONS
    # ==========================================================================

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
        preload: Sequence[str] = (),
    ) -> Any:
        """Insert a new record."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = model(**data)
            session.add(instance)
            await session.flush()
            await session.refresh(instance)

        if preload:
            return await self.find_by_id(collection, instance.id, preload)
        return instance

    async def save(
        self,
        collection: str,
        entity: Any,
        preload: Sequence[str] = (),
    ) -> Any:
        """Merge a detached record back and write its current state."""
        self._get_model(collection)

        async with self.session() as session:
            merged = await session.merge(entity)
            if isinstance(merged, TimestampMixin):
                merged.touch()
            await session.flush()
            await session.refresh(merged)

        if preload:
            return await self.find_by_id(collection, merged.id, preload)
        return merged

    async def delete(
        self,
        collection: str,
        entity: Any,
    ) -> None:
        """Delete a previously fetched record."""
        self._get_model(collection)

        async with self.session() as session:
            merged = await session.merge(entity)
            await session.delete(merged)
