# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Abstract service implementing the request lifecycle for one entity:
# parse -> validate -> check references -> persist -> respond
# ==============================================================================

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.core.constants import DatabaseConstants, ErrorMessages
from catalog_api.core.exceptions import (
    BadRequestError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.utils.helpers import parse_positive_int

logger = logging.getLogger(__name__)

# Type variables for generic service
EntityType = TypeVar("EntityType")
PayloadSchemaType = TypeVar("PayloadSchemaType", bound=BaseModel)
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseService(ABC, Generic[EntityType, PayloadSchemaType, ResponseSchemaType]):
    """
    Abstract base service providing standard CRUD operations.

    Handlers pass the raw body and path id through unchanged, so the order
    of checks lives in one place: on update the target row is looked up
    before the body is parsed, which makes 404 win over 400.

    Generic Parameters:
        EntityType: Domain entity/model type
        PayloadSchemaType: Pydantic schema for create/replace bodies
        ResponseSchemaType: Pydantic schema for responses

    Class Attributes:
        payload_schema: Body model
        response_schema: Response model
        entity_name: Singular display name used in messages ("Brand")
        entity_plural: Plural display name used in messages ("Brands")
        preload: Relationships loaded on every returned entity

    Example:
        >>> class BrandService(BaseService[Brand, BrandPayload, BrandResponse]):
        ...     payload_schema = BrandPayload
        ...     response_schema = BrandResponse
        ...     entity_name, entity_plural = "Brand", "Brands"
    """

    payload_schema: Type[PayloadSchemaType]
    response_schema: Type[ResponseSchemaType]
    entity_name: str
    entity_plural: str
    preload: Tuple[str, ...] = ()

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        collection_name: str,
    ) -> None:
        """
        Initialize service.

        Args:
            adapter: Database adapter instance
            collection_name: Table/collection name
        """
        self._adapter = adapter
        self._collection_name = collection_name

    # ==========================================================================
    # ABSTRACT METHODS
    # ==========================================================================

    @abstractmethod
    def _validate(self, payload: PayloadSchemaType) -> List[str]:
        """
        Check field rules.

        Returns:
            Violated rules, empty when the payload is valid
        """
        pass

    async def _check_references(self, payload: PayloadSchemaType) -> None:
        """Confirm referenced rows exist. No references by default."""
        return None

    def _to_response(self, entity: Any) -> ResponseSchemaType:
        """Convert entity to response schema."""
        return self.response_schema.model_validate(entity, from_attributes=True)

    # ==========================================================================
    # LIFECYCLE STEPS
    # ==========================================================================

    def _parse(self, body: bytes, message: str) -> PayloadSchemaType:
        """
        Decode the JSON body into the payload model.

        Raises:
            BadRequestError: Body is not a JSON object of the right types
        """
        try:
            return self.payload_schema.model_validate_json(body or b"")
        except PydanticValidationError as e:
            logger.debug(f"Rejected {self.entity_name.lower()} body: {e}")
            raise BadRequestError(message) from e

    def _prepare(self, body: bytes, message: str) -> PayloadSchemaType:
        """
        Parse then validate a body.

        Raises:
            BadRequestError: Malformed body
            ValidationError: Field rules violated
        """
        payload = self._parse(body, message)
        violations = self._validate(payload)
        if violations:
            raise ValidationError(violations)
        return payload

    def _parse_id(self, raw_id: Any) -> int:
        """
        Interpret a path id.

        Raises:
            NotFoundError: Id is not a positive integer the store can hold
        """
        entity_id = parse_positive_int(raw_id)
        if entity_id is None or entity_id > DatabaseConstants.MAX_ID:
            raise self._not_found(raw_id)
        return entity_id

    def _not_found(self, entity_id: Any) -> NotFoundError:
        return NotFoundError(
            message=f"{self.entity_name} not found",
            resource_type=self._collection_name,
            resource_id=entity_id,
        )

    async def _fetch(self, raw_id: Any, preload: Tuple[str, ...] = ()) -> EntityType:
        """
        Load the target row of a get/update/delete.

        Raises:
            NotFoundError: No row with that id
            DatabaseError: Lookup failed
        """
        entity_id = self._parse_id(raw_id)
        try:
            entity = await self._adapter.find_by_id(
                self._collection_name, entity_id, preload=preload
            )
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.entity_name.lower()} {entity_id}: {e}")
            raise DatabaseError(f"Error retrieving {self.entity_name.lower()}") from e

        if entity is None:
            raise self._not_found(entity_id)
        return entity

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ResponseSchemaType]:
        """
        Retrieve entities in ascending id order.

        Args:
            skip: Records to skip
            limit: Maximum records (None = all)
        """
        try:
            entities = await self._adapter.find(
                self._collection_name,
                skip=skip,
                limit=limit,
                preload=self.preload,
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch {self._collection_name}: {e}")
            raise DatabaseError(f"Failed to fetch {self.entity_plural.lower()}") from e
        return [self._to_response(entity) for entity in entities]

    async def get_by_id(self, raw_id: Any) -> ResponseSchemaType:
        """
        Retrieve entity by ID.

        Raises:
            NotFoundError: If entity not found
        """
        entity = await self._fetch(raw_id, preload=self.preload)
        return self._to_response(entity)

    async def create(self, body: bytes) -> ResponseSchemaType:
        """
        Create a new entity from a raw JSON body.

        Raises:
            BadRequestError: Malformed body or unknown reference
            ValidationError: Field rules violated
            DatabaseError: Insert failed
        """
        payload = self._prepare(body, ErrorMessages.INVALID_REQUEST_BODY)
        try:
            await self._check_references(payload)
            entity = await self._adapter.create(
                self._collection_name,
                payload.model_dump(),
                preload=self.preload,
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to create {self.entity_name.lower()}: {e}")
            raise DatabaseError(f"Failed to create {self.entity_name.lower()}") from e

        logger.info(f"Created {self.entity_name.lower()} id={entity.id}")
        return self._to_response(entity)

    async def update(self, raw_id: Any, body: bytes) -> ResponseSchemaType:
        """
        Replace every mutable field of an existing entity.

        Raises:
            NotFoundError: If entity not found (checked before the body)
            BadRequestError: Malformed body or unknown reference
            ValidationError: Field rules violated
            DatabaseError: Save failed
        """
        # Loaded without relationships so the merge only carries columns
        existing = await self._fetch(raw_id)
        payload = self._prepare(body, ErrorMessages.INVALID_INPUT)

        for field, value in payload.model_dump().items():
            setattr(existing, field, value)

        try:
            await self._check_references(payload)
            entity = await self._adapter.save(
                self._collection_name,
                existing,
                preload=self.preload,
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to update {self.entity_name.lower()}: {e}")
            raise DatabaseError(f"Failed to update {self.entity_name.lower()}") from e

        logger.info(f"Updated {self.entity_name.lower()} id={entity.id}")
        return self._to_response(entity)

    async def delete(self, raw_id: Any) -> None:
        """
        Physically delete an entity.

        Raises:
            NotFoundError: If entity not found
            DatabaseError: Delete failed (e.g. rows still reference it)
        """
        existing = await self._fetch(raw_id)
        try:
            await self._adapter.delete(self._collection_name, existing)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete {self.entity_name.lower()}: {e}")
            raise DatabaseError(f"Failed to delete {self.entity_name.lower()}") from e

        logger.info(f"Deleted {self.entity_name.lower()} id={existing.id}")
