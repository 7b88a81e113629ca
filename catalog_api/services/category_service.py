# ==============================================================================
# CATEGORY SERVICE - Category Management
# ==============================================================================

from __future__ import annotations

from typing import List

from catalog_api.core.constants import DatabaseConstants
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.domain_models.category import Category
from catalog_api.schemas.category import CategoryPayload, CategoryResponse
from catalog_api.services.base_service import BaseService
from catalog_api.services.validators import validate_category


class CategoryService(BaseService[Category, CategoryPayload, CategoryResponse]):
    """CRUD operations for categories."""

    payload_schema = CategoryPayload
    response_schema = CategoryResponse
    entity_name = "Category"
    entity_plural = "Categories"

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.CATEGORIES_COLLECTION)

    def _validate(self, payload: CategoryPayload) -> List[str]:
        return validate_category(payload)
