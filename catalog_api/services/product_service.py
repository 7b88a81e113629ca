# ==============================================================================
# PRODUCT SERVICE - Catalog Item Management
# ==============================================================================
# Products reference a category and a brand; both must exist on write
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, List

from catalog_api.core.constants import APIConstants, DatabaseConstants, ErrorMessages
from catalog_api.core.exceptions import ReferenceNotFoundError
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.domain_models.product import Product
from catalog_api.schemas.product import ProductPayload, ProductResponse
from catalog_api.services.base_service import BaseService
from catalog_api.services.validators import validate_product
from catalog_api.utils.helpers import calculate_offset, parse_positive_int

logger = logging.getLogger(__name__)


class ProductService(BaseService[Product, ProductPayload, ProductResponse]):
    """
    Product service with referential checks and pagination.

    Reads always include the product's category and brand.
    """

    payload_schema = ProductPayload
    response_schema = ProductResponse
    entity_name = "Product"
    entity_plural = "Products"
    preload = ("category", "brand")

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.PRODUCTS_COLLECTION)

    def _validate(self, payload: ProductPayload) -> List[str]:
        return validate_product(payload)

    async def _check_references(self, payload: ProductPayload) -> None:
        """
        Verify the category, then the brand.

        The check and the following write are separate statements, so a
        reference deleted in between is only caught by the database.

        Raises:
            ReferenceNotFoundError: Category or brand does not exist
        """
        if not await self._adapter.exists(
            DatabaseConstants.CATEGORIES_COLLECTION, payload.category_id
        ):
            raise ReferenceNotFoundError(
                ErrorMessages.INVALID_CATEGORY_ID,
                field="category_id",
                reference_id=payload.category_id,
            )
        if not await self._adapter.exists(
            DatabaseConstants.BRANDS_COLLECTION, payload.brand_id
        ):
            raise ReferenceNotFoundError(
                ErrorMessages.INVALID_BRAND_ID,
                field="brand_id",
                reference_id=payload.brand_id,
            )

    async def get_page(self, page: Any = None, limit: Any = None) -> List[ProductResponse]:
        """
        Retrieve one page of products in id order.

        Missing, malformed or non-positive values fall back to the defaults
        (page 1, limit 10).

        Args:
            page: Raw ``page`` query value
            limit: Raw ``limit`` query value
        """
        page_number = parse_positive_int(page, APIConstants.DEFAULT_PAGE)
        page_size = min(
            parse_positive_int(limit, APIConstants.DEFAULT_PAGE_SIZE),
            DatabaseConstants.MAX_ID,
        )
        skip = calculate_offset(page_number, page_size)
        # Beyond any row the store can hold
        if skip > DatabaseConstants.MAX_ID:
            return []
        return await self.get_all(skip=skip, limit=page_size)
