# ==============================================================================
# BRAND SERVICE - Brand Management
# ==============================================================================

from __future__ import annotations

from typing import List

from catalog_api.core.constants import DatabaseConstants
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.domain_models.brand import Brand
from catalog_api.schemas.brand import BrandPayload, BrandResponse
from catalog_api.services.base_service import BaseService
from catalog_api.services.validators import validate_brand


class BrandService(BaseService[Brand, BrandPayload, BrandResponse]):
    """CRUD operations for brands."""

    payload_schema = BrandPayload
    response_schema = BrandResponse
    entity_name = "Brand"
    entity_plural = "Brands"

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        super().__init__(adapter, DatabaseConstants.BRANDS_COLLECTION)

    def _validate(self, payload: BrandPayload) -> List[str]:
        return validate_brand(payload)
