# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for database and service access
# ==============================================================================

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from catalog_api.core.settings import Settings
from catalog_api.database.adapters.base_adapter import BaseDatabaseAdapter
from catalog_api.services.brand_service import BrandService
from catalog_api.services.category_service import CategoryService
from catalog_api.services.product_service import ProductService


# ==============================================================================
# APPLICATION STATE DEPENDENCIES
# ==============================================================================

async def get_adapter(request: Request) -> BaseDatabaseAdapter:
    """
    Get database adapter dependency.

    Returns the adapter owned by the running application.
    """
    return request.app.state.db


async def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


# Annotated types
DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_brand_service(
    adapter: DatabaseDep,
) -> BrandService:
    """Get brand service instance."""
    return BrandService(adapter)


async def get_category_service(
    adapter: DatabaseDep,
) -> CategoryService:
    """Get category service instance."""
    return CategoryService(adapter)


async def get_product_service(
    adapter: DatabaseDep,
) -> ProductService:
    """Get product service instance."""
    return ProductService(adapter)


# Annotated service types
BrandServiceDep = Annotated[BrandService, Depends(get_brand_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
