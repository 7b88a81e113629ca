# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================
# Combines the health route and all API version routers
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from catalog_api.api.health import router as health_router
from catalog_api.api.v1 import (
    brands_router,
    categories_router,
    products_router,
)


def build_api_router(api_prefix: str) -> APIRouter:
    """
    Create the application router.

    Args:
        api_prefix: Mount point for the v1 resources (e.g. ``/api/v1``)
    """
    api_router = APIRouter()

    # Health lives outside the versioned prefix
    api_router.include_router(health_router)

    # Include v1 routers with API prefix
    api_router.include_router(products_router, prefix=api_prefix)
    api_router.include_router(categories_router, prefix=api_prefix)
    api_router.include_router(brands_router, prefix=api_prefix)

    return api_router
