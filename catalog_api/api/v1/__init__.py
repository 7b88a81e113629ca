# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

Version 1 API endpoint implementations.
"""

from catalog_api.api.v1.brands import router as brands_router
from catalog_api.api.v1.categories import router as categories_router
from catalog_api.api.v1.products import router as products_router

__all__ = [
    "brands_router",
    "categories_router",
    "products_router",
]
