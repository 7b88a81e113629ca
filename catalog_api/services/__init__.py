# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Services
========

Business logic per resource:
- BrandService
- CategoryService
- ProductService (reference checks, pagination)
"""

from catalog_api.services.base_service import BaseService
from catalog_api.services.brand_service import BrandService
from catalog_api.services.category_service import CategoryService
from catalog_api.services.product_service import ProductService

__all__ = [
    "BaseService",
    "BrandService",
    "CategoryService",
    "ProductService",
]
