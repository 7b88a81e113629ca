# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

SQLAlchemy ORM tables for the catalog:
- Brand: Manufacturers
- Category: Product groupings
- Product: Catalog items referencing one Brand and one Category
"""

from catalog_api.domain_models.base import SQLBase, TimestampMixin
from catalog_api.domain_models.brand import Brand
from catalog_api.domain_models.category import Category
from catalog_api.domain_models.product import Product

__all__ = [
    "SQLBase",
    "TimestampMixin",
    "Brand",
    "Category",
    "Product",
]
