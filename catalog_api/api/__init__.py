# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

"""
API Module
==========

HTTP routes:
- /health: liveness and runtime statistics
- /api/v1/products, /api/v1/categories, /api/v1/brands: CRUD resources
"""

from catalog_api.api.router import build_api_router

__all__ = ["build_api_router"]
