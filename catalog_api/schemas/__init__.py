# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Schemas
=======

Pydantic models for request payloads, responses and the envelope.
"""

from catalog_api.schemas.base import (
    APIResponse,
    BaseSchema,
    HealthResponse,
    PayloadSchema,
    TimestampSchema,
)
from catalog_api.schemas.brand import BrandPayload, BrandResponse
from catalog_api.schemas.category import CategoryPayload, CategoryResponse
from catalog_api.schemas.product import ProductPayload, ProductResponse

__all__ = [
    "APIResponse",
    "BaseSchema",
    "HealthResponse",
    "PayloadSchema",
    "TimestampSchema",
    "BrandPayload",
    "BrandResponse",
    "CategoryPayload",
    "CategoryResponse",
    "ProductPayload",
    "ProductResponse",
]
