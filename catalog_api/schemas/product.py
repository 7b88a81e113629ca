# ==============================================================================
# PRODUCT SCHEMAS - Request/Response Models
# ==============================================================================
# Product payloads reference a category and a brand by id
# Responses embed both referenced records
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from catalog_api.schemas.base import PayloadSchema, TimestampSchema
from catalog_api.schemas.brand import BrandResponse
from catalog_api.schemas.category import CategoryResponse


class ProductPayload(PayloadSchema):
    """
    Body for creating or replacing a product.

    Every field is required by the validators; they are optional here so a
    missing field is reported as a violation instead of a malformed body.
    """

    name: Optional[str] = Field(
        None,
        description="Product name (2-100 characters)",
        examples=["iPhone 14"],
    )
    description: Optional[str] = Field(
        None,
        description="Detailed product description",
        examples=["Latest Apple smartphone"],
    )
    price: Optional[float] = Field(
        None,
        description="Selling price, greater than 0",
        allow_inf_nan=False,
        examples=[999.99],
    )
    cover_image: Optional[str] = Field(
        None,
        description="Cover image URL",
        examples=["https://example.com/iphone14.jpg"],
    )
    category_id: Optional[int] = Field(
        None,
        description="Existing category id",
        examples=[2],
    )
    brand_id: Optional[int] = Field(
        None,
        description="Existing brand id",
        examples=[1],
    )


class ProductResponse(TimestampSchema):
    """Product with its category and brand."""

    id: int
    name: str
    description: str
    price: float
    cover_image: str
    category_id: int
    brand_id: int
    category: Optional[CategoryResponse] = None
    brand: Optional[BrandResponse] = None


PRODUCT_EXAMPLE = {
    "name": "iPhone 14",
    "description": "Latest Apple smartphone",
    "price": 999.99,
    "cover_image": "https://example.com/iphone14.jpg",
    "category_id": 2,
    "brand_id": 1,
}
