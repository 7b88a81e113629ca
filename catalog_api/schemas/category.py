# ==============================================================================
# CATEGORY SCHEMAS - Request/Response Models
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from catalog_api.schemas.base import PayloadSchema, TimestampSchema


class CategoryPayload(PayloadSchema):
    """Body for creating or replacing a category."""

    title: Optional[str] = Field(
        None,
        description="Category title (2-100 characters)",
        examples=["Smartphones"],
    )
    cover_image: Optional[str] = Field(
        None,
        description="Cover image URL",
        examples=["https://example.com/smartphones.jpg"],
    )


class CategoryResponse(TimestampSchema):
    """Category as returned by the API."""

    id: int
    title: str
    cover_image: str


CATEGORY_EXAMPLE = {
    "title": "Smartphones",
    "cover_image": "https://example.com/smartphones.jpg",
}
