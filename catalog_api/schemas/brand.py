# ==============================================================================
# BRAND SCHEMAS - Request/Response Models
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field

from catalog_api.schemas.base import PayloadSchema, TimestampSchema


class BrandPayload(PayloadSchema):
    """Body for creating or replacing a brand."""

    name: Optional[str] = Field(
        None,
        description="Brand name (2-100 characters)",
        examples=["Apple"],
    )
    cover_image: Optional[str] = Field(
        None,
        description="Cover image URL",
        examples=["https://example.com/apple.png"],
    )


class BrandResponse(TimestampSchema):
    """Brand as returned by the API."""

    id: int
    name: str
    cover_image: str


BRAND_EXAMPLE = {
    "name": "Apple",
    "cover_image": "https://example.com/apple.png",
}
