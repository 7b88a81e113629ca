# ==============================================================================
# BRAND MODEL - Catalog Manufacturer
# ==============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, List

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.domain_models.base import SQLBase, TimestampMixin

if TYPE_CHECKING:
    from catalog_api.domain_models.product import Product


class Brand(SQLBase, TimestampMixin):
    """
    Product brand or manufacturer.

    Attributes:
        name: Display name (2-100 characters)
        cover_image: Cover image URL

    Relationships:
        products: Products referencing this brand. Deleting a brand leaves
            them untouched; the ORM never nulls out their brand_id.
    """

    __tablename__ = "brands"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    cover_image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="brand",
        passive_deletes="all",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Brand(id={self.id}, name={self.name})>"
