# ==============================================================================
# PRODUCT MODEL - Catalog Item
# ==============================================================================
# Product entity referencing exactly one Category and one Brand
# ==============================================================================

from __future__ import annotations

from typing import Optional

from sqlalchemy import Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.domain_models.base import IdType, SQLBase, TimestampMixin
from catalog_api.domain_models.brand import Brand
from catalog_api.domain_models.category import Category


class Product(SQLBase, TimestampMixin):
    """
    Product model for the catalog.

    Attributes:
        name: Product display name (2-100 characters)
        description: Detailed product description
        price: Selling price, strictly positive
        cover_image: Cover image URL
        category_id: Referenced category
        brand_id: Referenced brand

    Relationships:
        category: Owning category (eager-loaded on reads)
        brand: Owning brand (eager-loaded on reads)
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )
    cover_image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # References
    category_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    brand_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("brands.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    category: Mapped[Optional[Category]] = relationship(
        "Category",
        back_populates="products",
        lazy="raise",
    )
    brand: Mapped[Optional[Brand]] = relationship(
        "Brand",
        back_populates="products",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"
