# ==============================================================================
# CATEGORY MODEL - Catalog Grouping
# ==============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, List

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.domain_models.base import SQLBase, TimestampMixin

if TYPE_CHECKING:
    from catalog_api.domain_models.product import Product


class Category(SQLBase, TimestampMixin):
    """Grouping for products in the catalog."""

    __tablename__ = "categories"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    cover_image: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    products: Mapped[List["Product"]] = relationship(
        "Product",
        back_populates="category",
        passive_deletes="all",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, title={self.title})>"
