"""
Store Admin Backend — Product and Image Models
===============================================

What:  Sellable items and their ordered image galleries.

Lifecycle:
    1. Created together with its images in one commit
    2. isArchived=True hides the product from the public listing API
       (the dashboard still shows it)

Query Patterns:
    - Storefront listing: WHERE store_id = :id AND is_archived = false
      [AND category_id/size_id/color_id/is_featured] ORDER BY created_at DESC
      → ix_products_store_archived_created keeps this an index range scan
"""

from decimal import Decimal
from typing import List

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.category import Category
from app.models.color import Color
from app.models.mixins import RecordMixin
from app.models.size import Size


class Product(RecordMixin, Base):
    __tablename__ = "products"

    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id"), nullable=False, index=True
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id"), nullable=False, index=True
    )
    size_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("sizes.id"), nullable=False, index=True
    )
    color_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("colors.id"), nullable=False, index=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    is_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    is_archived: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    category: Mapped[Category] = relationship()
    size: Mapped[Size] = relationship()
    color: Mapped[Color] = relationship()

    # Input order is kept through Image.position; nothing downstream relies on it
    images: Mapped[List["Image"]] = relationship(
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Image.position",
    )

    __table_args__ = (
        Index(
            "ix_products_store_archived_created",
            "store_id",
            "is_archived",
            "created_at",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Product(id={self.id}, name='{self.name}', price={self.price}, "
            f"archived={self.is_archived})>"
        )


class Image(RecordMixin, Base):
    __tablename__ = "images"

    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url: Mapped[str] = mapped_column(Text, nullable=False)
    # Zero-based index within the submitted images array
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped[Product] = relationship(back_populates="images")

    def __repr__(self) -> str:
        return f"<Image(id={self.id}, url='{self.url}')>"
