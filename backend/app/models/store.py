"""
Store Admin Backend — Store Model
==================================

What:  The tenant root. Every other record hangs off a store via store_id.
Who:   Read by the ownership guard on every mutating request.

Query Patterns:
    - Ownership check: SELECT ... WHERE id = :store_id AND user_id = :subject
      → uses ix_stores_user_id plus the primary key
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import RecordMixin


class Store(RecordMixin, Base):
    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Subject identifier issued by the identity provider (JWT `sub` claim)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
