from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.billboard import Billboard
from app.models.mixins import RecordMixin


class Category(RecordMixin, Base):
    """Product grouping; each category is shown with one billboard."""

    __tablename__ = "categories"

    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id"), nullable=False, index=True
    )
    billboard_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("billboards.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    billboard: Mapped[Billboard] = relationship()

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
