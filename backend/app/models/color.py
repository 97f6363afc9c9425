from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import RecordMixin


class Color(RecordMixin, Base):
    """A named color option; value is usually a hex code such as '#1F2937'."""

    __tablename__ = "colors"

    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Color(id={self.id}, name='{self.name}', value='{self.value}')>"
