from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import RecordMixin


class Size(RecordMixin, Base):
    """A named size option, e.g. name='Large', value='L'."""

    __tablename__ = "sizes"

    store_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("stores.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Size(id={self.id}, name='{self.name}', value='{self.value}')>"
