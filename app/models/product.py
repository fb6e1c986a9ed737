"""Product model - catalog item belonging to one category."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.models.base import Base, search_key

if TYPE_CHECKING:
    from app.models.category import Category


class Product(Base):
    """Product - leaf of the catalog (Category -> Product)."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    # Folded copy of name for accent-insensitive search, kept in sync by set_name
    name_search: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    stock: Mapped[int | None] = mapped_column(Integer, nullable=True)
    registration_timestamp: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="products",
        lazy="selectin",
    )

    @validates("name")
    def set_name(self, key: str, value: str) -> str:
        self.name_search = search_key(value) if value is not None else None
        return value

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"
