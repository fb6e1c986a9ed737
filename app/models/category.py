"""Category model - root of the catalog."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.models.base import Base, search_key

if TYPE_CHECKING:
    from app.models.product import Product


class Category(Base):
    """Catalog category owning zero or more products.

    Products are removed together with their category (orphan removal).
    The ``products`` collection is never loaded implicitly; load it with
    ``selectinload`` when it is needed.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # Folded copy of name for accent-insensitive search, kept in sync by set_name
    name_search: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    code: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    discount: Mapped[float | None] = mapped_column(Float, nullable=True)
    creation_timestamp: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
    )

    # Relationships
    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="category",
        cascade="all, delete-orphan",
    )

    @validates("name")
    def set_name(self, key: str, value: str) -> str:
        self.name_search = search_key(value) if value is not None else None
        return value

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
