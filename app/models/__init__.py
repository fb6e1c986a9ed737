"""SQLAlchemy models for the catalog."""

from app.models.base import Base, search_key
from app.models.category import Category
from app.models.product import Product

__all__ = [
    "Base",
    "Category",
    "Product",
    "search_key",
]
