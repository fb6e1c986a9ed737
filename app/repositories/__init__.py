"""Persistence layer - async repositories over SQLAlchemy sessions."""

from app.repositories.base import SqlAlchemyRepository
from app.repositories.category_repository import CategoryRepository
from app.repositories.product_repository import ProductRepository

__all__ = [
    "SqlAlchemyRepository",
    "CategoryRepository",
    "ProductRepository",
]
