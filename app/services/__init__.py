"""Business logic services."""

from app.services.category_service import CategoryService
from app.services.exceptions import CatalogError, InvalidCategoryReferenceError
from app.services.product_service import ProductService

__all__ = [
    "CatalogError",
    "CategoryService",
    "InvalidCategoryReferenceError",
    "ProductService",
]
