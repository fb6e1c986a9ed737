"""Pydantic schemas for request/response validation."""

from app.schemas.category import CategoryPayload, CategoryRead
from app.schemas.common import CatalogModel, ErrorResponse, HealthResponse
from app.schemas.product import ProductPayload, ProductRead

__all__ = [
    "CatalogModel",
    "ErrorResponse",
    "HealthResponse",
    "CategoryPayload",
    "CategoryRead",
    "ProductPayload",
    "ProductRead",
]
