"""Product payloads."""

from datetime import datetime

from pydantic import Field

from app.schemas.category import CategoryRead
from app.schemas.common import CatalogModel


class ProductPayload(CatalogModel):
    """Writable product fields, used for create and full update.

    The category is passed separately as the ``categoryId`` query parameter.
    """

    name: str = Field(
        min_length=1,
        max_length=150,
        description="Product name",
        examples=["Audífonos"],
    )
    price: float | None = Field(
        default=None,
        description="Unit price",
        examples=[249.9],
    )
    stock: int | None = Field(
        default=None,
        description="Units in stock",
        examples=[50],
    )


class ProductRead(ProductPayload):
    """Product as returned by the API, with its category embedded."""

    id: int = Field(description="Store-assigned identifier")
    registration_timestamp: datetime | None = Field(
        default=None,
        description="Registration time, set by the server",
    )
    category: CategoryRead = Field(description="Owning category")
