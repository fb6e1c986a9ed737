"""Category payloads."""

from datetime import datetime

from pydantic import Field

from app.schemas.common import CatalogModel


class CategoryPayload(CatalogModel):
    """Writable category fields, used for create and full update."""

    name: str = Field(
        min_length=1,
        max_length=100,
        description="Unique category name",
        examples=["Electrónica"],
    )
    description: str | None = Field(
        default=None,
        description="Short description",
        examples=["Productos tecnológicos"],
    )
    code: int | None = Field(
        default=None,
        description="Internal reference code",
        examples=[10],
    )
    discount: float | None = Field(
        default=None,
        description="Discount percentage applied to the category",
        examples=[5.5],
    )


class CategoryRead(CategoryPayload):
    """Category as returned by the API.

    The products collection is never included.
    """

    id: int = Field(description="Store-assigned identifier")
    creation_timestamp: datetime | None = Field(
        default=None,
        description="Creation time, set by the server",
    )
