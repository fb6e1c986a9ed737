"""Service-level errors."""


class CatalogError(Exception):
    """Base class for catalog business rule violations."""


class InvalidCategoryReferenceError(CatalogError):
    """Raised when a product refers to a category that does not exist."""

    def __init__(self, category_id: int | None) -> None:
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")
