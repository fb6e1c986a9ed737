"""Category lifecycle rules."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.logging import get_logger
from app.models.category import Category
from app.models.product import Product
from app.repositories.category_repository import CategoryRepository
from app.repositories.product_repository import ProductRepository
from app.schemas.category import CategoryPayload

logger = get_logger(__name__)


class CategoryService:
    """Create, read, update, delete and search categories.

    Absent records are reported as ``None``, never as exceptions.
    Store constraint violations (duplicate names) propagate unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._categories = CategoryRepository(session)
        self._products = ProductRepository(session)

    async def create(self, data: CategoryPayload) -> Category:
        """Persist a new category stamped with the current time."""
        category = Category(
            **data.model_dump(),
            creation_timestamp=datetime.now(),
        )
        category = await self._categories.save(category)
        logger.info("Category created", category_id=category.id, name=category.name)
        return category

    async def get(self, category_id: int) -> Category | None:
        return await self._categories.get(category_id)

    async def list(self) -> list[Category]:
        return await self._categories.list_all()

    async def update(self, category_id: int, data: CategoryPayload) -> Category | None:
        """Overwrite the writable fields of an existing category.

        ``id`` and ``creation_timestamp`` are left as they are.

        Returns:
            The updated category, or None if it does not exist
        """
        category = await self._categories.get(category_id)
        if category is None:
            logger.debug("Category not found for update", category_id=category_id)
            return None

        category.name = data.name
        category.description = data.description
        category.code = data.code
        category.discount = data.discount

        category = await self._categories.save(category)
        logger.info("Category updated", category_id=category.id)
        return category

    async def delete(self, category_id: int) -> bool:
        """Delete a category together with all of its products.

        Returns:
            True if a category was removed, False if there was none
        """
        category = await self._categories.get_with_products(category_id)
        if category is None:
            logger.debug("Category not found for delete", category_id=category_id)
            return False

        removed_products = len(category.products)
        await self._categories.delete(category)
        logger.info(
            "Category deleted",
            category_id=category_id,
            removed_products=removed_products,
        )
        return True

    async def search_by_name(self, fragment: str) -> list[Category]:
        return await self._categories.find_by_name_containing(fragment)

    async def search_by_code(self, code: int) -> list[Category]:
        return await self._categories.find_by_code(code)

    async def list_products(self, category_id: int) -> list[Product] | None:
        """Products that belong to the category, or None if it does not exist."""
        if await self._categories.get(category_id) is None:
            return None
        return await self._products.find_by_category(category_id)
