"""Product lifecycle rules."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.logging import get_logger
from app.models.product import Product
from app.repositories.category_repository import CategoryRepository
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductPayload
from app.services.exceptions import InvalidCategoryReferenceError

logger = get_logger(__name__)


class ProductService:
    """Create, read, update, delete and search products.

    Every product must reference an existing category when it is created.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._products = ProductRepository(session)
        self._categories = CategoryRepository(session)

    async def create(self, data: ProductPayload, category_id: int | None) -> Product:
        """Persist a new product in ``category_id`` stamped with the current time.

        Raises:
            InvalidCategoryReferenceError: If the category does not exist;
                nothing is persisted in that case
        """
        category = await self._categories.get(category_id) if category_id is not None else None
        if category is None:
            logger.warning("Product rejected, unknown category", category_id=category_id)
            raise InvalidCategoryReferenceError(category_id)

        product = Product(
            **data.model_dump(),
            category=category,
            registration_timestamp=datetime.now(),
        )
        product = await self._products.save(product)
        logger.info(
            "Product created",
            product_id=product.id,
            category_id=category.id,
            name=product.name,
        )
        return product

    async def get(self, product_id: int) -> Product | None:
        return await self._products.get(product_id)

    async def list(self) -> list[Product]:
        return await self._products.list_all()

    async def update(
        self,
        product_id: int,
        data: ProductPayload,
        category_id: int | None = None,
    ) -> Product | None:
        """Overwrite name, price and stock of an existing product.

        When ``category_id`` names an existing category the product moves
        there. An unknown ``category_id`` is ignored and the product keeps
        its current category.

        Returns:
            The updated product, or None if it does not exist
        """
        product = await self._products.get(product_id)
        if product is None:
            logger.debug("Product not found for update", product_id=product_id)
            return None

        product.name = data.name
        product.price = data.price
        product.stock = data.stock

        if category_id is not None:
            category = await self._categories.get(category_id)
            if category is not None:
                product.category = category
            else:
                logger.info(
                    "Ignoring unknown category on product update",
                    product_id=product_id,
                    category_id=category_id,
                )

        product = await self._products.save(product)
        logger.info("Product updated", product_id=product.id, category_id=product.category.id)
        return product

    async def delete(self, product_id: int) -> bool:
        """Delete a product. Returns False when there was nothing to delete."""
        product = await self._products.get(product_id)
        if product is None:
            logger.debug("Product not found for delete", product_id=product_id)
            return False

        await self._products.delete(product)
        logger.info("Product deleted", product_id=product_id)
        return True

    async def search_by_name(self, fragment: str) -> list[Product]:
        return await self._products.find_by_name_containing(fragment)

    async def search_by_price_above(self, price: float) -> list[Product]:
        return await self._products.find_by_price_greater_than(price)
