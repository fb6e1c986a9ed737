"""Product persistence and derived queries."""

from app.models.base import search_key
from app.models.product import Product
from app.repositories.base import SqlAlchemyRepository


class ProductRepository(SqlAlchemyRepository[Product]):
    """Repository for the ``products`` table."""

    model = Product

    async def find_by_name_containing(self, fragment: str) -> list[Product]:
        """Substring match on name ignoring case and accents; wildcards match literally."""
        return await self._find(
            Product.name_search.contains(search_key(fragment), autoescape=True)
        )

    async def find_by_price_greater_than(self, price: float) -> list[Product]:
        """Products priced strictly above ``price``; unpriced products never match."""
        return await self._find(Product.price > price)

    async def find_by_category(self, category_id: int) -> list[Product]:
        return await self._find(Product.category_id == category_id)
