"""Category persistence and derived queries."""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.base import search_key
from app.models.category import Category
from app.repositories.base import SqlAlchemyRepository


class CategoryRepository(SqlAlchemyRepository[Category]):
    """Repository for the ``categories`` table."""

    model = Category

    async def get_with_products(self, category_id: int) -> Category | None:
        """Return the category with its products collection loaded."""
        stmt = (
            select(Category)
            .where(Category.id == category_id)
            .options(selectinload(Category.products))
        )
        result = await self._session.scalars(stmt)
        return result.one_or_none()

    async def find_by_name_containing(self, fragment: str) -> list[Category]:
        """Substring match on name ignoring case and accents; wildcards match literally."""
        return await self._find(
            Category.name_search.contains(search_key(fragment), autoescape=True)
        )

    async def find_by_code(self, code: int) -> list[Category]:
        return await self._find(Category.code == code)
