"""FastAPI dependencies for dependency injection.

Provides:
- Database session per request
- Category and product services bound to that session
- Query parameters that accept both English and legacy Spanish names
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.infra.database import get_db_session
from app.infra.logging import get_logger
from app.services.category_service import CategoryService
from app.services.product_service import ProductService

logger = get_logger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session committed at the end of the request.

    Yields:
        AsyncSession
    """
    async with get_db_session() as session:
        yield session


# Type aliases for cleaner annotations
DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_category_service(db: DbSession) -> CategoryService:
    return CategoryService(db)


async def get_product_service(db: DbSession) -> ProductService:
    return ProductService(db)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


def _missing(param: str) -> HTTPException:
    logger.debug("Missing query parameter", param=param)
    return HTTPException(
        status_code=422,
        detail=f"Missing required query parameter: {param}",
    )


def category_id_param(
    category_id: Annotated[
        int | None, Query(alias="categoryId", description="Category identifier")
    ] = None,
    categoria_id: Annotated[
        int | None, Query(alias="categoriaId", include_in_schema=False)
    ] = None,
) -> int | None:
    """Optional category id; ``categoryId`` wins over ``categoriaId``."""
    return category_id if category_id is not None else categoria_id


def name_param(
    name: Annotated[
        str | None, Query(description="Name fragment, case- and accent-insensitive")
    ] = None,
    nombre: Annotated[str | None, Query(include_in_schema=False)] = None,
) -> str:
    value = name if name is not None else nombre
    if value is None:
        raise _missing("name")
    return value


def code_param(
    code: Annotated[int | None, Query(description="Exact category code")] = None,
    codigo: Annotated[int | None, Query(include_in_schema=False)] = None,
) -> int:
    value = code if code is not None else codigo
    if value is None:
        raise _missing("code")
    return value


def price_param(
    price: Annotated[
        float | None, Query(description="Exclusive lower bound for the price")
    ] = None,
    precio: Annotated[float | None, Query(include_in_schema=False)] = None,
) -> float:
    value = price if price is not None else precio
    if value is None:
        raise _missing("price")
    return value


CategoryIdParam = Annotated[int | None, Depends(category_id_param)]
NameParam = Annotated[str, Depends(name_param)]
CodeParam = Annotated[int, Depends(code_param)]
PriceParam = Annotated[float, Depends(price_param)]
