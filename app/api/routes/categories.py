"""Category endpoints.

Missing categories are answered with an empty 404. Deleting is
idempotent and always answers 204.
"""

from fastapi import APIRouter, Response, status

from app.api.deps import CategoryServiceDep, CodeParam, NameParam
from app.models.category import Category
from app.models.product import Product
from app.schemas.category import CategoryPayload, CategoryRead
from app.schemas.product import ProductRead

router = APIRouter()


@router.post("", response_model=CategoryRead, summary="Create category")
async def create_category(
    payload: CategoryPayload,
    service: CategoryServiceDep,
) -> Category:
    """Create a category. The creation timestamp is assigned by the server."""
    return await service.create(payload)


@router.get("", response_model=list[CategoryRead], summary="List categories")
async def list_categories(service: CategoryServiceDep) -> list[Category]:
    return await service.list()


@router.get(
    "/search/name",
    response_model=list[CategoryRead],
    summary="Search categories by name",
)
async def search_categories_by_name(
    service: CategoryServiceDep,
    name: NameParam,
) -> list[Category]:
    """Case-insensitive substring match on the category name."""
    return await service.search_by_name(name)


@router.get(
    "/search/code",
    response_model=list[CategoryRead],
    summary="Search categories by code",
)
async def search_categories_by_code(
    service: CategoryServiceDep,
    code: CodeParam,
) -> list[Category]:
    return await service.search_by_code(code)


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get category by id",
    responses={404: {"description": "Category not found"}},
)
async def get_category(category_id: int, service: CategoryServiceDep) -> Category | Response:
    category = await service.get(category_id)
    if category is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return category


@router.get(
    "/{category_id}/products",
    response_model=list[ProductRead],
    summary="List products of a category",
    responses={404: {"description": "Category not found"}},
)
async def list_category_products(
    category_id: int,
    service: CategoryServiceDep,
) -> list[Product] | Response:
    products = await service.list_products(category_id)
    if products is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return products


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update category",
    responses={404: {"description": "Category not found"}},
)
async def update_category(
    category_id: int,
    payload: CategoryPayload,
    service: CategoryServiceDep,
) -> Category | Response:
    """Replace name, description, code and discount of a category."""
    category = await service.update(category_id, payload)
    if category is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete category and its products",
)
async def delete_category(category_id: int, service: CategoryServiceDep) -> Response:
    await service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
