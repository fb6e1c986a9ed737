"""Product endpoints.

A product is always created inside an existing category, given by the
``categoryId`` query parameter.
"""

from fastapi import APIRouter, Response, status

from app.api.deps import CategoryIdParam, NameParam, PriceParam, ProductServiceDep
from app.infra.logging import get_logger
from app.models.product import Product
from app.schemas.product import ProductPayload, ProductRead
from app.services.exceptions import InvalidCategoryReferenceError

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "",
    response_model=ProductRead,
    summary="Create product",
    responses={400: {"description": "Unknown or missing categoryId"}},
)
async def create_product(
    payload: ProductPayload,
    service: ProductServiceDep,
    category_id: CategoryIdParam,
) -> Product | Response:
    """Create a product in an existing category.

    Answers 400 with an empty body when the category does not exist.
    """
    try:
        return await service.create(payload, category_id)
    except InvalidCategoryReferenceError as e:
        logger.info("Rejected product with invalid category", category_id=e.category_id)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


@router.get("", response_model=list[ProductRead], summary="List products")
async def list_products(service: ProductServiceDep) -> list[Product]:
    return await service.list()


@router.get(
    "/search/name",
    response_model=list[ProductRead],
    summary="Search products by name",
)
async def search_products_by_name(
    service: ProductServiceDep,
    name: NameParam,
) -> list[Product]:
    return await service.search_by_name(name)


@router.get(
    "/search/price",
    response_model=list[ProductRead],
    summary="Search products priced above a threshold",
)
async def search_products_by_price(
    service: ProductServiceDep,
    price: PriceParam,
) -> list[Product]:
    """Products whose price is strictly greater than ``price``."""
    return await service.search_by_price_above(price)


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get product by id",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: int, service: ProductServiceDep) -> Product | Response:
    product = await service.get(product_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update product",
    responses={404: {"description": "Product not found"}},
)
async def update_product(
    product_id: int,
    payload: ProductPayload,
    service: ProductServiceDep,
    category_id: CategoryIdParam,
) -> Product | Response:
    """Replace name, price and stock; optionally move to another category.

    An unknown ``categoryId`` leaves the category unchanged.
    """
    product = await service.update(product_id, payload, category_id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete product",
)
async def delete_product(product_id: int, service: ProductServiceDep) -> Response:
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
