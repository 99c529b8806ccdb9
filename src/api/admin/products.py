"""Product admin routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.services import get_product_service
from api.schemas.common import SuccessResponse
from api.schemas.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ProductListResponse, summary="List products")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_products(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """All products, newest first."""
    products = await service.list_all()
    return ProductListResponse(products=[ProductResponse.model_validate(p) for p in products])


@router.post("", response_model=ProductDetailResponse, summary="Create a product")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_product(
    request: Request,
    body: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductDetailResponse:
    product = await service.create(body.model_dump())
    return ProductDetailResponse(product=ProductResponse.model_validate(product))


@router.put(
    "",
    response_model=ProductDetailResponse,
    summary="Update a product",
    responses={404: {"description": "Product not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_product(
    request: Request,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductDetailResponse:
    product = await service.update(
        body.id,
        body.model_dump(exclude_unset=True, exclude={"id"}),
    )
    return ProductDetailResponse(product=ProductResponse.model_validate(product))


@router.delete("", response_model=SuccessResponse, summary="Delete a product")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_product(
    request: Request,
    id: UUID | None = Query(None),
    service: ProductService = Depends(get_product_service),
) -> SuccessResponse:
    await service.delete(id)
    return SuccessResponse()
