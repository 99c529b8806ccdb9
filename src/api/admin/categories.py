"""Category admin routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.services import get_category_service
from api.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryListResponse,
    CategoryResponse,
    CategoryUpdate,
)
from api.schemas.common import SuccessResponse
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse, summary="List categories")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_categories(
    request: Request,
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResponse:
    """All categories, newest first."""
    categories = await service.list_all()
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.post("", response_model=CategoryDetailResponse, summary="Create a category")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_category(
    request: Request,
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    category = await service.create(
        name=body.name,
        slug=body.slug,
        description=body.description,
        image=body.image,
    )
    return CategoryDetailResponse(category=CategoryResponse.model_validate(category))


@router.put(
    "",
    response_model=CategoryDetailResponse,
    summary="Update a category",
    responses={404: {"description": "Category not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_category(
    request: Request,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    """Update the fields present in the body of the category named by ``id``."""
    category = await service.update(
        body.id,
        body.model_dump(exclude_unset=True, exclude={"id"}),
    )
    return CategoryDetailResponse(category=CategoryResponse.model_validate(category))


@router.delete("", response_model=SuccessResponse, summary="Delete a category")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_category(
    request: Request,
    id: UUID | None = Query(None),
    service: CategoryService = Depends(get_category_service),
) -> SuccessResponse:
    await service.delete(id)
    return SuccessResponse()
