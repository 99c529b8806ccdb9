"""Coupon admin routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.services import get_coupon_service
from api.schemas.common import SuccessResponse
from api.schemas.coupon import (
    CouponCreate,
    CouponDetailResponse,
    CouponListResponse,
    CouponResponse,
    CouponUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.coupon_service import CouponService

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.get("", response_model=CouponListResponse, summary="List coupons")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_coupons(
    request: Request,
    service: CouponService = Depends(get_coupon_service),
) -> CouponListResponse:
    """All coupons, newest first. ``table_not_found`` is set when the table is missing."""
    listing = await service.list_all()
    return CouponListResponse(
        coupons=[CouponResponse.model_validate(c) for c in listing.coupons],
        table_not_found=not listing.table_found,
    )


@router.post(
    "",
    response_model=CouponDetailResponse,
    summary="Create a coupon",
    responses={400: {"description": "Invalid body or coupons table missing"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_coupon(
    request: Request,
    body: CouponCreate,
    service: CouponService = Depends(get_coupon_service),
) -> CouponDetailResponse:
    coupon = await service.create(body.model_dump())
    return CouponDetailResponse(coupon=CouponResponse.model_validate(coupon))


@router.put(
    "",
    response_model=CouponDetailResponse,
    summary="Update a coupon",
    responses={404: {"description": "Coupon not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_coupon(
    request: Request,
    body: CouponUpdate,
    service: CouponService = Depends(get_coupon_service),
) -> CouponDetailResponse:
    coupon = await service.update(
        body.id,
        body.model_dump(exclude_unset=True, exclude={"id"}),
    )
    return CouponDetailResponse(coupon=CouponResponse.model_validate(coupon))


@router.delete("", response_model=SuccessResponse, summary="Delete a coupon")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_coupon(
    request: Request,
    id: UUID | None = Query(None),
    service: CouponService = Depends(get_coupon_service),
) -> SuccessResponse:
    await service.delete(id)
    return SuccessResponse()
