"""Order admin routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.services import get_order_service
from api.schemas.order import (
    OrderDetailResponse,
    OrderListResponse,
    OrderResponse,
    OrderUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListResponse, summary="List orders")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_orders(
    request: Request,
    service: OrderService = Depends(get_order_service),
) -> OrderListResponse:
    """All orders, newest first."""
    orders = await service.list_all()
    return OrderListResponse(orders=[OrderResponse.model_validate(o) for o in orders])


@router.put(
    "",
    response_model=OrderDetailResponse,
    summary="Update an order",
    responses={404: {"description": "Order not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_order(
    request: Request,
    body: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> OrderDetailResponse:
    """Change an order's status, total or shipping address."""
    order = await service.update(
        body.id,
        body.model_dump(exclude_unset=True, exclude={"id"}),
    )
    return OrderDetailResponse(order=OrderResponse.model_validate(order))
