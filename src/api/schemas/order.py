"""Pydantic schemas for the Order API."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import reject_null
from domain.entities.order import OrderStatus


class OrderUpdate(BaseModel):
    """Schema for updating an Order; ``id`` travels in the body."""

    id: UUID | None = None
    status: OrderStatus | None = None
    total_amount: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    shipping_address: dict[str, Any] | None = None

    @field_validator("status", "total_amount")
    @classmethod
    def reject_null_fields(cls, value: Any) -> Any:
        return reject_null(value)


class OrderResponse(BaseModel):
    """Schema for Order response.

    ``items`` are returned as stored by checkout
    (``{productId?, name?, quantity, price}``).
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: str | None = None
    status: OrderStatus
    total_amount: float
    items: list[dict[str, Any]]
    shipping_address: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]


class OrderDetailResponse(BaseModel):
    order: OrderResponse
