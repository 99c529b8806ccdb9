"""Pydantic schemas for the Coupon API."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import reject_null
from domain.entities.coupon import DiscountType


class CouponCreate(BaseModel):
    """Schema for creating a Coupon."""

    code: str = Field(..., min_length=1, max_length=50)
    discount_type: DiscountType
    discount_value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    min_purchase: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    expires_at: datetime | None = None


class CouponUpdate(BaseModel):
    """Schema for updating a Coupon; ``id`` travels in the body."""

    id: UUID | None = None
    code: str | None = Field(None, min_length=1, max_length=50)
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    min_purchase: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    expires_at: datetime | None = None

    @field_validator("code", "discount_type", "discount_value")
    @classmethod
    def reject_null_fields(cls, value: Any) -> Any:
        return reject_null(value)


class CouponResponse(BaseModel):
    """Schema for Coupon response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    discount_type: DiscountType
    discount_value: float
    min_purchase: float | None = None
    expires_at: datetime | None = None
    created_at: datetime


class CouponListResponse(BaseModel):
    coupons: list[CouponResponse]
    table_not_found: bool = False


class CouponDetailResponse(BaseModel):
    coupon: CouponResponse
