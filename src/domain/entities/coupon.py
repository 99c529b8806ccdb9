"""Coupon domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from uuid import UUID, uuid4


class DiscountType(StrEnum):
    FLAT = "flat"
    PERCENTAGE = "percentage"


@dataclass
class Coupon:
    """Domain entity for a discount coupon."""

    code: str
    discount_type: DiscountType
    discount_value: Decimal
    id: UUID = field(default_factory=uuid4)
    min_purchase: Decimal | None = None
    expires_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Coupon codes are matched case-insensitively at checkout."""
        self.code = self.code.strip().upper()


@dataclass(frozen=True, slots=True)
class CouponListing:
    """Read-only value object: coupons plus whether the table exists at all."""

    coupons: list[Coupon]
    table_found: bool = True
