"""Order domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4


class OrderStatus(StrEnum):
    """Fulfilment states an admin can move an order through."""

    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass
class Order:
    """Domain entity for a storefront order.

    Orders are written by checkout; the admin surface only reads them and
    updates their status or shipping details.
    """

    total_amount: Decimal
    id: UUID = field(default_factory=uuid4)
    user_id: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    items: list[dict[str, Any]] = field(default_factory=list)
    shipping_address: dict[str, Any] | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
