"""Coupon repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.coupon import Coupon


class ICouponRepository(Protocol):
    """Repository interface for Coupon entities."""

    async def get(self, id: UUID) -> Coupon | None:
        """Get a coupon by ID."""
        ...

    async def list_all(self) -> list[Coupon]:
        """Get all coupons, newest first."""
        ...

    async def create(self, coupon: Coupon) -> Coupon:
        """Create a new coupon."""
        ...

    async def update(self, coupon: Coupon) -> Coupon:
        """Update an existing coupon."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a coupon and return whether a row was removed."""
        ...
