"""Order repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.order import Order


class IOrderRepository(Protocol):
    """Repository interface for Order entities."""

    async def get(self, id: UUID) -> Order | None:
        """Get an order by ID."""
        ...

    async def list_all(self) -> list[Order]:
        """Get all orders, newest first."""
        ...

    async def update(self, order: Order) -> Order:
        """Update an existing order."""
        ...
