"""Order service layer."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import OrderNotFoundError, ValidationError
from domain.entities.order import Order
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services._changes import apply_changes

logger = structlog.get_logger()


class OrderService:
    """Service layer for Order administration (read and update only)."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[Order]:
        async with self._uow_factory() as uow:
            return await uow.orders.list_all()

    async def update(self, order_id: UUID | None, changes: dict[str, Any]) -> Order:
        """Apply the supplied fields (typically ``status``) to an order."""
        if order_id is None:
            raise ValidationError("Order ID required", field="id")

        async with self._uow_factory() as uow:
            order = await uow.orders.get(order_id)
            if not order:
                raise OrderNotFoundError(str(order_id))

            previous_status = order.status
            apply_changes(order, changes)
            updated = await uow.orders.update(order)
            await uow.commit()

            if updated.status != previous_status:
                logger.info(
                    "order_status_changed",
                    order_id=str(order_id),
                    from_status=previous_status.value,
                    to_status=updated.status.value,
                )
            return updated
