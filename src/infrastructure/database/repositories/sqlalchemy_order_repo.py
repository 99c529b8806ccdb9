"""SQLAlchemy implementation of Order repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.order import Order, OrderStatus
from infrastructure.database.errors import translate_errors
from infrastructure.database.models import OrderModel


class SQLAlchemyOrderRepository:
    """SQLAlchemy implementation of IOrderRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_errors
    async def get(self, id: UUID) -> Order | None:
        stmt = select(OrderModel).where(OrderModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @translate_errors
    async def list_all(self) -> list[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @translate_errors
    async def update(self, order: Order) -> Order:
        stmt = select(OrderModel).where(OrderModel.id == order.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Order {order.id} not found")

        model.user_id = order.user_id
        model.status = order.status.value
        model.total_amount = order.total_amount
        model.items = order.items
        model.shipping_address = order.shipping_address
        model.updated_at = order.updated_at

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            status=OrderStatus(model.status),
            total_amount=model.total_amount,
            items=list(model.items or []),
            shipping_address=model.shipping_address,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
