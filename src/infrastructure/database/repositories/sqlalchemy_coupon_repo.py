"""SQLAlchemy implementation of Coupon repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.coupon import Coupon, DiscountType
from infrastructure.database.errors import translate_errors
from infrastructure.database.models import CouponModel


class SQLAlchemyCouponRepository:
    """SQLAlchemy implementation of ICouponRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_errors
    async def get(self, id: UUID) -> Coupon | None:
        stmt = select(CouponModel).where(CouponModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @translate_errors
    async def list_all(self) -> list[Coupon]:
        stmt = select(CouponModel).order_by(CouponModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @translate_errors
    async def create(self, coupon: Coupon) -> Coupon:
        model = self._to_model(coupon)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    @translate_errors
    async def update(self, coupon: Coupon) -> Coupon:
        stmt = select(CouponModel).where(CouponModel.id == coupon.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Coupon {coupon.id} not found")

        model.code = coupon.code
        model.discount_type = coupon.discount_type.value
        model.discount_value = coupon.discount_value
        model.min_purchase = coupon.min_purchase
        model.expires_at = coupon.expires_at

        await self._session.flush()
        return self._to_entity(model)

    @translate_errors
    async def delete(self, id: UUID) -> bool:
        stmt = delete(CouponModel).where(CouponModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: CouponModel) -> Coupon:
        return Coupon(
            id=model.id,
            code=model.code,
            discount_type=DiscountType(model.discount_type),
            discount_value=model.discount_value,
            min_purchase=model.min_purchase,
            expires_at=model.expires_at,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Coupon) -> CouponModel:
        return CouponModel(
            id=entity.id,
            code=entity.code,
            discount_type=entity.discount_type.value,
            discount_value=entity.discount_value,
            min_purchase=entity.min_purchase,
            expires_at=entity.expires_at,
            created_at=entity.created_at,
        )
