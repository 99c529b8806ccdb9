"""Coupon service layer."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.exceptions import (
    BackendError,
    CouponNotFoundError,
    CouponTableMissingError,
    ValidationError,
)
from domain.entities.coupon import Coupon, CouponListing
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services._changes import apply_changes

logger = structlog.get_logger()


class CouponService:
    """Service layer for Coupon administration.

    Coupons were added to the schema after launch, so some deployments do
    not have the table yet. Listing degrades to an empty result and creation
    reports a client error in that case instead of a 500.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> CouponListing:
        async with self._uow_factory() as uow:
            try:
                coupons = await uow.coupons.list_all()
            except BackendError as exc:
                if not exc.is_undefined_table:
                    raise
                logger.warning("coupons_table_missing")
                return CouponListing(coupons=[], table_found=False)
            return CouponListing(coupons=coupons)

    async def create(self, fields: dict[str, Any]) -> Coupon:
        async with self._uow_factory() as uow:
            coupon = Coupon(**fields)
            try:
                created = await uow.coupons.create(coupon)
                await uow.commit()
            except BackendError as exc:
                if exc.is_undefined_table:
                    raise CouponTableMissingError() from exc
                raise
            return created

    async def update(self, coupon_id: UUID | None, changes: dict[str, Any]) -> Coupon:
        if coupon_id is None:
            raise ValidationError("Coupon ID required", field="id")

        async with self._uow_factory() as uow:
            coupon = await uow.coupons.get(coupon_id)
            if not coupon:
                raise CouponNotFoundError(str(coupon_id))

            apply_changes(coupon, changes)
            coupon.code = coupon.code.strip().upper()
            updated = await uow.coupons.update(coupon)
            await uow.commit()
            return updated

    async def delete(self, coupon_id: UUID | None) -> bool:
        if coupon_id is None:
            raise ValidationError("Coupon ID required", field="id")

        async with self._uow_factory() as uow:
            deleted = await uow.coupons.delete(coupon_id)
            await uow.commit()
            return deleted
