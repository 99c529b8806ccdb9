"""Product service layer."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from core.exceptions import ProductNotFoundError, ValidationError
from domain.entities.product import Product
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services._changes import apply_changes


class ProductService:
    """Service layer for Product administration."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[Product]:
        async with self._uow_factory() as uow:
            return await uow.products.list_all()

    async def create(self, fields: dict[str, Any]) -> Product:
        """Create a new product from validated request fields."""
        async with self._uow_factory() as uow:
            product = Product(**fields)
            created = await uow.products.create(product)
            await uow.commit()
            return created

    async def update(self, product_id: UUID | None, changes: dict[str, Any]) -> Product:
        """Apply the supplied fields to an existing product."""
        if product_id is None:
            raise ValidationError("Product ID required", field="id")

        async with self._uow_factory() as uow:
            product = await uow.products.get(product_id)
            if not product:
                raise ProductNotFoundError(str(product_id))

            apply_changes(product, changes)
            updated = await uow.products.update(product)
            await uow.commit()
            return updated

    async def delete(self, product_id: UUID | None) -> bool:
        if product_id is None:
            raise ValidationError("Product ID required", field="id")

        async with self._uow_factory() as uow:
            deleted = await uow.products.delete(product_id)
            await uow.commit()
            return deleted
