"""Category service layer."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

from core.exceptions import CategoryNotFoundError, ValidationError
from domain.entities.category import Category
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services._changes import apply_changes


class CategoryService:
    """Service layer for Category administration."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_all(self) -> list[Category]:
        async with self._uow_factory() as uow:
            return await uow.categories.list_all()

    async def create(
        self,
        name: str,
        slug: str,
        description: str | None = None,
        image: str | None = None,
    ) -> Category:
        """Create a new category."""
        async with self._uow_factory() as uow:
            category = Category(name=name, slug=slug, description=description, image=image)
            created = await uow.categories.create(category)
            await uow.commit()
            return created

    async def update(self, category_id: UUID | None, changes: dict[str, Any]) -> Category:
        """Apply the supplied fields to an existing category."""
        if category_id is None:
            raise ValidationError("Category ID required", field="id")

        async with self._uow_factory() as uow:
            category = await uow.categories.get(category_id)
            if not category:
                raise CategoryNotFoundError(str(category_id))

            apply_changes(category, changes)
            updated = await uow.categories.update(category)
            await uow.commit()
            return updated

    async def delete(self, category_id: UUID | None) -> bool:
        """Delete a category. Products in it keep existing without a category."""
        if category_id is None:
            raise ValidationError("Category ID required", field="id")

        async with self._uow_factory() as uow:
            deleted = await uow.categories.delete(category_id)
            await uow.commit()
            return deleted
