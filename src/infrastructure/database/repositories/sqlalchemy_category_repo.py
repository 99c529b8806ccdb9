"""SQLAlchemy implementation of Category repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.category import Category
from infrastructure.database.errors import translate_errors
from infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository:
    """SQLAlchemy implementation of ICategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_errors
    async def get(self, id: UUID) -> Category | None:
        stmt = select(CategoryModel).where(CategoryModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @translate_errors
    async def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @translate_errors
    async def create(self, category: Category) -> Category:
        model = self._to_model(category)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    @translate_errors
    async def update(self, category: Category) -> Category:
        stmt = select(CategoryModel).where(CategoryModel.id == category.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Category {category.id} not found")

        model.name = category.name
        model.slug = category.slug
        model.description = category.description
        model.image = category.image
        model.updated_at = category.updated_at

        await self._session.flush()
        return self._to_entity(model)

    @translate_errors
    async def delete(self, id: UUID) -> bool:
        stmt = delete(CategoryModel).where(CategoryModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            image=model.image,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Category) -> CategoryModel:
        return CategoryModel(
            id=entity.id,
            name=entity.name,
            slug=entity.slug,
            description=entity.description,
            image=entity.image,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
