"""SQLAlchemy implementation of Product repository."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.product import Product
from infrastructure.database.errors import translate_errors
from infrastructure.database.models import ProductModel

# Columns copied verbatim between entity and model on update
_MUTABLE_FIELDS = (
    "name",
    "slug",
    "description",
    "specification",
    "supplier_info",
    "ring_sizes",
    "bracelet_sizes",
    "payal_sizes",
    "price",
    "discount_price",
    "images",
    "category_id",
    "stock",
    "is_featured",
    "updated_at",
)


class SQLAlchemyProductRepository:
    """SQLAlchemy implementation of IProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_errors
    async def get(self, id: UUID) -> Product | None:
        stmt = select(ProductModel).where(ProductModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @translate_errors
    async def list_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    @translate_errors
    async def create(self, product: Product) -> Product:
        model = self._to_model(product)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    @translate_errors
    async def update(self, product: Product) -> Product:
        stmt = select(ProductModel).where(ProductModel.id == product.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Product {product.id} not found")

        for name in _MUTABLE_FIELDS:
            setattr(model, name, getattr(product, name))

        await self._session.flush()
        return self._to_entity(model)

    @translate_errors
    async def delete(self, id: UUID) -> bool:
        stmt = delete(ProductModel).where(ProductModel.id == id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            specification=model.specification,
            supplier_info=model.supplier_info,
            ring_sizes=model.ring_sizes,
            bracelet_sizes=model.bracelet_sizes,
            payal_sizes=model.payal_sizes,
            price=model.price,
            discount_price=model.discount_price,
            images=list(model.images or []),
            category_id=model.category_id,
            stock=model.stock,
            is_featured=bool(model.is_featured),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        model = ProductModel(id=entity.id, created_at=entity.created_at)
        for name in _MUTABLE_FIELDS:
            setattr(model, name, getattr(entity, name))
        return model
