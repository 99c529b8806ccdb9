"""Unit tests for ProductService."""

from decimal import Decimal
from uuid import uuid4

import pytest

from core.exceptions import ProductNotFoundError, ValidationError
from domain.entities.product import Product
from domain.services.product_service import ProductService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProductService:
    return ProductService(lambda: uow)


@pytest.fixture
def product() -> Product:
    return Product(
        name="Silver Payal",
        slug="silver-payal",
        price=Decimal("1499.00"),
        images=["products/1.jpg"],
        payal_sizes=["10", "11"],
        stock=4,
    )


class TestCreateProduct:
    @pytest.mark.asyncio
    async def test_create_from_fields(self, service: ProductService, uow: FakeUnitOfWork):
        uow.products.create.side_effect = lambda p: p
        category_id = uuid4()

        result = await service.create(
            {
                "name": "Gold Ring",
                "slug": "gold-ring",
                "price": Decimal("2999.50"),
                "ring_sizes": ["6", "7"],
                "category_id": category_id,
                "is_featured": True,
            }
        )

        assert result.name == "Gold Ring"
        assert result.price == Decimal("2999.50")
        assert result.ring_sizes == ["6", "7"]
        assert result.category_id == category_id
        assert result.is_featured is True
        assert result.images == []
        assert uow.committed


class TestUpdateProduct:
    @pytest.mark.asyncio
    async def test_partial_update(
        self, service: ProductService, uow: FakeUnitOfWork, product: Product
    ):
        uow.products.get.return_value = product
        uow.products.update.side_effect = lambda p: p

        result = await service.update(product.id, {"stock": 0, "discount_price": Decimal("999")})

        assert result.stock == 0
        assert result.discount_price == Decimal("999")
        assert result.images == ["products/1.jpg"]
        assert result.payal_sizes == ["10", "11"]

    @pytest.mark.asyncio
    async def test_can_clear_category(
        self, service: ProductService, uow: FakeUnitOfWork, product: Product
    ):
        product.category_id = uuid4()
        uow.products.get.return_value = product
        uow.products.update.side_effect = lambda p: p

        result = await service.update(product.id, {"category_id": None})

        assert result.category_id is None

    @pytest.mark.asyncio
    async def test_not_found(self, service: ProductService, uow: FakeUnitOfWork):
        uow.products.get.return_value = None

        with pytest.raises(ProductNotFoundError):
            await service.update(uuid4(), {"stock": 1})

        uow.products.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_id(self, service: ProductService):
        with pytest.raises(ValidationError, match="Product ID required"):
            await service.update(None, {"stock": 1})


class TestDeleteProduct:
    @pytest.mark.asyncio
    async def test_delete(self, service: ProductService, uow: FakeUnitOfWork):
        product_id = uuid4()
        uow.products.delete.return_value = True

        assert await service.delete(product_id) is True
        uow.products.delete.assert_called_once_with(product_id)

    @pytest.mark.asyncio
    async def test_delete_requires_id(self, service: ProductService, uow: FakeUnitOfWork):
        with pytest.raises(ValidationError):
            await service.delete(None)

        uow.products.delete.assert_not_called()
