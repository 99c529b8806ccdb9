"""Product repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.product import Product


class IProductRepository(Protocol):
    """Repository interface for Product entities."""

    async def get(self, id: UUID) -> Product | None:
        """Get a product by ID."""
        ...

    async def list_all(self) -> list[Product]:
        """Get all products, newest first."""
        ...

    async def create(self, product: Product) -> Product:
        """Create a new product."""
        ...

    async def update(self, product: Product) -> Product:
        """Update an existing product."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a product and return whether a row was removed."""
        ...
