"""Category repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.category import Category


class ICategoryRepository(Protocol):
    """Repository interface for Category entities."""

    async def get(self, id: UUID) -> Category | None:
        """Get a category by ID."""
        ...

    async def list_all(self) -> list[Category]:
        """Get all categories, newest first."""
        ...

    async def create(self, category: Category) -> Category:
        """Create a new category."""
        ...

    async def update(self, category: Category) -> Category:
        """Update an existing category."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a category and return whether a row was removed."""
        ...
