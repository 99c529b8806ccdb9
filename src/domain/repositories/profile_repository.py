"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile.

        Raises:
            BackendError: with ``store_code`` set to the uniqueness SQLSTATE
                when a row with the same ID already exists.
        """
        ...
