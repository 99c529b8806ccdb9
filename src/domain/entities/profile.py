"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

DEFAULT_PROFILE_NAME = "User"


class ProfileRole(StrEnum):
    """Storefront account roles."""

    CUSTOMER = "customer"
    ADMIN = "admin"


def derive_profile_name(email: str | None = None, name: str | None = None) -> str:
    """Pick a display name: explicit name, else email local-part, else the fallback."""
    if name:
        return name
    local_part = email.split("@")[0] if email else ""
    return local_part or DEFAULT_PROFILE_NAME


@dataclass
class Profile:
    """Domain entity for a user profile keyed by the auth provider's user id."""

    id: str
    name: str = DEFAULT_PROFILE_NAME
    role: ProfileRole = ProfileRole.CUSTOMER
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
