"""Category domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Category:
    """Domain entity for a product category."""

    name: str
    slug: str
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    image: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
