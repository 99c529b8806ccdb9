"""Product domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass
class Product:
    """Domain entity for a catalog product."""

    name: str
    slug: str
    price: Decimal
    id: UUID = field(default_factory=uuid4)
    description: str | None = None
    specification: str | None = None
    supplier_info: str | None = None
    ring_sizes: list[str] | None = None
    bracelet_sizes: list[str] | None = None
    payal_sizes: list[str] | None = None
    discount_price: Decimal | None = None
    images: list[str] = field(default_factory=list)
    category_id: UUID | None = None
    stock: int | None = None
    is_featured: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
