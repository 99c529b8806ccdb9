"""Pydantic schemas for the Product API."""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import reject_null


class ProductCreate(BaseModel):
    """Schema for creating a Product."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    specification: str | None = None
    supplier_info: str | None = None
    ring_sizes: list[str] | None = None
    bracelet_sizes: list[str] | None = None
    payal_sizes: list[str] | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    discount_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    images: list[str] = Field(default_factory=list)
    category_id: UUID | None = None
    stock: int | None = Field(None, ge=0)
    is_featured: bool = False


class ProductUpdate(BaseModel):
    """Schema for updating a Product; ``id`` travels in the body."""

    id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    specification: str | None = None
    supplier_info: str | None = None
    ring_sizes: list[str] | None = None
    bracelet_sizes: list[str] | None = None
    payal_sizes: list[str] | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    discount_price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    images: list[str] | None = None
    category_id: UUID | None = None
    stock: int | None = Field(None, ge=0)
    is_featured: bool | None = None

    @field_validator("name", "slug", "price", "images", "is_featured")
    @classmethod
    def reject_null_fields(cls, value: Any) -> Any:
        return reject_null(value)


class ProductResponse(BaseModel):
    """Schema for Product response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    specification: str | None = None
    supplier_info: str | None = None
    ring_sizes: list[str] | None = None
    bracelet_sizes: list[str] | None = None
    payal_sizes: list[str] | None = None
    price: float
    discount_price: float | None = None
    images: list[str]
    category_id: UUID | None = None
    stock: int | None = None
    is_featured: bool
    created_at: datetime
    updated_at: datetime


class ProductListResponse(BaseModel):
    products: list[ProductResponse]


class ProductDetailResponse(BaseModel):
    product: ProductResponse
