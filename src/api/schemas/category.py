"""Pydantic schemas for the Category API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.schemas.common import reject_null


class CategoryCreate(BaseModel):
    """Schema for creating a Category."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    image: str | None = Field(None, max_length=1000)


class CategoryUpdate(BaseModel):
    """Schema for updating a Category; ``id`` travels in the body."""

    id: UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    image: str | None = Field(None, max_length=1000)

    @field_validator("name", "slug")
    @classmethod
    def reject_null_fields(cls, value: Any) -> Any:
        return reject_null(value)


class CategoryResponse(BaseModel):
    """Schema for Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None = None
    image: str | None = None
    created_at: datetime
    updated_at: datetime


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]


class CategoryDetailResponse(BaseModel):
    category: CategoryResponse
