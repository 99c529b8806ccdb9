"""Pydantic schemas for the Profile API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from domain.entities.profile import ProfileRole


class EnsureProfileRequest(BaseModel):
    """Body of ``POST /api/profiles/ensure``.

    ``id`` is optional at the schema level so a missing id is reported by the
    service with the same message as an empty one.
    """

    id: str | None = None
    email: str | None = None
    name: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "name": "jane.doe",
                "role": "customer",
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: str
    name: str
    role: ProfileRole
    created_at: datetime
    updated_at: datetime


class EnsureProfileResponse(BaseModel):
    profile: ProfileResponse
