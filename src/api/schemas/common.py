"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error: str
    error_code: str
    details: Any | None = None


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool = True


def reject_null(value: Any) -> Any:
    """Field validator for partial updates: the field may be omitted, not nulled."""
    if value is None:
        raise ValueError("Field may not be null")
    return value
