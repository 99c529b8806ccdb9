"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.services import get_profile_service
from api.schemas.common import ErrorResponse
from api.schemas.profile import (
    EnsureProfileRequest,
    EnsureProfileResponse,
    ProfileResponse,
)
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "/ensure",
    response_model=EnsureProfileResponse,
    summary="Get or create a profile",
    responses={
        200: {"description": "Existing or newly created profile"},
        400: {"model": ErrorResponse, "description": "Missing user id or invalid JSON"},
        500: {"model": ErrorResponse, "description": "Backend not configured or store failure"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def ensure_profile(
    request: Request,
    body: EnsureProfileRequest,
    service: ProfileService = Depends(get_profile_service),
) -> EnsureProfileResponse:
    """Return the caller's profile, creating it on first sign-in.

    Safe to call concurrently for the same id: every caller gets the same row.
    """
    profile = await service.ensure(body.id, email=body.email, name=body.name)
    return EnsureProfileResponse(profile=ProfileResponse.model_validate(profile))
