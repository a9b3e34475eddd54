"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import ProfileResponse, ProfileUpsert
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

PROFILE_DELETED_MESSAGE = "User profile deleted"


@router.get(
    "",
    response_model=ProfileResponse | None,
    summary="Get the latest profile",
    responses={
        200: {"description": "Most recently created profile, or null"},
        500: {"model": ErrorResponse, "description": "Failed to read profile"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse | None:
    """Get the profile with the highest ID, or null when none exist."""
    profile = await service.get_latest()
    if profile is None:
        return None
    return ProfileResponse.model_validate(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update a profile",
    responses={
        200: {"description": "Profile saved"},
        400: {"model": ErrorResponse, "description": "Email or phone already in use"},
        500: {"model": ErrorResponse, "description": "Failed to save profile"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def save_profile(
    request: Request,
    body: ProfileUpsert,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Update the profile when a positive id is given, otherwise create it."""
    profile = await service.upsert(
        id=body.id,
        username=body.username,
        email=body.email,
        phone=body.phone,
    )
    return ProfileResponse.model_validate(profile)


@router.delete(
    "/{profile_id}",
    response_model=MessageResponse,
    summary="Delete a profile",
    responses={
        200: {"description": "Profile deleted"},
        404: {"model": ErrorResponse, "description": "Profile not found"},
        500: {"model": ErrorResponse, "description": "Failed to delete profile"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete a profile. Deleting the same id twice returns 404 the second time."""
    await service.delete(profile_id)
    return MessageResponse(message=PROFILE_DELETED_MESSAGE)
