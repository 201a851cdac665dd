"""Profile API routes."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentToken, MasterToken, OptionalToken
from api.dependencies.services import get_profile_service
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileWrite,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="Get several profiles",
    responses={404: {"description": "At least one profile does not exist"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profiles(
    request: Request,
    token: OptionalToken,
    ids: Annotated[list[UUID], Query(alias="id")],
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get profiles by ID, newest first. Fails if any ID is unknown."""
    profiles = await service.get_in(ids)
    return ProfileListResponse(
        data=[ProfileResponse(**profile.to_api(token)) for profile in profiles]
    )


@router.get(
    "/mine",
    response_model=ProfileListResponse,
    summary="List own profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_own_profiles(
    request: Request,
    token: CurrentToken,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get all profiles of the authenticated user, newest first."""
    profiles = await service.get_all_for_token(token)
    return ProfileListResponse(
        data=[ProfileResponse(**profile.to_api(token)) for profile in profiles]
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: UUID,
    token: OptionalToken,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a single profile. The owner id is only visible to the owner."""
    profile = await service.get_by_id(profile_id)
    return ProfileDetailResponse(data=ProfileResponse(**profile.to_api(token)))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"description": "A field does not match its format rule"},
        409: {"description": "Screen name already taken"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileWrite,
    token: MasterToken,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create a profile for the authenticated user."""
    profile = await service.create(token, name=body.name, text=body.text, sn=body.sn)
    return ProfileDetailResponse(data=ProfileResponse(**profile.to_api(token)))


@router.put(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Update a profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"description": "A field does not match its format rule"},
        403: {"description": "Profile belongs to another user"},
        404: {"description": "Profile not found"},
        409: {"description": "Screen name already taken"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: UUID,
    body: ProfileWrite,
    token: MasterToken,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Replace name, text and screen name of an owned profile."""
    profile = await service.update(
        token,
        profile_id,
        name=body.name,
        text=body.text,
        sn=body.sn,
    )
    return ProfileDetailResponse(data=ProfileResponse(**profile.to_api(token)))
