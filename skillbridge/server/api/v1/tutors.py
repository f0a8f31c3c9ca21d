"""
Tutor Endpoints.

Public tutor search and detail pages, plus profile management for the
signed-in tutor. ``/profile`` and ``/availability`` are declared before
``/{tutor_id}`` so they are not captured as ids.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import SortField, SortOrder, UserRole
from skillbridge.core.models.io.tutors import (
    AvailabilityUpdate,
    TutorDetailResponse,
    TutorListResponse,
    TutorProfileEnvelope,
    TutorProfileResponse,
    TutorProfileUpdate,
)
from skillbridge.server.services import tutors as tutor_service
from skillbridge.server.services.deps import ReposDep, TutorDep
from skillbridge.server.services.views import load_profile_view, tutor_detail, tutor_views

logger = get_logger(__name__)

router = APIRouter(tags=["tutors"])


@router.get(
    "",
    response_model=TutorListResponse,
    summary="Search Tutors",
    description="List active tutors, optionally filtered by category, rating, price and name.",
)
async def list_tutors(
    repos: ReposDep,
    category: Optional[str] = Query(default=None, description="Category slug"),
    min_rating: Optional[float] = Query(default=None, ge=0, le=5),
    max_price: Optional[float] = Query(default=None, ge=0),
    search: Optional[str] = Query(default=None, description="Substring of the tutor's name"),
    sort_by: SortField = SortField.rating,
    order: SortOrder = SortOrder.desc,
) -> TutorListResponse:
    """
    Search tutors.

    - **category**: only tutors linked to the category with this slug
    - **min_rating** / **max_price**: rating floor and hourly rate ceiling
    - **sort_by**: `rating` (default) or `price`; **order**: `desc` (default) or `asc`
    """
    pairs = await tutor_service.search_tutors(
        repos,
        category=category,
        min_rating=min_rating,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        order=order,
    )
    tutors = await tutor_views(repos, pairs)
    return TutorListResponse(tutors=tutors, count=len(tutors))


@router.get(
    "/profile",
    response_model=TutorProfileEnvelope,
    summary="Own Tutor Profile",
    responses={404: {"description": "Profile not created yet"}},
)
async def get_own_profile(tutor: TutorDep, repos: ReposDep) -> TutorProfileEnvelope:
    profile = await repos.tutor_profiles.get_by_user_id(tutor.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tutor profile not found")
    return TutorProfileEnvelope(profile=await load_profile_view(repos, profile))


@router.put(
    "/profile",
    response_model=TutorProfileResponse,
    summary="Update Tutor Profile",
    description="Create or partially update the signed-in tutor's profile.",
    responses={400: {"description": "Invalid data or unknown category"}},
)
async def update_profile(data: TutorProfileUpdate, tutor: TutorDep, repos: ReposDep) -> TutorProfileResponse:
    profile = await tutor_service.update_profile(repos, tutor, data)
    return TutorProfileResponse(message="Profile updated successfully", profile=await load_profile_view(repos, profile))


@router.put(
    "/availability",
    response_model=TutorProfileResponse,
    summary="Update Availability",
    responses={404: {"description": "Profile not created yet"}},
)
async def update_availability(
    data: AvailabilityUpdate, tutor: TutorDep, repos: ReposDep
) -> TutorProfileResponse:
    profile = await repos.tutor_profiles.get_by_user_id(tutor.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tutor profile not found")
    profile.availability = data.availability
    profile = await repos.tutor_profiles.update(profile)
    return TutorProfileResponse(
        message="Availability updated successfully", profile=await load_profile_view(repos, profile)
    )


@router.get(
    "/{tutor_id}",
    response_model=TutorDetailResponse,
    summary="Tutor Detail",
    description="A tutor's profile, categories and 20 most recent reviews.",
    responses={404: {"description": "Tutor not found"}},
)
async def get_tutor(tutor_id: str, repos: ReposDep) -> TutorDetailResponse:
    user = await repos.users.get_by_id(tutor_id)
    profile = await repos.tutor_profiles.get_by_user_id(tutor_id) if user else None
    if user is None or user.role != UserRole.TUTOR or profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tutor not found")
    return TutorDetailResponse(tutor=await tutor_detail(repos, user, profile))
