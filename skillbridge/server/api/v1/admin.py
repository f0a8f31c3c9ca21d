"""
Admin Console Endpoints.

Every route here requires the ADMIN role.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillbridge.core.models.domain.enums import UserRole, UserStatus
from skillbridge.core.models.io.admin import AdminUserListResponse, PlatformStats, UserStatusUpdate
from skillbridge.core.models.io.bookings import BookingListResponse
from skillbridge.core.models.io.users import UserRead, UserResponse
from skillbridge.server.services import admin as admin_service
from skillbridge.server.services.deps import AdminDep, ReposDep
from skillbridge.server.services.views import admin_user_views, booking_details

from .bookings import parse_status

router = APIRouter(tags=["admin"])


def _parse_enum(enum_cls, value: Optional[str], label: str):
    if not value:
        return None
    try:
        return enum_cls(value.upper())
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {label} value")


@router.get("/users", response_model=AdminUserListResponse, summary="List Users")
async def list_users(
    admin: AdminDep,
    repos: ReposDep,
    role: Optional[str] = Query(default=None),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, description="Substring of name or e-mail"),
) -> AdminUserListResponse:
    """Users newest first, each with their tutor profile summary and booking counts."""
    users = await repos.users.search(
        role=_parse_enum(UserRole, role, "role"),
        status=_parse_enum(UserStatus, status_filter, "status"),
        search=search,
    )
    views = await admin_user_views(repos, users)
    return AdminUserListResponse(users=views, count=len(views))


@router.patch(
    "/users/{user_id}/status",
    response_model=UserResponse,
    summary="Ban or Unban User",
    responses={403: {"description": "Cannot ban admin users"}, 404: {"description": "User not found"}},
)
async def update_user_status(
    user_id: str, data: UserStatusUpdate, admin: AdminDep, repos: ReposDep
) -> UserResponse:
    new_status = UserStatus(data.status)
    user = await admin_service.set_user_status(repos, user_id, new_status, admin)
    verb = "banned" if new_status == UserStatus.BANNED else "unbanned"
    return UserResponse(message=f"User {verb} successfully", user=UserRead.model_validate(user))


@router.get("/bookings", response_model=BookingListResponse, summary="List All Bookings")
async def list_all_bookings(
    admin: AdminDep,
    repos: ReposDep,
    status_filter: Optional[str] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, description="Substring of the student's or tutor's name"),
) -> BookingListResponse:
    bookings = await repos.bookings.search(status=parse_status(status_filter), search=search)
    details = await booking_details(repos, bookings)
    return BookingListResponse(bookings=details, count=len(details))


@router.get("/stats", response_model=PlatformStats, summary="Platform Statistics")
async def stats(admin: AdminDep, repos: ReposDep) -> PlatformStats:
    return await admin_service.platform_stats(repos)
