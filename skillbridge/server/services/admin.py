"""
Admin console operations.
"""

from __future__ import annotations

from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import BookingStatus, UserRole, UserStatus
from skillbridge.core.models.io.admin import PlatformStats

from .errors import ForbiddenError, NotFoundError

logger = get_logger(__name__)


async def set_user_status(repos: RepoBundle, user_id: str, status: UserStatus, admin: User) -> User:
    """
    Ban or reinstate an account.

    Raises:
        NotFoundError: no such user
        ForbiddenError: the target is an admin and ``status`` is BANNED
    """
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    if user.role == UserRole.ADMIN and status == UserStatus.BANNED:
        raise ForbiddenError("Cannot ban admin users")

    user.status = status
    user = await repos.users.update(user)
    logger.info(f"Admin {admin.id} set status of user {user.id} to {status.value}")
    return user


async def platform_stats(repos: RepoBundle) -> PlatformStats:
    """Collect the dashboard counters."""
    by_role = await repos.users.count_by_role()
    by_status = await repos.bookings.count_by_status()

    return PlatformStats(
        total_users=await repos.users.count(),
        total_students=by_role.get(UserRole.STUDENT, 0),
        total_tutors=await repos.tutor_profiles.count(),
        total_bookings=sum(by_status.values()),
        total_reviews=await repos.reviews.count(),
        total_categories=await repos.categories.count(),
        active_users=await repos.users.count({"status": UserStatus.ACTIVE}),
        banned_users=await repos.users.count({"status": UserStatus.BANNED}),
        active_tutors=await repos.tutor_profiles.count_with_bookings(),
        total_revenue=round(await repos.bookings.completed_revenue(), 2),
        bookings_by_status={s.value.lower(): by_status.get(s, 0) for s in BookingStatus},
    )
