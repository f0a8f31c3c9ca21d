"""
Admin I/O models.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from .tutors import TutorProfileSummary
from .users import UserRead


class AdminUserRead(UserRead):
    tutor_profile: Optional[TutorProfileSummary] = None
    student_booking_count: int = 0
    tutor_booking_count: int = 0


class AdminUserListResponse(BaseModel):
    users: List[AdminUserRead]
    count: int


class UserStatusUpdate(BaseModel):
    """Body of ``PATCH /api/admin/users/{id}/status``."""

    status: Literal["ACTIVE", "BANNED"]


class PlatformStats(BaseModel):
    """Platform-wide counters for the admin dashboard.

    ``total_revenue`` sums ``hourly_rate * duration / 60`` over completed
    bookings. ``bookings_by_status`` is keyed by lowercase status name.
    """

    total_users: int
    total_students: int
    total_tutors: int
    total_bookings: int
    total_reviews: int
    total_categories: int
    active_users: int
    banned_users: int
    active_tutors: int
    total_revenue: float
    bookings_by_status: Dict[str, int]
