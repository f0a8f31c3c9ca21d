"""
User repository implementation.

This module provides data access operations for marketplace accounts,
including the filtered listings used by tutor search and the admin console.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from skillbridge.core.models.domain.enums import UserRole, UserStatus

from ..entities.bookings import Booking
from ..entities.tutor_profiles import TutorProfile
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by e-mail address.

        Args:
            email: Address to look up (exact match)

        Returns:
            User instance or None
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalars().first()

    async def search(
        self,
        role: Optional[UserRole] = None,
        status: Optional[UserStatus] = None,
        search: Optional[str] = None,
    ) -> List[User]:
        """List users for the admin console, newest first.

        Args:
            role: Only users with this role
            status: Only users with this status
            search: Case-insensitive substring of name or e-mail

        Returns:
            List of User instances
        """
        stmt = select(User).order_by(User.created_at.desc())  # type: ignore
        stmt = QueryBuilder.apply_filters(stmt, User, {"role": role, "status": status})
        if search:
            stmt = stmt.where(or_(QueryBuilder.contains(User.name, search), QueryBuilder.contains(User.email, search)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_tutors(self, search: Optional[str] = None) -> List[Tuple[User, TutorProfile]]:
        """List active TUTOR users that have a profile.

        Args:
            search: Case-insensitive substring of the tutor's name

        Returns:
            (User, TutorProfile) pairs
        """
        stmt = (
            select(User, TutorProfile)
            .join(TutorProfile, TutorProfile.user_id == User.id)
            .where(User.role == UserRole.TUTOR, User.status == UserStatus.ACTIVE)
        )
        if search:
            stmt = stmt.where(QueryBuilder.contains(User.name, search))
        result = await self.session.execute(stmt)
        return [(user, profile) for user, profile in result.all()]

    async def get_many(self, user_ids: List[str]) -> Dict[str, User]:
        """Load several users at once, keyed by id."""
        if not user_ids:
            return {}
        result = await self.session.execute(select(User).where(User.id.in_(set(user_ids))))  # type: ignore
        return {user.id: user for user in result.scalars().all()}

    async def count_by_role(self) -> Dict[UserRole, int]:
        """Number of users per role."""
        result = await self.session.execute(select(User.role, func.count()).group_by(User.role))
        return {role: count for role, count in result.all()}

    async def booking_counts(self, user_ids: List[str]) -> Dict[str, Tuple[int, int]]:
        """Bookings per user as (as student, as tutor).

        Args:
            user_ids: Users to count for

        Returns:
            Mapping of user id to a (student_bookings, tutor_bookings) pair; users
            without bookings are absent.
        """
        if not user_ids:
            return {}
        ids = set(user_ids)
        as_student = await self.session.execute(
            select(Booking.student_id, func.count())
            .where(Booking.student_id.in_(ids))  # type: ignore
            .group_by(Booking.student_id)
        )
        as_tutor = await self.session.execute(
            select(Booking.tutor_id, func.count())
            .where(Booking.tutor_id.in_(ids))  # type: ignore
            .group_by(Booking.tutor_id)
        )
        counts: Dict[str, Tuple[int, int]] = {}
        for user_id, count in as_student.all():
            counts[user_id] = (count, 0)
        for user_id, count in as_tutor.all():
            counts[user_id] = (counts.get(user_id, (0, 0))[0], count)
        return counts
