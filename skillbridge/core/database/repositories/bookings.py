"""
Booking repository implementation.

This module provides data access operations for tutoring session bookings,
including the role-scoped listings and the aggregates behind admin stats.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased
from sqlmodel import select

from skillbridge.core.models.domain.enums import BookingStatus

from ..entities.bookings import Booking
from ..entities.tutor_profiles import TutorProfile
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder


class BookingRepository(AsyncBaseRepository[Booking]):
    """Repository for booking data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Booking)

    async def search(
        self,
        student_id: Optional[str] = None,
        tutor_id: Optional[str] = None,
        status: Optional[BookingStatus] = None,
        search: Optional[str] = None,
    ) -> List[Booking]:
        """List bookings, latest session first.

        Args:
            student_id: Only bookings made by this student
            tutor_id: Only bookings taught by this tutor
            status: Only bookings in this status
            search: Case-insensitive substring of the student's or tutor's name

        Returns:
            List of Booking instances
        """
        stmt = select(Booking).order_by(Booking.date_time.desc())  # type: ignore
        stmt = QueryBuilder.apply_filters(
            stmt, Booking, {"student_id": student_id, "tutor_id": tutor_id, "status": status}
        )
        if search:
            student = aliased(User)
            tutor = aliased(User)
            stmt = (
                stmt.join(student, student.id == Booking.student_id)
                .join(tutor, tutor.id == Booking.tutor_id)
                .where(or_(QueryBuilder.contains(student.name, search), QueryBuilder.contains(tutor.name, search)))
            )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_status(self) -> Dict[BookingStatus, int]:
        """Number of bookings per status."""
        result = await self.session.execute(select(Booking.status, func.count()).group_by(Booking.status))
        return {status: count for status, count in result.all()}

    async def completed_revenue(self) -> float:
        """Sum of ``hourly_rate * duration / 60`` over completed bookings.

        Tutors without a profile contribute nothing.
        """
        stmt = (
            select(func.coalesce(func.sum(TutorProfile.hourly_rate * Booking.duration / 60.0), 0.0))
            .select_from(Booking)
            .join(TutorProfile, TutorProfile.user_id == Booking.tutor_id)
            .where(Booking.status == BookingStatus.COMPLETED)
        )
        result = await self.session.execute(stmt)
        return float(result.scalar_one())
