"""
Review repository implementation.

This module provides data access operations for tutor reviews and the rating
aggregate derived from them.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.reviews import Review
from .base import AsyncBaseRepository, QueryBuilder


class ReviewRepository(AsyncBaseRepository[Review]):
    """Repository for review data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Review)

    async def get_by_booking_id(self, booking_id: str) -> Optional[Review]:
        """Get the review left for a booking, if any."""
        result = await self.session.execute(select(Review).where(Review.booking_id == booking_id))
        return result.scalars().first()

    async def get_by_booking_ids(self, booking_ids: List[str]) -> Dict[str, Review]:
        """Load the reviews of several bookings, keyed by booking id."""
        if not booking_ids:
            return {}
        result = await self.session.execute(
            select(Review).where(Review.booking_id.in_(set(booking_ids)))  # type: ignore
        )
        return {review.booking_id: review for review in result.scalars().all()}

    async def list_for_tutor(self, tutor_id: str, limit: Optional[int] = None) -> List[Review]:
        """Reviews received by a tutor, newest first.

        Args:
            tutor_id: The tutor's user id
            limit: Maximum number of reviews to return

        Returns:
            List of Review instances
        """
        stmt = select(Review).where(Review.tutor_id == tutor_id).order_by(Review.created_at.desc())  # type: ignore
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def rating_stats(self, tutor_id: str) -> Tuple[float, int]:
        """Arithmetic mean and number of a tutor's review ratings.

        Pending (flushed) reviews in the current transaction are included.

        Returns:
            (average, count); the average is 0.0 when there are no reviews
        """
        result = await self.session.execute(
            select(func.avg(Review.rating), func.count(Review.id)).where(Review.tutor_id == tutor_id)
        )
        average, count = result.one()
        return (float(average) if average is not None else 0.0, int(count))
