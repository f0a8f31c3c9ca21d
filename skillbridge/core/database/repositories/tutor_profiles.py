"""
Tutor profile repository implementation.

This module provides data access operations for tutor profiles, their
category links and the cached rating aggregate.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import delete, exists, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.bookings import Booking
from ..entities.categories import Category
from ..entities.tutor_profiles import TutorCategoryLink, TutorProfile
from .base import AsyncBaseRepository


class TutorProfileRepository(AsyncBaseRepository[TutorProfile]):
    """Repository for tutor profile data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, TutorProfile)

    async def get_by_user_id(self, user_id: str) -> Optional[TutorProfile]:
        """Get the profile owned by a tutor user.

        Args:
            user_id: The tutor's user id

        Returns:
            TutorProfile instance or None
        """
        result = await self.session.execute(select(TutorProfile).where(TutorProfile.user_id == user_id))
        return result.scalars().first()

    async def get_by_user_ids(self, user_ids: List[str]) -> Dict[str, TutorProfile]:
        """Load the profiles of several tutors, keyed by user id."""
        if not user_ids:
            return {}
        result = await self.session.execute(
            select(TutorProfile).where(TutorProfile.user_id.in_(set(user_ids)))  # type: ignore
        )
        return {profile.user_id: profile for profile in result.scalars().all()}

    async def categories_for(self, profile_ids: List[str]) -> Dict[str, List[Category]]:
        """Categories linked to each profile, ordered by name.

        Args:
            profile_ids: Tutor profile ids

        Returns:
            Mapping of profile id to its categories; every requested id is present.
        """
        linked: Dict[str, List[Category]] = {profile_id: [] for profile_id in profile_ids}
        if not profile_ids:
            return linked
        result = await self.session.execute(
            select(TutorCategoryLink.tutor_profile_id, Category)
            .join(Category, Category.id == TutorCategoryLink.category_id)
            .where(TutorCategoryLink.tutor_profile_id.in_(set(profile_ids)))  # type: ignore
            .order_by(Category.name)
        )
        for profile_id, category in result.all():
            linked[profile_id].append(category)
        return linked

    async def set_categories(self, profile: TutorProfile, category_ids: List[str]) -> None:
        """Replace the profile's category links. Does not commit.

        Args:
            profile: Persisted (flushed) tutor profile
            category_ids: Ids of existing categories
        """
        await self.session.execute(
            delete(TutorCategoryLink).where(TutorCategoryLink.tutor_profile_id == profile.id)  # type: ignore
        )
        for category_id in dict.fromkeys(category_ids):
            self.session.add(TutorCategoryLink(tutor_profile_id=profile.id, category_id=category_id))
        await self.session.flush()

    async def apply_rating(self, profile: TutorProfile, rating: float, review_count: int) -> TutorProfile:
        """Store the recomputed rating aggregate. Does not commit."""
        profile.rating = rating
        profile.review_count = review_count
        profile.updated_at = utc_now()
        self.session.add(profile)
        await self.session.flush()
        return profile

    async def count_with_bookings(self) -> int:
        """Number of tutor profiles whose owner has at least one booking."""
        has_booking = exists().where(Booking.tutor_id == TutorProfile.user_id)
        result = await self.session.execute(select(func.count()).select_from(TutorProfile).where(has_booking))
        return int(result.scalar_one())
