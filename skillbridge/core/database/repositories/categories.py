"""
Category repository implementation.

This module provides data access operations for subject categories.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from ..entities.tutor_profiles import TutorCategoryLink
from .base import AsyncBaseRepository


class CategoryRepository(AsyncBaseRepository[Category]):
    """Repository for category data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, Category)

    async def list_with_tutor_counts(self) -> List[Tuple[Category, int]]:
        """All categories ordered by name, each with its number of linked tutors."""
        stmt = (
            select(Category, func.count(TutorCategoryLink.tutor_profile_id))
            .outerjoin(TutorCategoryLink, TutorCategoryLink.category_id == Category.id)
            .group_by(Category.id)
            .order_by(Category.name)
        )
        result = await self.session.execute(stmt)
        return [(category, count) for category, count in result.all()]

    async def find_conflict(
        self, name: Optional[str] = None, slug: Optional[str] = None, exclude_id: Optional[str] = None
    ) -> Optional[Category]:
        """Find another category already using the name or slug.

        Args:
            name: Candidate name
            slug: Candidate slug
            exclude_id: Category to ignore (the one being updated)

        Returns:
            The clashing Category or None
        """
        clauses = []
        if name is not None:
            clauses.append(Category.name == name)
        if slug is not None:
            clauses.append(Category.slug == slug)
        if not clauses:
            return None
        stmt = select(Category).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_many(self, category_ids: List[str]) -> List[Category]:
        """Load the categories with the given ids (unknown ids are skipped)."""
        if not category_ids:
            return []
        result = await self.session.execute(
            select(Category).where(Category.id.in_(set(category_ids)))  # type: ignore
        )
        return list(result.scalars().all())

    async def tutor_count(self, category_id: str) -> int:
        """Number of tutor profiles linked to the category."""
        result = await self.session.execute(
            select(func.count()).select_from(TutorCategoryLink).where(TutorCategoryLink.category_id == category_id)
        )
        return int(result.scalar_one())
