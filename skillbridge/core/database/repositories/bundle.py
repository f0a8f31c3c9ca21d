"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances sharing
one session, so that a request's writes land in the same transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .bookings import BookingRepository
from .categories import CategoryRepository
from .reviews import ReviewRepository
from .tutor_profiles import TutorProfileRepository
from .users import UserRepository


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    session: AsyncSession
    users: UserRepository
    tutor_profiles: TutorProfileRepository
    categories: CategoryRepository
    bookings: BookingRepository
    reviews: ReviewRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    """Build a RepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        session=session,
        users=UserRepository(session),
        tutor_profiles=TutorProfileRepository(session),
        categories=CategoryRepository(session),
        bookings=BookingRepository(session),
        reviews=ReviewRepository(session),
    )
