"""
Database repository layer using SQLModel.

This package contains all repository classes organized by table. Each module
provides async data access operations for its corresponding SQLModel entity.

Modules:
- base: AsyncBaseRepository and QueryBuilder utilities
- users: account lookups and admin listings
- tutor_profiles: tutor profiles, category links and rating aggregate
- categories: subject categories
- bookings: bookings and booking aggregates
- reviews: reviews and rating statistics
- bundle: all repositories bound to one session
"""

from .bookings import BookingRepository
from .bundle import RepoBundle, build_repos
from .categories import CategoryRepository
from .reviews import ReviewRepository
from .tutor_profiles import TutorProfileRepository
from .users import UserRepository

__all__ = [
    "BookingRepository",
    "CategoryRepository",
    "RepoBundle",
    "ReviewRepository",
    "TutorProfileRepository",
    "UserRepository",
    "build_repos",
]
