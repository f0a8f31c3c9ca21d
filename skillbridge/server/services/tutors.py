"""
Tutor search and profile maintenance.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from skillbridge.core.database.base import utc_now
from skillbridge.core.database.entities.tutor_profiles import TutorProfile
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import SortField, SortOrder
from skillbridge.core.models.io.tutors import TutorProfileUpdate

from .errors import BadRequestError

logger = get_logger(__name__)

NULLABLE_FIELDS = frozenset({"bio", "availability"})


async def search_tutors(
    repos: RepoBundle,
    category: Optional[str] = None,
    min_rating: Optional[float] = None,
    max_price: Optional[float] = None,
    search: Optional[str] = None,
    sort_by: SortField = SortField.rating,
    order: SortOrder = SortOrder.desc,
) -> List[Tuple[User, TutorProfile]]:
    """
    Find active tutors matching the filters.

    Args:
        repos: Repository bundle
        category: Category slug the tutor must be linked to
        min_rating: Lowest acceptable average rating
        max_price: Highest acceptable hourly rate
        search: Case-insensitive substring of the tutor's name
        sort_by: Sort key
        order: Sort direction

    Returns:
        Ordered (User, TutorProfile) pairs
    """
    pairs = await repos.users.list_active_tutors(search=search)

    if min_rating is not None:
        pairs = [(u, p) for u, p in pairs if p.rating >= min_rating]
    if max_price is not None:
        pairs = [(u, p) for u, p in pairs if p.hourly_rate <= max_price]
    if category:
        linked = await repos.tutor_profiles.categories_for([p.id for _, p in pairs])
        pairs = [(u, p) for u, p in pairs if any(c.slug == category for c in linked[p.id])]

    if sort_by == SortField.price:
        key = lambda pair: pair[1].hourly_rate  # noqa: E731
    else:
        key = lambda pair: pair[1].rating  # noqa: E731
    return sorted(pairs, key=key, reverse=order == SortOrder.desc)


async def update_profile(repos: RepoBundle, tutor: User, data: TutorProfileUpdate) -> TutorProfile:
    """
    Create or partially update the tutor's profile.

    Only fields present in the request body are changed. When ``categories``
    is given, the profile's links are replaced by it.

    Raises:
        BadRequestError: a category id does not exist
    """
    changes = data.model_dump(exclude_unset=True)
    category_ids = changes.pop("categories", None)

    if category_ids is not None:
        found = await repos.categories.get_many(category_ids)
        missing = set(category_ids) - {c.id for c in found}
        if missing:
            raise BadRequestError(f"Unknown category id(s): {', '.join(sorted(missing))}")

    profile = await repos.tutor_profiles.get_by_user_id(tutor.id)
    if profile is None:
        profile = TutorProfile(user_id=tutor.id)
        logger.info(f"Creating tutor profile for user {tutor.id}")

    for field, value in changes.items():
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(profile, field, value)
    profile.updated_at = utc_now()
    await repos.tutor_profiles.stage(profile)

    if category_ids is not None:
        await repos.tutor_profiles.set_categories(profile, category_ids)

    await repos.session.commit()
    await repos.session.refresh(profile)
    return profile
