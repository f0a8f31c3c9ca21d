"""
Response view assembly.

Entities carry no ORM relationships, so related rows are bulk-loaded here and
stitched into the response models: one query per related table, never one per
row.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from skillbridge.core.database.entities.bookings import Booking
from skillbridge.core.database.entities.categories import Category
from skillbridge.core.database.entities.reviews import Review
from skillbridge.core.database.entities.tutor_profiles import TutorProfile
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.models.io.admin import AdminUserRead
from skillbridge.core.models.io.bookings import BookingDetail, BookingTutor
from skillbridge.core.models.io.categories import CategorySummary
from skillbridge.core.models.io.reviews import ReviewRead, ReviewWithStudent
from skillbridge.core.models.io.tutors import (
    TutorDetail,
    TutorProfileRead,
    TutorProfileSummary,
    TutorRead,
    TutorReviewRead,
)
from skillbridge.core.models.io.users import UserSummary

RECENT_REVIEWS_LIMIT = 20


def profile_view(profile: TutorProfile, categories: Sequence[Category] = ()) -> TutorProfileRead:
    return TutorProfileRead.model_validate(
        {
            **profile.model_dump(),
            "subjects": list(profile.subjects or []),
            "categories": [CategorySummary.model_validate(c) for c in categories],
        }
    )


async def load_profile_view(repos: RepoBundle, profile: TutorProfile) -> TutorProfileRead:
    categories = await repos.tutor_profiles.categories_for([profile.id])
    return profile_view(profile, categories[profile.id])


def tutor_view(user: User, profile: TutorProfile, categories: Sequence[Category] = ()) -> TutorRead:
    return TutorRead(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        tutor_profile=profile_view(profile, categories),
    )


async def tutor_views(repos: RepoBundle, pairs: Sequence[tuple]) -> List[TutorRead]:
    """Build listing views for (User, TutorProfile) pairs, preserving order."""
    categories = await repos.tutor_profiles.categories_for([profile.id for _, profile in pairs])
    return [tutor_view(user, profile, categories[profile.id]) for user, profile in pairs]


async def tutor_detail(repos: RepoBundle, user: User, profile: TutorProfile) -> TutorDetail:
    """A tutor's public page with the most recent reviews and their authors."""
    categories = await repos.tutor_profiles.categories_for([profile.id])
    reviews = await repos.reviews.list_for_tutor(user.id, limit=RECENT_REVIEWS_LIMIT)
    students = await repos.users.get_many([r.student_id for r in reviews])
    base = tutor_view(user, profile, categories[profile.id])
    return TutorDetail(
        **base.model_dump(),
        reviews=[
            TutorReviewRead(
                id=r.id,
                rating=r.rating,
                comment=r.comment,
                created_at=r.created_at,
                student=_summary(students.get(r.student_id), with_email=False),
            )
            for r in reviews
        ],
    )


def _summary(user: Optional[User], with_email: bool = True) -> Optional[UserSummary]:
    if user is None:
        return None
    return UserSummary(id=user.id, name=user.name, email=user.email if with_email else None)


async def booking_details(repos: RepoBundle, bookings: Sequence[Booking]) -> List[BookingDetail]:
    """Attach both parties, the tutor's rate and the review to each booking."""
    user_ids = {b.student_id for b in bookings} | {b.tutor_id for b in bookings}
    users = await repos.users.get_many(list(user_ids))
    profiles = await repos.tutor_profiles.get_by_user_ids([b.tutor_id for b in bookings])
    reviews = await repos.reviews.get_by_booking_ids([b.id for b in bookings])

    details = []
    for booking in bookings:
        tutor = users.get(booking.tutor_id)
        profile = profiles.get(booking.tutor_id)
        review = reviews.get(booking.id)
        details.append(
            BookingDetail(
                **booking.model_dump(),
                student=_summary(users.get(booking.student_id)),
                tutor=(
                    BookingTutor(
                        id=tutor.id,
                        name=tutor.name,
                        email=tutor.email,
                        hourly_rate=profile.hourly_rate if profile else None,
                    )
                    if tutor
                    else None
                ),
                review=ReviewRead.model_validate(review) if review else None,
            )
        )
    return details


async def booking_detail(repos: RepoBundle, booking: Booking) -> BookingDetail:
    return (await booking_details(repos, [booking]))[0]


async def reviews_with_students(repos: RepoBundle, reviews: Sequence[Review]) -> List[ReviewWithStudent]:
    students = await repos.users.get_many([r.student_id for r in reviews])
    return [
        ReviewWithStudent(
            **ReviewRead.model_validate(r).model_dump(),
            student=_summary(students.get(r.student_id), with_email=False),
        )
        for r in reviews
    ]


async def admin_user_views(repos: RepoBundle, users: Sequence[User]) -> List[AdminUserRead]:
    """User rows for the admin console with profile summary and booking counts."""
    ids = [u.id for u in users]
    profiles: Dict[str, TutorProfile] = await repos.tutor_profiles.get_by_user_ids(ids)
    counts = await repos.users.booking_counts(ids)
    views = []
    for user in users:
        profile = profiles.get(user.id)
        as_student, as_tutor = counts.get(user.id, (0, 0))
        views.append(
            AdminUserRead(
                **user.model_dump(exclude={"password"}),
                tutor_profile=TutorProfileSummary.model_validate(profile) if profile else None,
                student_booking_count=as_student,
                tutor_booking_count=as_tutor,
            )
        )
    return views
