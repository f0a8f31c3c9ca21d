"""
Review creation and the tutor rating aggregate.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from skillbridge.core.database.entities.reviews import Review
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import BookingStatus
from skillbridge.core.models.io.reviews import ReviewCreate

from .errors import BadRequestError, ForbiddenError, NotFoundError, unique_violation_as

logger = get_logger(__name__)

ALREADY_REVIEWED_MESSAGE = "You have already reviewed this booking"


async def create_review(repos: RepoBundle, student: User, data: ReviewCreate) -> Review:
    """
    Review a completed booking and refresh the tutor's rating.

    The review insert and the rating update are committed together.

    Raises:
        NotFoundError: no such booking
        ForbiddenError: the booking belongs to another student
        BadRequestError: the booking is not completed or already reviewed
    """
    booking_id = str(data.booking_id)
    booking = await repos.bookings.get_by_id(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    if booking.student_id != student.id:
        raise ForbiddenError("You can only review your own bookings")
    if booking.status != BookingStatus.COMPLETED:
        raise BadRequestError("You can only review completed bookings")
    if await repos.reviews.get_by_booking_id(booking_id) is not None:
        raise BadRequestError(ALREADY_REVIEWED_MESSAGE)

    review = Review(
        booking_id=booking_id,
        student_id=student.id,
        tutor_id=booking.tutor_id,
        rating=data.rating,
        comment=data.comment,
    )
    try:
        async with unique_violation_as(repos.session, ALREADY_REVIEWED_MESSAGE):
            await repos.reviews.stage(review)
            await refresh_rating(repos, booking.tutor_id)
            await repos.session.commit()
    except Exception:
        await repos.session.rollback()
        raise

    await repos.session.refresh(review)
    logger.info(f"Review {review.id} ({review.rating}/5) created for tutor {review.tutor_id}")
    return review


async def refresh_rating(repos: RepoBundle, tutor_id: str) -> None:
    """Recompute the tutor profile's average rating and review count. Does not commit."""
    profile = await repos.tutor_profiles.get_by_user_id(tutor_id)
    if profile is None:
        logger.warning(f"Tutor {tutor_id} has reviews but no profile; rating not stored")
        return
    average, count = await repos.reviews.rating_stats(tutor_id)
    await repos.tutor_profiles.apply_rating(profile, average, count)


def rating_distribution(reviews: Sequence[Review]) -> Dict[str, int]:
    """Count of reviews per star value, keyed "1" to "5"."""
    distribution = {str(star): 0 for star in range(1, 6)}
    for review in reviews:
        distribution[str(review.rating)] += 1
    return distribution


def average_rating(reviews: List[Review]) -> float:
    if not reviews:
        return 0.0
    return sum(r.rating for r in reviews) / len(reviews)
