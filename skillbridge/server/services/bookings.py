"""
Booking lifecycle rules.

A booking moves through the following graph; any other move is rejected::

    PENDING   -> CONFIRMED | REJECTED     (tutor)
    PENDING   -> CANCELLED                (student or tutor)
    CONFIRMED -> CANCELLED                (student or tutor)
    CONFIRMED -> COMPLETED                (tutor, once the session has started)

REJECTED, CANCELLED and COMPLETED are terminal.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from skillbridge.core.database.base import utc_now
from skillbridge.core.database.entities.bookings import Booking
from skillbridge.core.database.entities.users import User
from skillbridge.core.database.repositories import RepoBundle
from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import BookingStatus, UserRole, UserStatus
from skillbridge.core.models.io.bookings import BookingCreate

from .errors import BadRequestError, ForbiddenError, NotFoundError

logger = get_logger(__name__)


class BookingParty(str, Enum):
    STUDENT = "student"
    TUTOR = "tutor"


TRANSITIONS: Dict[Tuple[BookingStatus, BookingStatus], FrozenSet[BookingParty]] = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED): frozenset({BookingParty.TUTOR}),
    (BookingStatus.PENDING, BookingStatus.REJECTED): frozenset({BookingParty.TUTOR}),
    (BookingStatus.PENDING, BookingStatus.CANCELLED): frozenset({BookingParty.STUDENT, BookingParty.TUTOR}),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED): frozenset({BookingParty.STUDENT, BookingParty.TUTOR}),
    (BookingStatus.CONFIRMED, BookingStatus.COMPLETED): frozenset({BookingParty.TUTOR}),
}


def party_of(booking: Booking, user: User) -> Optional[BookingParty]:
    """Which side of the booking the user is on, if any."""
    if user.id == booking.tutor_id:
        return BookingParty.TUTOR
    if user.id == booking.student_id:
        return BookingParty.STUDENT
    return None


def can_view(booking: Booking, user: User) -> bool:
    return user.role == UserRole.ADMIN or booking.involves(user.id)


def check_transition(
    booking: Booking, user: User, target: BookingStatus, now: Optional[datetime] = None
) -> None:
    """
    Validate a status change requested by ``user``.

    Args:
        booking: The booking to change
        user: The caller
        target: Requested status
        now: Current naive-UTC time; defaults to the clock

    Raises:
        ForbiddenError: the caller is not a party to the booking, or is the
            wrong party for an allowed move
        BadRequestError: the move is not in the graph, or the session has not
            started yet when completing
    """
    party = party_of(booking, user)
    if party is None:
        raise ForbiddenError("You do not have access to this booking")

    current = BookingStatus(booking.status)
    actors = TRANSITIONS.get((current, target))
    if actors is None:
        raise BadRequestError(f"Cannot change booking status from {current.value} to {target.value}")
    if party not in actors:
        who = " or ".join(sorted(actor.value for actor in actors))
        raise ForbiddenError(f"Only the booking's {who} can set status {target.value}")

    if target == BookingStatus.COMPLETED and booking.date_time > (now or utc_now()):
        raise BadRequestError("Cannot complete a booking before its scheduled time")


async def create_booking(repos: RepoBundle, student: User, data: BookingCreate) -> Booking:
    """Create a PENDING booking with a tutor.

    Raises:
        NotFoundError: no such tutor, or the tutor has no profile
        BadRequestError: the tutor is banned
    """
    tutor_id = str(data.tutor_id)
    tutor = await repos.users.get_by_id(tutor_id)
    if tutor is None or tutor.role != UserRole.TUTOR:
        raise NotFoundError("Tutor not found")
    if await repos.tutor_profiles.get_by_user_id(tutor_id) is None:
        raise NotFoundError("Tutor not found")
    if tutor.status == UserStatus.BANNED:
        raise BadRequestError("This tutor is not available")

    booking = Booking(
        student_id=student.id,
        tutor_id=tutor_id,
        date_time=data.date_time,
        duration=data.duration,
        notes=data.notes,
        status=BookingStatus.PENDING,
    )
    booking = await repos.bookings.create(booking)
    logger.info(f"Booking {booking.id} created by student {student.id} with tutor {tutor_id}")
    return booking


async def change_status(repos: RepoBundle, booking_id: str, user: User, target: BookingStatus) -> Booking:
    """Apply a validated status change and persist it."""
    booking = await repos.bookings.get_by_id(booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")

    check_transition(booking, user, target)

    previous = BookingStatus(booking.status)
    booking.status = target
    booking = await repos.bookings.update(booking)
    logger.info(f"Booking {booking.id} moved from {previous.value} to {target.value} by user {user.id}")
    return booking
