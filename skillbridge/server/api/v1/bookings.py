"""
Booking Endpoints.

Students request sessions, tutors confirm, reject or complete them, and
either side may cancel. Listing is scoped to the caller's own bookings unless
the caller is an admin.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillbridge.core.logging_config import get_logger
from skillbridge.core.models.domain.enums import BookingStatus, UserRole
from skillbridge.core.models.io.bookings import (
    BookingCreate,
    BookingEnvelope,
    BookingListResponse,
    BookingResponse,
    BookingStatusUpdate,
)
from skillbridge.server.services import bookings as booking_service
from skillbridge.server.services.deps import CurrentUserDep, ReposDep, StudentDep
from skillbridge.server.services.views import booking_detail, booking_details

logger = get_logger(__name__)

router = APIRouter(tags=["bookings"])


def parse_status(value: Optional[str]) -> Optional[BookingStatus]:
    """Case-insensitive status query parameter."""
    if not value:
        return None
    try:
        return BookingStatus(value.upper())
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status value")


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Booking",
    description="Request a session with a tutor. Only students can book.",
    responses={
        400: {"description": "Invalid data or tutor unavailable"},
        404: {"description": "Tutor not found"},
    },
)
async def create_booking(data: BookingCreate, student: StudentDep, repos: ReposDep) -> BookingResponse:
    booking = await booking_service.create_booking(repos, student, data)
    return BookingResponse(message="Booking created successfully", booking=await booking_detail(repos, booking))


@router.get(
    "",
    response_model=BookingListResponse,
    summary="List Bookings",
    description="The caller's bookings, latest session first. Admins see every booking.",
)
async def list_bookings(
    user: CurrentUserDep,
    repos: ReposDep,
    status_filter: Optional[str] = Query(default=None, alias="status"),
) -> BookingListResponse:
    booking_status = parse_status(status_filter)
    if user.role == UserRole.STUDENT:
        bookings = await repos.bookings.search(student_id=user.id, status=booking_status)
    elif user.role == UserRole.TUTOR:
        bookings = await repos.bookings.search(tutor_id=user.id, status=booking_status)
    else:
        bookings = await repos.bookings.search(status=booking_status)
    details = await booking_details(repos, bookings)
    return BookingListResponse(bookings=details, count=len(details))


@router.get(
    "/{booking_id}",
    response_model=BookingEnvelope,
    summary="Get Booking",
    responses={403: {"description": "Not a party to the booking"}, 404: {"description": "Booking not found"}},
)
async def get_booking(booking_id: str, user: CurrentUserDep, repos: ReposDep) -> BookingEnvelope:
    booking = await repos.bookings.get_by_id(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    if not booking_service.can_view(booking, user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You do not have access to this booking")
    return BookingEnvelope(booking=await booking_detail(repos, booking))


@router.patch(
    "/{booking_id}/status",
    response_model=BookingResponse,
    summary="Change Booking Status",
    description="Confirm, reject, cancel or complete a booking.",
    responses={
        400: {"description": "Transition not allowed"},
        403: {"description": "Caller may not make this transition"},
        404: {"description": "Booking not found"},
    },
)
async def update_booking_status(
    booking_id: str, data: BookingStatusUpdate, user: CurrentUserDep, repos: ReposDep
) -> BookingResponse:
    """
    Move a booking along its lifecycle.

    - tutor: PENDING → CONFIRMED or REJECTED; CONFIRMED → COMPLETED once the session has started
    - student or tutor: PENDING or CONFIRMED → CANCELLED
    """
    booking = await booking_service.change_status(repos, booking_id, user, data.status)
    return BookingResponse(
        message="Booking status updated successfully", booking=await booking_detail(repos, booking)
    )
