"""Domain enums for the tutoring marketplace."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """
    Role of a marketplace account.

    Governs which endpoints a user may call.
    """

    STUDENT = "STUDENT"
    TUTOR = "TUTOR"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    """Account standing; banned users cannot log in or be booked."""

    ACTIVE = "ACTIVE"
    BANNED = "BANNED"


class BookingStatus(str, Enum):
    """Lifecycle status of a tutoring session booking."""

    PENDING = "PENDING"  # Requested by the student, awaiting the tutor.
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def is_terminal(self) -> bool:
        return self in (BookingStatus.REJECTED, BookingStatus.CANCELLED, BookingStatus.COMPLETED)


class SortField(str, Enum):
    """Sort keys accepted by the tutor search."""

    rating = "rating"
    price = "price"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"
