"""
Booking entity models.

A booking is a scheduled session between a student and a tutor. Both sides
reference ``users.id``; the tutor's profile is looked up through ``tutor_id``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Enum as SAEnum
from sqlmodel import Field, Text

from skillbridge.core.models.domain.enums import BookingStatus

from ..base import Base, new_id, utc_now


class Booking(Base, table=True):
    """Entity for tutoring session bookings.

    Table: bookings
    """

    __tablename__ = "bookings"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    student_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    tutor_id: str = Field(foreign_key="users.id", index=True, max_length=36)

    date_time: datetime = Field(index=True, sa_type=DateTime)
    duration: int = Field(default=60, description="Session length in minutes")
    notes: Optional[str] = Field(default=None, sa_type=Text)

    status: BookingStatus = Field(
        default=BookingStatus.PENDING,
        sa_column=Column(SAEnum(BookingStatus, native_enum=False, length=16), nullable=False, index=True),
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def involves(self, user_id: str) -> bool:
        """Whether the user is the student or the tutor of this booking."""
        return user_id in (self.student_id, self.tutor_id)

    def __repr__(self) -> str:
        return f"Booking(id={self.id}, status={self.status}, date_time={self.date_time})"
