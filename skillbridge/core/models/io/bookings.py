"""
Booking I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillbridge.core.models.domain.enums import BookingStatus

from .reviews import ReviewRead
from .users import UserSummary


class BookingCreate(BaseModel):
    """Body of ``POST /api/bookings``."""

    tutor_id: UUID
    date_time: datetime = Field(description="Scheduled start, ISO-8601")
    duration: int = Field(default=60, gt=0, description="Session length in minutes")
    notes: Optional[str] = None

    @field_validator("date_time")
    @classmethod
    def to_naive_utc(cls, v: datetime) -> datetime:
        # Stored as naive UTC
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class BookingStatusUpdate(BaseModel):
    """Body of ``PATCH /api/bookings/{id}/status``."""

    status: BookingStatus

    @field_validator("status", mode="before")
    @classmethod
    def upper(cls, v):
        return v.upper() if isinstance(v, str) else v


class BookingTutor(UserSummary):
    hourly_rate: Optional[float] = None


class BookingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    tutor_id: str
    date_time: datetime
    duration: int
    notes: Optional[str] = None
    status: BookingStatus
    created_at: datetime
    updated_at: datetime


class BookingDetail(BookingRead):
    """A booking with both parties and its review, if one exists."""

    student: Optional[UserSummary] = None
    tutor: Optional[BookingTutor] = None
    review: Optional[ReviewRead] = None


class BookingResponse(BaseModel):
    message: str
    booking: BookingDetail


class BookingEnvelope(BaseModel):
    booking: BookingDetail


class BookingListResponse(BaseModel):
    bookings: List[BookingDetail]
    count: int
