"""
Review entity models.

One review per completed booking; ``booking_id`` is unique.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, Text

from ..base import Base, new_id, utc_now


class Review(Base, table=True):
    """Entity for student reviews of tutors.

    Table: reviews
    """

    __tablename__ = "reviews"
    __table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    booking_id: str = Field(foreign_key="bookings.id", unique=True, max_length=36)
    student_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    tutor_id: str = Field(foreign_key="users.id", index=True, max_length=36)

    rating: int
    comment: Optional[str] = Field(default=None, sa_type=Text)

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"Review(id={self.id}, tutor_id={self.tutor_id}, rating={self.rating})"
