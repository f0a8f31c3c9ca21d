"""
Review I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .users import UserSummary


class ReviewCreate(BaseModel):
    """Body of ``POST /api/reviews``."""

    booking_id: UUID
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    booking_id: str
    student_id: str
    tutor_id: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class ReviewWithStudent(ReviewRead):
    student: Optional[UserSummary] = None


class ReviewResponse(BaseModel):
    message: str
    review: ReviewRead


class TutorReviewsResponse(BaseModel):
    """Reviews of one tutor with aggregate figures.

    ``rating_distribution`` maps each star value "1".."5" to its count.
    """

    reviews: List[ReviewWithStudent]
    count: int
    avg_rating: float
    rating_distribution: Dict[str, int]
