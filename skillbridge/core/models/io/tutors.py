"""
Tutor I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .categories import CategorySummary
from .users import UserSummary


class TutorProfileRead(BaseModel):
    """A tutor profile with its linked categories."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    bio: Optional[str] = None
    hourly_rate: float
    subjects: List[str] = Field(default_factory=list)
    experience: int
    availability: Optional[Dict[str, Any]] = None
    rating: float
    review_count: int
    categories: List[CategorySummary] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class TutorProfileSummary(BaseModel):
    """Rating summary shown in admin user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    rating: float
    review_count: int


class TutorReviewRead(BaseModel):
    """A review as shown on a tutor's public page."""

    id: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    student: Optional[UserSummary] = None


class TutorRead(BaseModel):
    """A tutor as listed in search results."""

    id: str
    name: str
    email: str
    created_at: datetime
    tutor_profile: TutorProfileRead


class TutorDetail(TutorRead):
    """A tutor's public page with their most recent reviews."""

    reviews: List[TutorReviewRead] = Field(default_factory=list)


class TutorProfileUpdate(BaseModel):
    """Body of ``PUT /api/tutors/profile``; only provided fields are changed."""

    bio: Optional[str] = None
    hourly_rate: Optional[float] = Field(default=None, gt=0)
    subjects: Optional[List[str]] = None
    experience: Optional[int] = Field(default=None, ge=0)
    availability: Optional[Dict[str, Any]] = None
    categories: Optional[List[str]] = Field(default=None, description="Category ids")


class AvailabilityUpdate(BaseModel):
    """Body of ``PUT /api/tutors/availability``."""

    availability: Dict[str, Any]


class TutorListResponse(BaseModel):
    tutors: List[TutorRead]
    count: int


class TutorDetailResponse(BaseModel):
    tutor: TutorDetail


class TutorProfileResponse(BaseModel):
    message: str
    profile: TutorProfileRead


class TutorProfileEnvelope(BaseModel):
    profile: TutorProfileRead
