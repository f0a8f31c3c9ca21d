"""
Tutor profile entity models.

A tutor profile extends a TUTOR user with teaching details, the cached
average rating and a many-to-many link to categories.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import DateTime
from sqlmodel import JSON, Column, Field, Text

from ..base import Base, new_id, utc_now


class TutorCategoryLink(Base, table=True):
    """Association between tutor profiles and categories.

    Table: tutor_categories
    """

    __tablename__ = "tutor_categories"

    tutor_profile_id: str = Field(foreign_key="tutor_profiles.id", primary_key=True, max_length=36)
    category_id: str = Field(foreign_key="categories.id", primary_key=True, max_length=36, index=True)


class TutorProfile(Base, table=True):
    """Entity for tutor teaching details.

    ``rating`` and ``review_count`` are derived from the tutor's reviews and
    are rewritten every time a review is created.

    Table: tutor_profiles
    """

    __tablename__ = "tutor_profiles"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", unique=True, index=True, max_length=36)

    bio: Optional[str] = Field(default=None, sa_type=Text)
    hourly_rate: float = Field(default=0.0)
    subjects: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    experience: int = Field(default=0, description="Years of teaching experience")
    availability: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    rating: float = Field(default=0.0, index=True)
    review_count: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"TutorProfile(id={self.id}, user_id={self.user_id}, rating={self.rating})"
