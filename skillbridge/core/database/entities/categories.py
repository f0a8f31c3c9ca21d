"""
Category entity models.

Categories group tutors by subject area (Mathematics, Programming, ...).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Text

from ..base import Base, new_id, utc_now


class Category(Base, table=True):
    """Entity for subject categories.

    Table: categories
    """

    __tablename__ = "categories"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=128, unique=True, index=True)
    slug: str = Field(max_length=128, unique=True, index=True)
    description: Optional[str] = Field(default=None, sa_type=Text)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"Category(id={self.id}, slug={self.slug})"
