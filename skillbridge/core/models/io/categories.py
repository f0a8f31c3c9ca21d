"""
Category I/O models for API requests and responses.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9-]+$"


def slugify(name: str) -> str:
    """Derive a URL slug from a category name.

    Lowercases, drops characters other than letters, digits, whitespace and
    hyphens, turns whitespace runs into hyphens, collapses repeated hyphens and
    trims hyphens from both ends.
    """
    slug = name.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug).strip("-")


class CategoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseModel):
    """Category reference embedded in tutor profiles."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: Optional[str] = None


class CategoryWithCount(CategoryRead):
    tutor_count: int = 0


class CategoryCreate(BaseModel):
    """Body of ``POST /api/categories``; the slug is derived from the name when omitted."""

    name: str = Field(min_length=2)
    description: Optional[str] = None
    slug: Optional[str] = Field(default=None, min_length=2, pattern=SLUG_PATTERN)


class CategoryUpdate(BaseModel):
    """Body of ``PUT /api/categories/{id}``; every field is optional."""

    name: Optional[str] = Field(default=None, min_length=2)
    description: Optional[str] = None
    slug: Optional[str] = Field(default=None, min_length=2, pattern=SLUG_PATTERN)


class CategoryResponse(BaseModel):
    message: str
    category: CategoryRead


class CategoryListResponse(BaseModel):
    categories: List[CategoryWithCount]
    count: int
