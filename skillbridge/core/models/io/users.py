"""
User I/O models for API requests and responses.

The password hash is never part of any read model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from skillbridge.core.models.domain.enums import UserRole, UserStatus


class UserRead(BaseModel):
    """Public view of an account."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    role: UserRole
    status: UserStatus
    created_at: datetime
    updated_at: datetime


class UserSummary(BaseModel):
    """Compact user reference embedded in bookings and reviews."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: Optional[str] = None


class UserProfileUpdate(BaseModel):
    """Body of ``PUT /api/users/profile``."""

    name: str = Field(min_length=2, description="Display name")
    email: EmailStr


class PasswordUpdate(BaseModel):
    """Body of ``PUT /api/users/password``."""

    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=8)


class UserResponse(BaseModel):
    message: str
    user: UserRead


class MessageResponse(BaseModel):
    message: str
