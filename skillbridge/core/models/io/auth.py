"""
Authentication I/O models.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from .tutors import TutorProfileRead
from .users import UserRead


class RegisterRequest(BaseModel):
    """Body of ``POST /api/auth/register``. Admin accounts cannot self-register."""

    email: EmailStr
    password: str = Field(min_length=8, description="Plaintext password, at least 8 characters")
    name: str = Field(min_length=2)
    role: Literal["STUDENT", "TUTOR"] = "STUDENT"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(BaseModel):
    """Returned by register and login: the account plus a bearer token."""

    message: str
    user: UserRead
    token: str


class CurrentUser(UserRead):
    tutor_profile: Optional[TutorProfileRead] = None


class CurrentUserResponse(BaseModel):
    user: CurrentUser
