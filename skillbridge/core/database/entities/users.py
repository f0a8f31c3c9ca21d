"""
User entity models.

A single ``users`` table holds students, tutors and admins; the role column
decides which endpoints an account may use.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum as SAEnum
from sqlmodel import Field

from skillbridge.core.models.domain.enums import UserRole, UserStatus

from ..base import Base, new_id, utc_now


class User(Base, table=True):
    """Entity for marketplace accounts.

    Table: users
    """

    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    email: str = Field(max_length=255, unique=True, index=True)
    password: str = Field(max_length=255, description="bcrypt hash")
    name: str = Field(max_length=255)

    role: UserRole = Field(
        sa_column=Column(SAEnum(UserRole, native_enum=False, length=16), nullable=False, index=True)
    )
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        sa_column=Column(SAEnum(UserStatus, native_enum=False, length=16), nullable=False, index=True),
    )

    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime)

    @property
    def is_banned(self) -> bool:
        return self.status == UserStatus.BANNED

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role})"
