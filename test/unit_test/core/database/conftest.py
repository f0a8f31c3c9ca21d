"""Fixtures for repository tests against an in-memory SQLite database."""

from __future__ import annotations

from datetime import timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from skillbridge.core.database import create_all, create_engine, create_sessionmaker
from skillbridge.core.database.base import utc_now
from skillbridge.core.database.entities import Booking, Category, TutorProfile, User
from skillbridge.core.models.domain.enums import BookingStatus, UserRole


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    async with create_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def people(db_session: AsyncSession):
    """A student, two tutors with profiles and an admin."""
    student = User(email="alice@example.com", password="x", name="Alice Student", role=UserRole.STUDENT)
    tutor = User(email="bob@example.com", password="x", name="Bob Tutor", role=UserRole.TUTOR)
    other_tutor = User(email="carol@example.com", password="x", name="Carol Tutor", role=UserRole.TUTOR)
    admin = User(email="admin@example.com", password="x", name="Admin", role=UserRole.ADMIN)
    db_session.add_all([student, tutor, other_tutor, admin])
    await db_session.flush()

    profile = TutorProfile(user_id=tutor.id, hourly_rate=40.0, subjects=["Algebra"])
    other_profile = TutorProfile(user_id=other_tutor.id, hourly_rate=60.0)
    db_session.add_all([profile, other_profile])
    await db_session.commit()
    return {
        "student": student,
        "tutor": tutor,
        "other_tutor": other_tutor,
        "admin": admin,
        "profile": profile,
        "other_profile": other_profile,
    }


@pytest_asyncio.fixture
async def categories(db_session: AsyncSession):
    items = [
        Category(name="Mathematics", slug="mathematics"),
        Category(name="Music", slug="music"),
        Category(name="Programming", slug="programming"),
    ]
    db_session.add_all(items)
    await db_session.commit()
    return {category.slug: category for category in items}


@pytest.fixture
def add_booking(db_session: AsyncSession):
    """Factory inserting a booking between two users."""

    async def _add(student, tutor, status=BookingStatus.PENDING, days=1, duration=60):
        booking = Booking(
            student_id=student.id,
            tutor_id=tutor.id,
            date_time=utc_now() + timedelta(days=days),
            duration=duration,
            status=status,
        )
        db_session.add(booking)
        await db_session.commit()
        return booking

    return _add
