"""
Demo data for local development.

The initial migration only creates the administrator and the default
categories. This module fills a development database with a small, coherent
marketplace: students, tutors with profiles, bookings in several states and
reviews whose averages are written back onto the tutor profiles.

Run it with the ``skillbridge-seed`` console script (``--reset`` wipes the
existing rows first). It is never executed by the application itself.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from skillbridge.core.logging_config import get_logger, setup_logging
from skillbridge.core.models.domain.enums import BookingStatus, UserRole
from skillbridge.core.security import hash_password

from .entities import Booking, Category, Review, TutorCategoryLink, TutorProfile, User
from .repositories import build_repos

logger = get_logger(__name__)

DEMO_PASSWORD = "Admin123!"
ADMIN_EMAIL = "admin@skillbridge.com"

CATEGORIES = [
    ("Mathematics", "mathematics", "Algebra, Calculus, Geometry, Statistics"),
    ("Science", "science", "Physics, Chemistry, Biology"),
    ("Programming", "programming", "Web Development, Mobile Apps, Data Science"),
    ("Languages", "languages", "English, Spanish, French, Mandarin"),
    ("Music", "music", "Piano, Guitar, Violin, Vocals"),
    ("Art", "art", "Drawing, Painting, Digital Art"),
    ("Business", "business", "Marketing, Finance, Management"),
]

STUDENTS = [
    ("john.doe@example.com", "John Doe"),
    ("jane.smith@example.com", "Jane Smith"),
    ("mike.wilson@example.com", "Mike Wilson"),
]


@dataclass(frozen=True)
class DemoTutor:
    email: str
    name: str
    category_slug: str
    bio: str
    hourly_rate: float
    subjects: List[str]
    experience: int
    availability: Dict[str, List[str]]


TUTORS = [
    DemoTutor(
        email="sarah.anderson@example.com",
        name="Sarah Anderson",
        category_slug="mathematics",
        bio=(
            "Experienced mathematics tutor with 10+ years of teaching experience. Specialized in "
            "Calculus, Algebra, and Statistics. I help students build strong fundamentals and excel in exams."
        ),
        hourly_rate=45.0,
        subjects=["Calculus", "Algebra", "Statistics", "Geometry"],
        experience=10,
        availability={
            "monday": ["09:00-12:00", "14:00-17:00"],
            "wednesday": ["09:00-12:00", "14:00-17:00"],
            "friday": ["09:00-12:00", "14:00-17:00"],
        },
    ),
    DemoTutor(
        email="david.chen@example.com",
        name="David Chen",
        category_slug="programming",
        bio=(
            "Full-stack developer and coding instructor. I teach JavaScript, React, Node.js, Python, and "
            "more. Whether you're a beginner or looking to level up, I can help you achieve your coding goals."
        ),
        hourly_rate=60.0,
        subjects=["JavaScript", "React", "Node.js", "Python", "Web Development"],
        experience=7,
        availability={
            "tuesday": ["10:00-13:00", "15:00-18:00"],
            "thursday": ["10:00-13:00", "15:00-18:00"],
            "saturday": ["10:00-16:00"],
        },
    ),
    DemoTutor(
        email="maria.garcia@example.com",
        name="Maria Garcia",
        category_slug="languages",
        bio=(
            "Native Spanish speaker with TEFL certification. I teach Spanish and English to students of all "
            "levels. My lessons are interactive, fun, and tailored to your learning style."
        ),
        hourly_rate=35.0,
        subjects=["Spanish", "English", "Grammar", "Conversation"],
        experience=5,
        availability={
            "monday": ["08:00-12:00"],
            "wednesday": ["08:00-12:00"],
            "friday": ["08:00-12:00", "13:00-16:00"],
        },
    ),
    DemoTutor(
        email="emma.taylor@example.com",
        name="Emma Taylor",
        category_slug="music",
        bio=(
            "Professional pianist and music teacher with a degree in Music Education. I teach piano, music "
            "theory, and composition. Perfect for beginners and intermediate students."
        ),
        hourly_rate=50.0,
        subjects=["Piano", "Music Theory", "Composition", "Sight Reading"],
        experience=8,
        availability={
            "tuesday": ["14:00-18:00"],
            "thursday": ["14:00-18:00"],
            "saturday": ["09:00-17:00"],
        },
    ),
]

# (student index, tutor index, start, minutes, status, notes)
BOOKINGS = [
    (0, 0, datetime(2025, 1, 15, 10), 60, BookingStatus.COMPLETED, "Help with calculus homework"),
    (1, 1, datetime(2025, 1, 18, 14), 90, BookingStatus.COMPLETED, "Introduction to React hooks"),
    (0, 2, datetime(2025, 1, 20, 9), 60, BookingStatus.COMPLETED, "Spanish conversation practice"),
    (2, 0, datetime(2025, 2, 5, 10), 60, BookingStatus.CONFIRMED, "Statistics exam preparation"),
    (1, 3, datetime(2025, 2, 8, 15), 60, BookingStatus.CONFIRMED, "Piano lesson - beginner level"),
]

# (booking index, rating, comment)
REVIEWS = [
    (0, 5, "Sarah is an amazing tutor! She explained calculus concepts so clearly. Highly recommend!"),
    (
        1,
        5,
        "David is incredibly knowledgeable. His React teaching style is perfect for beginners. "
        "Looking forward to more sessions!",
    ),
    (2, 4, "Great conversation practice with Maria. Very patient and encouraging. Would book again!"),
]


@dataclass
class SeedSummary:
    students: int = 0
    tutors: int = 0
    bookings: int = 0
    reviews: int = 0


async def clear_all(session: AsyncSession) -> None:
    """Delete every row, children before parents. Does not commit."""
    for model in (Review, Booking, TutorCategoryLink, TutorProfile, User, Category):
        await session.execute(delete(model))
    await session.flush()


async def _ensure_categories(session: AsyncSession) -> Dict[str, Category]:
    result = await session.execute(select(Category))
    by_slug = {category.slug: category for category in result.scalars().all()}
    for name, slug, description in CATEGORIES:
        if slug not in by_slug:
            category = Category(name=name, slug=slug, description=description)
            session.add(category)
            by_slug[slug] = category
    await session.flush()
    return by_slug


async def seed_demo_data(session: AsyncSession, reset: bool = False) -> Optional[SeedSummary]:
    """
    Populate the database with the demo marketplace and commit.

    The administrator and the default categories are created when missing, so
    this works both on a migrated database and on one built with ``create_all``.

    Args:
        session: Session to write with
        reset: Delete all existing rows before seeding

    Returns:
        What was created, or None when the demo accounts already exist
    """
    repos = build_repos(session)

    if reset:
        logger.warning("Clearing all existing rows before seeding")
        await clear_all(session)
    elif await repos.users.get_by_email(STUDENTS[0][0]) is not None:
        logger.info("Demo data already present; nothing to seed")
        return None

    password = hash_password(DEMO_PASSWORD)
    summary = SeedSummary()

    if await repos.users.get_by_email(ADMIN_EMAIL) is None:
        await repos.users.stage(User(email=ADMIN_EMAIL, password=password, name="Admin User", role=UserRole.ADMIN))
    categories = await _ensure_categories(session)

    students: List[User] = []
    for email, name in STUDENTS:
        students.append(await repos.users.stage(User(email=email, password=password, name=name, role=UserRole.STUDENT)))
    summary.students = len(students)

    tutors: List[User] = []
    profiles: List[TutorProfile] = []
    for demo in TUTORS:
        tutor = await repos.users.stage(User(email=demo.email, password=password, name=demo.name, role=UserRole.TUTOR))
        profile = await repos.tutor_profiles.stage(
            TutorProfile(
                user_id=tutor.id,
                bio=demo.bio,
                hourly_rate=demo.hourly_rate,
                subjects=list(demo.subjects),
                experience=demo.experience,
                availability=dict(demo.availability),
            )
        )
        await repos.tutor_profiles.set_categories(profile, [categories[demo.category_slug].id])
        tutors.append(tutor)
        profiles.append(profile)
    summary.tutors = len(tutors)

    bookings: List[Booking] = []
    for student_idx, tutor_idx, start, minutes, status, notes in BOOKINGS:
        booking = Booking(
            student_id=students[student_idx].id,
            tutor_id=tutors[tutor_idx].id,
            date_time=start,
            duration=minutes,
            status=status,
            notes=notes,
        )
        bookings.append(await repos.bookings.stage(booking))
    summary.bookings = len(bookings)

    for booking_idx, rating, comment in REVIEWS:
        booking = bookings[booking_idx]
        await repos.reviews.stage(
            Review(
                booking_id=booking.id,
                student_id=booking.student_id,
                tutor_id=booking.tutor_id,
                rating=rating,
                comment=comment,
            )
        )
    summary.reviews = len(REVIEWS)

    for tutor, profile in zip(tutors, profiles):
        average, count = await repos.reviews.rating_stats(tutor.id)
        await repos.tutor_profiles.apply_rating(profile, average, count)

    await session.commit()
    logger.info(
        f"Seeded {summary.students} students, {summary.tutors} tutors, "
        f"{summary.bookings} bookings and {summary.reviews} reviews"
    )
    return summary


async def _run(reset: bool) -> None:
    from .session import async_session_maker, engine, init_db

    await init_db()
    try:
        async with async_session_maker() as session:
            await seed_demo_data(session, reset=reset)
    finally:
        await engine.dispose()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console entry point for ``skillbridge-seed``."""
    parser = argparse.ArgumentParser(description="Fill the SkillBridge database with demo data.")
    parser.add_argument("--reset", action="store_true", help="delete all existing rows first")
    args = parser.parse_args(argv)

    setup_logging()
    asyncio.run(_run(args.reset))


if __name__ == "__main__":
    main()
