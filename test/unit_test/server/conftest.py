"""Fixtures for API tests.

Each test gets a fresh in-memory SQLite database. Requests run against the
real application with ``get_session`` overridden to use that database.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import AsyncGenerator, Dict, Optional

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from skillbridge.core.database import create_all, create_engine, create_sessionmaker, get_session
from skillbridge.core.database.base import utc_now
from skillbridge.core.database.entities import Category, User
from skillbridge.core.models.domain.enums import UserRole
from skillbridge.core.security import create_access_token, hash_password
from skillbridge.server.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
DEFAULT_PASSWORD = "Password123"


@dataclass
class Account:
    """A registered user together with a valid bearer token."""

    id: str
    email: str
    name: str
    role: str
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest_asyncio.fixture
async def test_engine():
    """Create an isolated in-memory database for one test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine):
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """A session for arranging and inspecting data directly."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the session dependency overridden."""

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def register(client: AsyncClient):
    """Factory registering accounts through the API."""
    counter = {"n": 0}

    async def _register(role: str = "STUDENT", name: Optional[str] = None, email: Optional[str] = None) -> Account:
        counter["n"] += 1
        name = name or f"{role.title()} {counter['n']}"
        email = email or f"{role.lower()}{counter['n']}@example.com"
        response = await client.post(
            "/api/auth/register",
            json={"email": email, "password": DEFAULT_PASSWORD, "name": name, "role": role},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return Account(id=body["user"]["id"], email=email, name=name, role=role, token=body["token"])

    return _register


@pytest_asyncio.fixture
async def student(register) -> Account:
    return await register("STUDENT", name="Alice Student")


@pytest_asyncio.fixture
async def tutor(register, client: AsyncClient) -> Account:
    """A tutor with a priced profile."""
    account = await register("TUTOR", name="Bob Tutor")
    response = await client.put(
        "/api/tutors/profile",
        json={"bio": "Maths tutor", "hourly_rate": 40, "subjects": ["Algebra"], "experience": 5},
        headers=account.headers,
    )
    assert response.status_code == 200, response.text
    return account


@pytest_asyncio.fixture
async def admin(session: AsyncSession) -> Account:
    """Admins cannot self-register, so the account is inserted directly."""
    user = User(
        email="admin@skillbridge.com",
        password=hash_password("Admin123!"),
        name="Admin User",
        role=UserRole.ADMIN,
    )
    session.add(user)
    await session.commit()
    token = create_access_token(user_id=user.id, email=user.email, role=UserRole.ADMIN.value)
    return Account(id=user.id, email=user.email, name=user.name, role="ADMIN", token=token)


@pytest_asyncio.fixture
async def categories(session: AsyncSession) -> Dict[str, Category]:
    """A few seeded categories keyed by slug."""
    rows = [
        Category(name="Mathematics", slug="mathematics", description="Algebra, Calculus"),
        Category(name="Programming", slug="programming", description="Web, Data"),
        Category(name="Music", slug="music"),
    ]
    session.add_all(rows)
    await session.commit()
    return {c.slug: c for c in rows}


@pytest_asyncio.fixture
async def make_booking(client: AsyncClient):
    """Factory creating a booking through the API and returning its JSON."""

    async def _make(student: Account, tutor: Account, when: Optional[datetime] = None, **extra) -> dict:
        when = when or utc_now() + timedelta(days=3)
        payload = {"tutor_id": tutor.id, "date_time": when.isoformat(), "duration": 60, **extra}
        response = await client.post("/api/bookings", json=payload, headers=student.headers)
        assert response.status_code == 201, response.text
        return response.json()["booking"]

    return _make


@pytest_asyncio.fixture
async def set_status(client: AsyncClient):
    async def _set(booking_id: str, status: str, actor: Account):
        return await client.patch(
            f"/api/bookings/{booking_id}/status", json={"status": status}, headers=actor.headers
        )

    return _set


@pytest_asyncio.fixture
async def completed_booking(student, tutor, make_booking, set_status) -> dict:
    """A booking in the past that the tutor has confirmed and completed."""
    booking = await make_booking(student, tutor, when=utc_now() - timedelta(days=1))
    assert (await set_status(booking["id"], "CONFIRMED", tutor)).status_code == 200
    assert (await set_status(booking["id"], "COMPLETED", tutor)).status_code == 200
    return booking
