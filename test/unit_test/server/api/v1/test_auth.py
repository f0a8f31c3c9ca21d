"""
Unit tests for the authentication endpoints.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from skillbridge.core.database.repositories import UserRepository
from skillbridge.core.security import create_access_token

pytestmark = pytest.mark.asyncio


class TestRegister:
    async def test_register_student(self, client: AsyncClient):
        payload = {"email": "new@example.com", "password": "Password123", "name": "New Student", "role": "STUDENT"}
        response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["token"]
        assert data["user"]["email"] == "new@example.com"
        assert data["user"]["role"] == "STUDENT"
        assert data["user"]["status"] == "ACTIVE"
        assert "password" not in data["user"]

    async def test_register_tutor_creates_empty_profile(self, client: AsyncClient, register):
        tutor = await register("TUTOR")

        response = await client.get("/api/auth/me", headers=tutor.headers)

        assert response.status_code == 200
        profile = response.json()["user"]["tutor_profile"]
        assert profile is not None
        assert profile["rating"] == 0
        assert profile["review_count"] == 0
        assert profile["subjects"] == []

    async def test_register_defaults_to_student(self, client: AsyncClient):
        payload = {"email": "norole@example.com", "password": "Password123", "name": "No Role"}
        response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "STUDENT"

    async def test_register_duplicate_email(self, client: AsyncClient, student):
        payload = {"email": student.email, "password": "Password123", "name": "Copy Cat", "role": "STUDENT"}
        response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Bad Request", "message": "User with this email already exists"}

    async def test_concurrent_duplicate_email_is_rejected_by_constraint(self, client: AsyncClient, student):
        payload = {"email": student.email, "password": "Password123", "name": "Copy Cat", "role": "TUTOR"}

        with patch.object(UserRepository, "get_by_email", AsyncMock(return_value=None)):
            response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json()["message"] == "User with this email already exists"

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"email": "not-an-email", "password": "Password123", "name": "Val"}, "email"),
            ({"email": "short@example.com", "password": "short", "name": "Val"}, "password"),
            ({"email": "name@example.com", "password": "Password123", "name": "V"}, "name"),
            ({"email": "admin2@example.com", "password": "Password123", "name": "Val", "role": "ADMIN"}, "role"),
        ],
    )
    async def test_register_validation(self, client: AsyncClient, payload, field):
        response = await client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Validation Error"
        assert data["message"]
        assert any(detail["field"] == field for detail in data["details"])


class TestLogin:
    async def test_login_success(self, client: AsyncClient, student):
        response = await client.post("/api/auth/login", json={"email": student.email, "password": "Password123"})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == student.id
        assert data["token"]

    async def test_login_wrong_password(self, client: AsyncClient, student):
        response = await client.post("/api/auth/login", json={"email": student.email, "password": "WrongPass1"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "Password123"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid email or password"

    async def test_login_banned_user(self, client: AsyncClient, student, admin):
        banned = await client.patch(
            f"/api/admin/users/{student.id}/status", json={"status": "BANNED"}, headers=admin.headers
        )
        assert banned.status_code == 200

        response = await client.post("/api/auth/login", json={"email": student.email, "password": "Password123"})

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"


class TestMe:
    async def test_me_returns_current_user(self, client: AsyncClient, student):
        response = await client.get("/api/auth/me", headers=student.headers)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == student.id
        assert user["tutor_profile"] is None

    async def test_me_without_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    async def test_me_with_garbage_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    async def test_me_with_expired_token(self, client: AsyncClient, student):
        token = create_access_token(
            user_id=student.id, email=student.email, role="STUDENT", expires_delta=timedelta(seconds=-10)
        )
        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired"

    async def test_me_for_deleted_user(self, client: AsyncClient):
        token = create_access_token(user_id="00000000-0000-0000-0000-000000000000", email="x@example.com", role="STUDENT")
        response = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    async def test_banned_user_token_is_rejected(self, client: AsyncClient, student, admin):
        await client.patch(f"/api/admin/users/{student.id}/status", json={"status": "BANNED"}, headers=admin.headers)

        response = await client.get("/api/auth/me", headers=student.headers)

        assert response.status_code == 403
