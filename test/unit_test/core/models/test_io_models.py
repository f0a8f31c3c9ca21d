"""Tests for request model parsing and normalisation."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from skillbridge.core.models.domain.enums import BookingStatus
from skillbridge.core.models.io import (
    BookingCreate,
    BookingStatusUpdate,
    CategoryCreate,
    ClientErrorReport,
    RegisterRequest,
    ReviewCreate,
)
from skillbridge.core.models.io.categories import slugify


@pytest.mark.parametrize(
    "name,slug",
    [
        ("Mathematics", "mathematics"),
        ("  Data Science  ", "data-science"),
        ("C++ & Rust!", "c-rust"),
        ("Music -- Theory", "music-theory"),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug


class TestBookingCreate:
    def test_aware_datetime_becomes_naive_utc(self):
        local = datetime(2030, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        body = BookingCreate(tutor_id=uuid4(), date_time=local)

        assert body.date_time == datetime(2030, 5, 1, 10, 0)
        assert body.date_time.tzinfo is None

    def test_defaults(self):
        body = BookingCreate(tutor_id=uuid4(), date_time="2030-05-01T10:00:00")

        assert body.duration == 60
        assert body.notes is None

    @pytest.mark.parametrize("duration", [0, -30])
    def test_duration_must_be_positive(self, duration):
        with pytest.raises(ValidationError):
            BookingCreate(tutor_id=uuid4(), date_time="2030-05-01T10:00:00", duration=duration)

    def test_tutor_id_must_be_uuid(self):
        with pytest.raises(ValidationError):
            BookingCreate(tutor_id="not-a-uuid", date_time="2030-05-01T10:00:00")


class TestBookingStatusUpdate:
    def test_case_insensitive(self):
        assert BookingStatusUpdate(status="confirmed").status is BookingStatus.CONFIRMED

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            BookingStatusUpdate(status="ARCHIVED")


class TestReviewCreate:
    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_range(self, rating):
        with pytest.raises(ValidationError):
            ReviewCreate(booking_id=uuid4(), rating=rating)

    def test_comment_optional(self):
        assert ReviewCreate(booking_id=uuid4(), rating=5).comment is None


class TestRegisterRequest:
    def test_defaults_to_student(self):
        body = RegisterRequest(name="Alice", email="alice@example.com", password="Password123")

        assert body.role == "STUDENT"

    def test_admin_cannot_self_register(self):
        with pytest.raises(ValidationError):
            RegisterRequest(name="Eve", email="eve@example.com", password="Password123", role="ADMIN")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterRequest(name="Alice", email="not-an-email", password="Password123")


class TestCategoryCreate:
    def test_slug_pattern(self):
        with pytest.raises(ValidationError):
            CategoryCreate(name="Music", slug="Not A Slug")

    def test_slug_optional(self):
        assert CategoryCreate(name="Music").slug is None


class TestClientErrorReport:
    def test_defaults(self):
        report = ClientErrorReport(name="TypeError", message="x is undefined", timestamp="2026-01-01T00:00:00Z")

        assert report.user_agent == "unknown"
        assert report.url == "unknown"
        assert report.stack is None

    def test_timestamp_required(self):
        with pytest.raises(ValidationError):
            ClientErrorReport(name="TypeError", message="x is undefined")
