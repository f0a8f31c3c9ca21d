"""Unit tests for the booking status rules.

These exercise ``check_transition`` directly against in-memory entities, so
every edge of the graph is covered without going through HTTP.
"""

from datetime import datetime, timedelta

import pytest

from skillbridge.core.database.entities import Booking, User
from skillbridge.core.models.domain.enums import BookingStatus, UserRole
from skillbridge.server.services.bookings import TRANSITIONS, BookingParty, can_view, check_transition, party_of
from skillbridge.server.services.errors import BadRequestError, ForbiddenError

NOW = datetime(2026, 3, 1, 12, 0)


@pytest.fixture
def student() -> User:
    return User(email="s@example.com", password="x", name="Student", role=UserRole.STUDENT)


@pytest.fixture
def tutor() -> User:
    return User(email="t@example.com", password="x", name="Tutor", role=UserRole.TUTOR)


@pytest.fixture
def admin() -> User:
    return User(email="a@example.com", password="x", name="Admin", role=UserRole.ADMIN)


def make_booking(student: User, tutor: User, status: BookingStatus, starts: datetime = NOW - timedelta(hours=1)):
    return Booking(student_id=student.id, tutor_id=tutor.id, date_time=starts, status=status)


class TestParty:
    def test_party_of(self, student, tutor, admin):
        booking = make_booking(student, tutor, BookingStatus.PENDING)

        assert party_of(booking, student) == BookingParty.STUDENT
        assert party_of(booking, tutor) == BookingParty.TUTOR
        assert party_of(booking, admin) is None

    def test_admin_can_view_but_outsiders_cannot(self, student, tutor, admin):
        booking = make_booking(student, tutor, BookingStatus.PENDING)
        outsider = User(email="o@example.com", password="x", name="Outsider", role=UserRole.STUDENT)

        assert can_view(booking, admin)
        assert can_view(booking, student)
        assert not can_view(booking, outsider)


class TestCheckTransition:
    @pytest.mark.parametrize(
        "current,target,actor",
        [
            (BookingStatus.PENDING, BookingStatus.CONFIRMED, "tutor"),
            (BookingStatus.PENDING, BookingStatus.REJECTED, "tutor"),
            (BookingStatus.PENDING, BookingStatus.CANCELLED, "tutor"),
            (BookingStatus.PENDING, BookingStatus.CANCELLED, "student"),
            (BookingStatus.CONFIRMED, BookingStatus.CANCELLED, "tutor"),
            (BookingStatus.CONFIRMED, BookingStatus.CANCELLED, "student"),
            (BookingStatus.CONFIRMED, BookingStatus.COMPLETED, "tutor"),
        ],
    )
    def test_allowed(self, student, tutor, current, target, actor):
        booking = make_booking(student, tutor, current)
        user = tutor if actor == "tutor" else student

        check_transition(booking, user, target, now=NOW)

    @pytest.mark.parametrize(
        "current,target",
        [
            (BookingStatus.PENDING, BookingStatus.CONFIRMED),
            (BookingStatus.PENDING, BookingStatus.REJECTED),
            (BookingStatus.CONFIRMED, BookingStatus.COMPLETED),
        ],
    )
    def test_wrong_actor_is_forbidden(self, student, tutor, current, target):
        booking = make_booking(student, tutor, current)

        with pytest.raises(ForbiddenError):
            check_transition(booking, student, target, now=NOW)

    def test_every_edge_outside_the_graph_is_rejected(self, student, tutor):
        for current in BookingStatus:
            for target in BookingStatus:
                if (current, target) in TRANSITIONS:
                    continue
                booking = make_booking(student, tutor, current)
                with pytest.raises(BadRequestError):
                    check_transition(booking, tutor, target, now=NOW)

    def test_terminal_statuses_have_no_exits(self):
        for (current, _target) in TRANSITIONS:
            assert not current.is_terminal

    def test_non_party_is_forbidden_before_graph_check(self, student, tutor, admin):
        booking = make_booking(student, tutor, BookingStatus.COMPLETED)

        with pytest.raises(ForbiddenError):
            check_transition(booking, admin, BookingStatus.PENDING, now=NOW)

    def test_complete_before_start_is_rejected(self, student, tutor):
        booking = make_booking(student, tutor, BookingStatus.CONFIRMED, starts=NOW + timedelta(minutes=1))

        with pytest.raises(BadRequestError) as exc_info:
            check_transition(booking, tutor, BookingStatus.COMPLETED, now=NOW)

        assert exc_info.value.status_code == 400

    def test_complete_at_start_time(self, student, tutor):
        booking = make_booking(student, tutor, BookingStatus.CONFIRMED, starts=NOW)

        check_transition(booking, tutor, BookingStatus.COMPLETED, now=NOW)
