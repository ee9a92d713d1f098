"""Shared fixtures: a seeded store, a client bound to it and auth headers."""

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from youth_ministry_api.app.core.security import create_access_token
from youth_ministry_api.app.core.store import build_store
from youth_ministry_api.app.main import create_app
from youth_ministry_api.app.schemas.attendance import AttendanceRecord

ADMIN_EMAIL = "admin@youthblossom.org"
LEADER_EMAIL = "leader@youthblossom.org"
VOLUNTEER_EMAIL = "volunteer@youthblossom.org"


@pytest.fixture
def store():
    return build_store(seed=True)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


def _headers(email):
    return {"Authorization": f"Bearer {create_access_token({'sub': email})}"}


@pytest.fixture
def admin_headers():
    return _headers(ADMIN_EMAIL)


@pytest.fixture
def leader_headers():
    return _headers(LEADER_EMAIL)


@pytest.fixture
def volunteer_headers():
    return _headers(VOLUNTEER_EMAIL)


_sequence = iter(range(1, 1_000_000))


def _make_record(
    youth_id="1",
    attendance_status="present",
    engagement_level="high",
    date="2026-01-05",
    recorded_at=None,
    program_id="1",
):
    """Build an attendance record without going through the API."""
    n = next(_sequence)
    return AttendanceRecord(
        id=f"rec-{n}",
        youth_id=youth_id,
        youth_name="Test Youth",
        program_id=program_id,
        program_name="Test Program",
        date=dt.date.fromisoformat(date),
        attendance_status=attendance_status,
        engagement_level=engagement_level,
        participated_in_activity=True,
        recorded_at=recorded_at or dt.datetime(2026, 1, 1, tzinfo=dt.timezone.utc) + dt.timedelta(seconds=n),
    )


@pytest.fixture
def make_record():
    return _make_record

