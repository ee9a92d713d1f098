"""API tests for programs, dashboard metrics and the health check."""

from fastapi.testclient import TestClient

from youth_ministry_api.app.core.security import create_access_token, hash_password
from youth_ministry_api.app.core.store import build_store
from youth_ministry_api.app.main import create_app
from youth_ministry_api.app.schemas.user import UserRecord


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_and_get_programs(client, volunteer_headers):
    programs = client.get("/api/v1/programs/", headers=volunteer_headers).json()
    active = client.get("/api/v1/programs/", params={"isActive": "true"}, headers=volunteer_headers).json()

    assert [p["id"] for p in programs] == ["1", "2", "3", "4"]
    assert [p["id"] for p in active] == ["1", "2", "3"]
    assert client.get("/api/v1/programs/2", headers=volunteer_headers).json()["name"] == "Youth Bible Study"
    assert client.get("/api/v1/programs/99", headers=volunteer_headers).status_code == 404


def test_dashboard_metrics_for_seeded_data(client, admin_headers):
    response = client.get("/api/v1/dashboard/metrics", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "activeYouths": 4,
        "atRiskYouths": 1,
        "totalPrograms": 4,
        "attendanceRecords": 0,
        # (92 + 78 + 88 + 45) / 4 = 75.75 and (95 + 82 + 90 + 55) / 4 = 80.5
        "avgEngagement": 76,
        "avgAttendance": 81,
    }


def test_dashboard_metrics_follow_recorded_attendance(client, admin_headers):
    client.post(
        "/api/v1/attendance/",
        json={
            "youthId": "1",
            "programId": "1",
            "date": "2026-02-01",
            "attendanceStatus": "excused",
            "engagementLevel": "none",
            "participatedInActivity": False,
        },
        headers=admin_headers,
    )

    metrics = client.get("/api/v1/dashboard/metrics", headers=admin_headers).json()

    # Youth 1 drops from 92/95 to 30/50 and becomes disengaged.
    assert metrics["attendanceRecords"] == 1
    assert metrics["atRiskYouths"] == 2
    assert metrics["avgEngagement"] == 60
    assert metrics["avgAttendance"] == 69


def test_dashboard_metrics_with_no_youths():
    store = build_store()
    store.users.add(UserRecord(id="u1", email="solo@example.org", name="Solo", role="leader", password_hash=hash_password("pw123")))
    client = TestClient(create_app(store))
    headers = {"Authorization": f"Bearer {create_access_token({'sub': 'solo@example.org'})}"}

    metrics = client.get("/api/v1/dashboard/metrics", headers=headers).json()

    assert metrics["avgEngagement"] == 0
    assert metrics["avgAttendance"] == 0
    assert metrics["activeYouths"] == 0


def test_cors_preflight_allows_any_origin_by_default(client):
    response = client.options(
        "/api/v1/youths/",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_honours_configured_origins(store):
    client = TestClient(create_app(store, cors_origins=["https://dashboard.example.org"]))
    preflight = {"Access-Control-Request-Method": "POST"}

    allowed = client.options("/api/v1/attendance/", headers={"Origin": "https://dashboard.example.org", **preflight})
    denied = client.options("/api/v1/attendance/", headers={"Origin": "https://evil.example.com", **preflight})

    assert allowed.status_code == 200
    assert allowed.headers["access-control-allow-origin"] == "https://dashboard.example.org"
    assert denied.status_code == 400
    assert "access-control-allow-origin" not in denied.headers
