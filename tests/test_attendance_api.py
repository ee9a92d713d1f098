"""API tests for recording and listing attendance."""

ATTENDANCE_URL = "/api/v1/attendance/"


def _payload(**overrides):
    payload = {
        "youthId": "4",
        "programId": "2",
        "date": "2026-01-26",
        "attendanceStatus": "present",
        "engagementLevel": "high",
        "participatedInActivity": True,
        "activityNotes": "Led the opening prayer",
    }
    payload.update(overrides)
    return payload


def test_record_attendance_returns_created_record(client, volunteer_headers):
    response = client.post(ATTENDANCE_URL, json=_payload(), headers=volunteer_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["id"]
    assert body["youthId"] == "4"
    assert body["youthName"] == "David Martinez"
    assert body["programName"] == "Youth Bible Study"
    assert body["date"] == "2026-01-26"
    assert body["recordedBy"] == "Volunteer User"
    assert body["recordedAt"]
    assert body["activityNotes"] == "Led the opening prayer"
    assert body["followUpNotes"] is None


def test_record_attendance_updates_engagement(client, store, leader_headers):
    client.post(ATTENDANCE_URL, json=_payload(attendanceStatus="present", engagementLevel="medium"), headers=leader_headers)
    client.post(
        ATTENDANCE_URL,
        json=_payload(attendanceStatus="absent", engagementLevel="none", date="2026-01-05"),
        headers=leader_headers,
    )

    youth = client.get("/api/v1/youths/4", headers=leader_headers).json()

    assert youth["attendanceRate"] == 50
    assert youth["engagementScore"] == 43
    assert youth["engagementStatus"] == "at-risk"
    assert youth["lastAttendance"] == "2026-01-26"
    assert len(store.attendance.find_by_youth("4")) == 2


def test_unknown_program_is_not_found_and_nothing_is_stored(client, store, admin_headers):
    before = store.youths.get("4")

    response = client.post(ATTENDANCE_URL, json=_payload(programId="nope"), headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Related youth or program not found"
    assert len(store.attendance) == 0
    assert store.youths.get("4") == before


def test_unknown_youth_is_not_found(client, store, admin_headers):
    response = client.post(ATTENDANCE_URL, json=_payload(youthId="nope"), headers=admin_headers)

    assert response.status_code == 404
    assert len(store.attendance) == 0


def test_invalid_payload_reports_field_errors(client, store, admin_headers):
    payload = _payload(attendanceStatus="sleeping", date="")
    del payload["participatedInActivity"]

    response = client.post(ATTENDANCE_URL, json=payload, headers=admin_headers)

    assert response.status_code == 400
    body = response.json()
    assert set(body["fieldErrors"]) == {"attendanceStatus", "date", "participatedInActivity"}
    assert body["formErrors"] == []
    assert len(store.attendance) == 0


def test_empty_youth_id_is_rejected(client, admin_headers):
    response = client.post(ATTENDANCE_URL, json=_payload(youthId=""), headers=admin_headers)

    assert response.status_code == 400
    assert "youthId" in response.json()["fieldErrors"]


def test_recording_requires_authentication(client, store):
    response = client.post(ATTENDANCE_URL, json=_payload())

    assert response.status_code == 401
    assert len(store.attendance) == 0


def test_list_attendance_filters_and_orders_newest_first(client, admin_headers):
    client.post(ATTENDANCE_URL, json=_payload(youthId="1", programId="1"), headers=admin_headers)
    client.post(ATTENDANCE_URL, json=_payload(youthId="1", programId="2"), headers=admin_headers)
    client.post(ATTENDANCE_URL, json=_payload(youthId="2", programId="2"), headers=admin_headers)

    all_records = client.get(ATTENDANCE_URL, headers=admin_headers).json()
    for_youth = client.get(ATTENDANCE_URL, params={"youthId": "1"}, headers=admin_headers).json()
    for_pair = client.get(ATTENDANCE_URL, params={"youthId": "1", "programId": "2"}, headers=admin_headers).json()

    assert [r["youthId"] for r in all_records] == ["2", "1", "1"]
    assert [r["programId"] for r in for_youth] == ["2", "1"]
    assert len(for_pair) == 1
