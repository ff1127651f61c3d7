from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.container import build_services
from src.school_attendance.school_attendance.core.exceptions import StorageError
from src.school_attendance.school_attendance.main import create_app


@pytest.fixture
def app(monkeypatch, schools, teacher_creds, office_creds, attendance_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        schools_repo=schools,
        teachers_repo=teacher_creds,
        central_office_repo=office_creds,
        attendance_repo=attendance_repo,
    )
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username, password, role):
    return client.post("/api/login", json={"username": username, "password": password, "role": role})


def test_login_success_returns_identity(client):
    resp = _login(client, "tuser", "correct_pw", "teacher")

    assert resp.status_code == 200
    assert resp.get_json()["user"] == {
        "id": 7,
        "username": "tuser",
        "role": "teacher",
        "school_id": "S1",
        "full_name": "Tess User",
    }
    assert client.get("/api/me").get_json()["user"]["id"] == 7


def test_login_failures_share_one_message(client):
    unknown = _login(client, "unknown_user", "x", "teacher")
    wrong = _login(client, "tuser", "wrong_pw", "teacher")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json()["error"] == wrong.get_json()["error"] == "Invalid username or password"


@pytest.mark.parametrize(
    "body,message",
    [
        ({"username": "tuser", "password": "pw"}, "Missing required fields"),
        ({"username": "tuser", "password": "pw", "role": "parent"}, "Invalid role"),
    ],
)
def test_login_rejects_bad_requests(client, body, message):
    resp = client.post("/api/login", json=body)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == message


def test_attendance_requires_login(client):
    resp = client.post("/api/attendance", json={"section": "1A"})

    assert resp.status_code == 401


def test_teacher_submits_and_resubmits_attendance(client, attendance_repo):
    _login(client, "tuser", "correct_pw", "teacher")
    body = {"school_id": "S1", "section": "1A", "date": "2024-03-01", "boys_present": 10, "girls_present": 8}

    first = client.post("/api/attendance", json=body)
    second = client.post("/api/attendance", json={**body, "boys_present": 12, "girls_present": 9})

    assert first.status_code == second.status_code == 200
    assert second.get_json()["data"]["boys_present"] == 12
    assert len(attendance_repo.all()) == 1


def test_invalid_section_is_400(client):
    _login(client, "tuser", "correct_pw", "teacher")

    resp = client.post(
        "/api/attendance",
        json={"section": "9", "date": "2024-03-01", "boys_present": 1, "girls_present": 1},
    )

    assert resp.status_code == 400


def test_bulk_submission_reports_count(client):
    _login(client, "tuser", "correct_pw", "teacher")

    resp = client.post(
        "/api/attendance/bulk",
        json={
            "date": "2024-03-01",
            "records": [
                {"section": "1A", "boys_present": 10, "girls_present": 8},
                {"section": "1B", "boys_present": 9, "girls_present": 11},
            ],
        },
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "count": 2}


def test_bulk_submission_with_bad_row_is_rejected(client, attendance_repo):
    _login(client, "tuser", "correct_pw", "teacher")

    resp = client.post(
        "/api/attendance/bulk",
        json={"date": "2024-03-01", "records": [{"section": "1A", "boys_present": "x", "girls_present": 1}]},
    )

    assert resp.status_code == 400
    assert attendance_repo.all() == []


def test_central_office_cannot_submit(client):
    _login(client, "admin", "admin123", "central_office")

    resp = client.post(
        "/api/attendance",
        json={"section": "1A", "date": "2024-03-01", "boys_present": 1, "girls_present": 1},
    )

    assert resp.status_code == 403


def test_attendance_data_includes_school_name(client):
    _login(client, "tuser", "correct_pw", "teacher")
    client.post("/api/attendance", json={"section": "2", "date": "2024-03-01", "boys_present": 3, "girls_present": 4})
    client.post("/api/logout")
    _login(client, "admin", "admin123", "central_office")

    resp = client.get("/api/attendance-data?startDate=2024-03-01&endDate=2024-03-31")

    data = resp.get_json()["data"]
    assert resp.status_code == 200
    assert data[0]["school"] == {"id": "S1", "name": "Riverside"}
    assert data[0]["section"] == "2"


def test_schools_are_listed_by_name(client):
    resp = client.get("/api/schools")

    assert [s["name"] for s in resp.get_json()["data"]] == ["Hillview", "Riverside"]


def test_report_summary_and_csv_export(client):
    _login(client, "tuser", "correct_pw", "teacher")
    client.post("/api/attendance", json={"section": "1A", "date": "2024-03-01", "boys_present": 10, "girls_present": 8})
    client.post("/api/logout")
    _login(client, "admin", "admin123", "central_office")

    summary = client.get("/api/reports/summary").get_json()["data"]
    export = client.get("/api/reports/export.csv?startDate=2024-03-01")

    assert summary["by_gender"] == {"boys": 10, "girls": 8, "total": 18}
    assert export.status_code == 200
    assert export.mimetype == "text/csv"
    assert "attendance-report-2024-03-01-all.csv" in export.headers["Content-Disposition"]
    assert "2024-03-01,Riverside,1A,10,8,18" in export.data.decode("utf-8-sig")


def test_storage_failure_is_not_leaked(client, attendance_repo, monkeypatch):
    def broken(record):
        raise StorageError("Duplicate entry 'S1-1A' for key 'secret_index'")

    monkeypatch.setattr(attendance_repo, "upsert", broken)
    _login(client, "tuser", "correct_pw", "teacher")

    resp = client.post(
        "/api/attendance",
        json={"section": "1A", "date": "2024-03-01", "boys_present": 1, "girls_present": 1},
    )

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "Failed to save attendance"


def test_numeric_password_is_400_not_500(client):
    resp = client.post("/api/login", json={"username": "tuser", "password": 12345, "role": "teacher"})

    assert resp.status_code == 400
