from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.kiosk_attendance.kiosk_attendance.main import create_app

ADMIN = {"X-Admin-Password": "0824"}


@pytest.fixture
def client(backend, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=SimpleNamespace(backend=backend))
    return app.test_client()


def test_kiosk_check_in_is_not_gated(client):
    resp = client.post("/api/kiosk/check-in", json={"employee_id": "E1", "employee_name": "Alice"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["record"]["type"] == "entry"
    assert body["record"]["employee_name"] == "Alice"


def test_kiosk_check_in_without_id_is_bad_request(client):
    resp = client.post("/api/kiosk/check-in", json={})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"


def test_employee_mutations_require_admin_password(client):
    resp = client.post("/api/employees", json={"id": "E1", "name": "Alice"})
    assert resp.status_code == 403

    resp = client.post("/api/employees", json={"id": "E1", "name": "Alice"}, headers={"X-Admin-Password": "08"})
    assert resp.status_code == 403

    resp = client.post("/api/employees", json={"id": "E1", "name": "Alice"}, headers=ADMIN)
    assert resp.status_code == 201
    assert resp.get_json()["employee"]["active"] is True


def test_duplicate_employee_is_conflict(client):
    client.post("/api/employees", json={"id": "E1", "name": "Alice"}, headers=ADMIN)

    resp = client.post("/api/employees", json={"id": "E1", "name": "Bob"}, headers=ADMIN)

    assert resp.status_code == 409


def test_patch_employee_applies_only_given_fields(client):
    client.post("/api/employees", json={"id": "E1", "name": "Alice"}, headers=ADMIN)

    resp = client.patch("/api/employees/E1", json={"active": False}, headers=ADMIN)

    assert resp.status_code == 200
    employee = resp.get_json()["employee"]
    assert employee["name"] == "Alice"
    assert employee["active"] is False
    listed = client.get("/api/employees?active_only=1").get_json()["employees"]
    assert listed == []


def test_patch_employee_rejects_non_boolean_active(client):
    client.post("/api/employees", json={"id": "E1", "name": "Alice"}, headers=ADMIN)

    resp = client.patch("/api/employees/E1", json={"active": "no"}, headers=ADMIN)

    assert resp.status_code == 400


def test_delete_unknown_employee_is_not_found(client):
    resp = client.delete("/api/employees/nobody", headers=ADMIN)

    assert resp.status_code == 404


def test_records_filter_and_update(client):
    client.post("/api/kiosk/check-in", json={"employee_id": "E1"})
    client.post("/api/kiosk/check-out", json={"employee_id": "E1"})

    records = client.get("/api/records?start_date=2024-01-01&end_date=2024-01-01&type=entry").get_json()["records"]
    assert [r["type"] for r in records] == ["entry"]

    resp = client.patch(
        f"/api/records/{records[0]['id']}",
        json={"timestamp": "2024-01-01T08:15:00", "type": "exit", "notes": "late"},
        headers=ADMIN,
    )
    assert resp.status_code == 200
    updated = resp.get_json()["record"]
    assert updated["timestamp"] == "2024-01-01 08:15:00"
    assert updated["type"] == "exit"
    assert updated["notes"] == "late"


def test_records_bad_date_is_bad_request(client):
    resp = client.get("/api/records?start_date=01/01/2024")

    assert resp.status_code == 400


def test_delete_record_requires_admin(client):
    record = client.post("/api/kiosk/check-in", json={"employee_id": "E1"}).get_json()["record"]

    assert client.delete(f"/api/records/{record['id']}").status_code == 403
    assert client.delete(f"/api/records/{record['id']}", headers=ADMIN).status_code == 200
    assert client.delete(f"/api/records/{record['id']}", headers=ADMIN).status_code == 404


def test_daily_stats_endpoint(client):
    client.post("/api/kiosk/check-in", json={"employee_id": "E1"})

    stats = client.get("/api/stats/daily").get_json()["stats"]

    assert stats["total_entries"] == 1
    assert stats["unique_employees_present"] == 1
    assert stats["last_activity"]["employee_id"] == "E1"


def test_export_endpoint_returns_file_path(client, tmp_path):
    client.post("/api/kiosk/check-in", json={"employee_id": "E1"})

    assert client.get("/api/records/export").status_code == 403
    resp = client.get("/api/records/export", headers=ADMIN)

    assert resp.status_code == 200
    assert resp.get_json()["path"].endswith("attendance_2024-01-01.xlsx")


def test_admin_verify_endpoint(client):
    assert client.post("/api/admin/verify", json={"password": "0824"}).get_json()["valid"] is True
    assert client.post("/api/admin/verify", json={"password": "08245"}).get_json()["valid"] is False


@pytest.mark.parametrize("name", [5, 0, False, {"first": "Alice"}])
def test_kiosk_rejects_non_text_employee_name(client, name):
    resp = client.post("/api/kiosk/check-in", json={"employee_id": "E1", "employee_name": name})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "ValidationError"
    assert client.get("/api/records").get_json()["records"] == []


def test_patch_record_rejects_non_text_notes(client):
    record = client.post("/api/kiosk/check-in", json={"employee_id": "E1"}).get_json()["record"]

    resp = client.patch(f"/api/records/{record['id']}", json={"notes": 5}, headers=ADMIN)

    assert resp.status_code == 400
    assert client.get("/api/records").get_json()["records"][0]["notes"] is None


def test_employee_ids_with_slash_can_be_updated_and_deleted(client):
    client.post("/api/employees", json={"id": "A/1", "name": "Alice"}, headers=ADMIN)

    resp = client.patch("/api/employees/A/1", json={"name": "Alicia"}, headers=ADMIN)
    assert resp.status_code == 200
    assert resp.get_json()["employee"]["id"] == "A/1"

    assert client.delete("/api/employees/A/1", headers=ADMIN).status_code == 200
    assert client.get("/api/employees").get_json()["employees"] == []
