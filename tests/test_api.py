from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from src.class_attendance.class_attendance.main import create_app


@pytest.fixture
def export_dir(tmp_path):
    return tmp_path / "exports"


@pytest.fixture
def client(export_dir):
    app = create_app("config.testing", export_dir=str(export_dir))
    return app.test_client()


def _create_class(client, name="Grade 5", section="A"):
    resp = client.post("/api/classes", json={"name": name, "section": section})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def _create_student(client, class_id, name, roll_no=None):
    resp = client.post(f"/api/classes/{class_id}/students", json={"name": name, "rollNo": roll_no})
    assert resp.status_code == 201
    return resp.get_json()["data"]


def test_class_crud(client):
    group = _create_class(client)

    assert client.get("/api/classes").get_json()["data"] == [group]

    resp = client.put(f"/api/classes/{group['id']}", json={"name": "Grade 6"})
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"id": group["id"], "name": "Grade 6"}


def test_unknown_class_is_404(client):
    resp = client.get("/api/classes/class_missing/students")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_empty_name_is_400(client):
    resp = client.post("/api/classes", json={"name": "  "})

    assert resp.status_code == 400


def test_non_json_body_is_400(client):
    resp = client.post("/api/classes", data="name=Math")

    assert resp.status_code == 400


def test_mark_report_and_delete_flow(client):
    group = _create_class(client)
    alice = _create_student(client, group["id"], "Alice", "1")
    bob = _create_student(client, group["id"], "Bob")
    today = date.today().isoformat()

    resp = client.put(
        f"/api/classes/{group['id']}/attendance/{today}",
        json={"present": [alice["id"]], "absent": [bob["id"]]},
    )
    assert resp.status_code == 200
    assert resp.get_json()["data"]["records"] == {alice["id"]: True, bob["id"]: False}

    report = client.get(f"/api/classes/{group['id']}/report").get_json()["data"]
    assert [(r["name"], r["present"], r["total"], r["percent"]) for r in report["rows"]] == [
        ("Alice", 1, 1, 100),
        ("Bob", 0, 1, 0),
    ]

    assert client.delete(f"/api/students/{bob['id']}").status_code == 200
    record = client.get(f"/api/classes/{group['id']}/attendance/{today}").get_json()["data"]
    assert record["records"] == {alice["id"]: True}


def test_marking_foreign_student_is_rejected(client):
    math = _create_class(client, "Math")
    art = _create_class(client, "Art")
    carl = _create_student(client, art["id"], "Carl")

    resp = client.put(f"/api/classes/{math['id']}/attendance/2024-05-01", json={"present": [carl["id"]]})

    assert resp.status_code == 400
    assert client.get(f"/api/classes/{math['id']}/attendance/2024-05-01").get_json()["data"] is None


def test_csv_download(client):
    group = _create_class(client, "Grade 5")
    alice = _create_student(client, group["id"], "Alice")
    today = date.today()
    client.put(f"/api/classes/{group['id']}/attendance/{today.isoformat()}", json={"present": [alice["id"]]})

    resp = client.get(f"/api/classes/{group['id']}/report.csv")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.data.decode("utf-8") == "Name,Present,Total,Percent\nAlice,1,1,100"
    assert f"attendance_Grade_5_{today.month}_{today.year}.csv" in resp.headers["Content-Disposition"]


def test_csv_for_empty_class_is_a_notice(client):
    group = _create_class(client)

    resp = client.get(f"/api/classes/{group['id']}/report.csv")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": False, "message": "No attendance data to export for this month."}


def test_csv_download_with_non_latin_class_name(client):
    group = _create_class(client, "Lớp 5", None)
    _create_student(client, group["id"], "Alice")

    resp = client.get(f"/api/classes/{group['id']}/report.csv")

    assert resp.status_code == 200
    disposition = resp.headers["Content-Disposition"]
    disposition.encode("latin-1")
    assert disposition.startswith("attachment")
    assert "filename*=UTF-8''attendance_L%E1%BB%9Bp_5_" in disposition


def test_export_without_share_target_reports_saved_path(client, export_dir):
    group = _create_class(client, "Export class")
    _create_student(client, group["id"], "Alice")

    resp = client.post(f"/api/classes/{group['id']}/report/export")

    body = resp.get_json()
    path = Path(body["data"]["path"])
    assert resp.status_code == 200
    assert body["data"]["outcome"] == "SAVED"
    assert body["message"] == f"CSV saved to: {path}"
    assert path.parent == export_dir.resolve()
    assert path.read_text(encoding="utf-8").startswith("Name,Present,Total,Percent\nAlice,0,")


def test_export_keeps_path_like_class_names_inside_export_dir(client, export_dir, tmp_path):
    group = _create_class(client, "/../../escaped", None)
    _create_student(client, group["id"], "Alice")

    resp = client.post(f"/api/classes/{group['id']}/report/export")

    path = Path(resp.get_json()["data"]["path"])
    assert resp.status_code == 200
    assert path.parent == export_dir.resolve()
    assert [p.name for p in tmp_path.iterdir()] == ["exports"]
