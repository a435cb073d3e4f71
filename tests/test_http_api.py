from __future__ import annotations

import base64


from src.work_tracker.work_tracker.core.enums import Role


def test_health(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_login_and_me(client, profiles):
    profiles.add("e1", "Ali", email="ali@example.com", password="pw123456")

    resp = client.post("/login", json={"email": "ali@example.com", "password": "pw123456"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "employee"

    me = client.get("/me").get_json()
    assert me["profile"]["full_name"] == "Ali"

    client.post("/logout")
    assert client.get("/me").status_code == 401


def test_bad_login_is_401(client):
    resp = client.post("/login", json={"email": "x@example.com", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_submit_defaults_to_today(client, profiles, reports, login_as):
    ali = profiles.add("e1", "Ali")
    login_as(client, ali)

    resp = client.post("/reports", json={"printing_pages": 4, "book_title": "Atlas"})

    assert resp.status_code == 200
    assert resp.get_json()["report"]["report_date"] == "2024-01-15"
    today = client.get("/reports/me/today").get_json()["report"]
    assert today["printing_pages"] == 4


def test_leave_submission_over_http(client, profiles, login_as):
    ali = profiles.add("e1", "Ali")
    login_as(client, ali)

    report = client.post(
        "/reports", json={"report_date": "2024-01-10", "is_leave": True, "printing_pages": 9}
    ).get_json()["report"]

    assert report["is_leave"] is True
    assert report["printing_pages"] == 0


def test_bad_date_is_400(client, profiles, login_as):
    login_as(client, profiles.add("e1", "Ali"))

    resp = client.get("/reports/me/2024-13-01")

    assert resp.status_code == 400


def test_anonymous_and_employee_are_kept_out_of_admin(client, profiles, login_as):
    assert client.get("/admin/summaries").status_code == 401

    login_as(client, profiles.add("e1", "Ali"))

    assert client.get("/admin/summaries").status_code == 403
    assert client.patch("/admin/reports/r1", json={"printing_pages": 1}).status_code == 403


def test_admin_summaries_default_to_current_month(admin_client, profiles, reports):
    profiles.add("e1", "Ali")
    reports.add("e1", "2024-01-02", printing=3)
    reports.add("e1", "2024-02-02", printing=100)

    body = admin_client.get("/admin/summaries").get_json()

    assert body["start"] == "2024-01-01"
    assert body["end"] == "2024-01-31"
    assert body["summaries"][0]["total_pages"] == 3


def test_admin_edit_returns_audit_entry(admin_client, reports):
    report = reports.add("e1", "2024-01-02", printing=3)

    resp = admin_client.patch(f"/admin/reports/{report.report_id}", json={"editing_pages": 6})

    assert resp.status_code == 200
    audit = resp.get_json()["audit"]
    assert audit["action"] == "ADMIN_EDIT"
    assert audit["actor_id"] == "admin1"
    assert audit["after_data"]["editing_pages"] == 6
    assert admin_client.get("/admin/audit").get_json()["entries"][0]["report_id"] == report.report_id


def test_admin_edit_unknown_report_is_404(admin_client):
    assert admin_client.patch("/admin/reports/missing", json={"editing_pages": 6}).status_code == 404


def test_create_employee_over_http(admin_client):
    resp = admin_client.post(
        "/admin/employees",
        json={"email": "sara@example.com", "password": "secret1", "full_name": "Sara"},
    )

    assert resp.status_code == 201
    employees = admin_client.get("/admin/employees").get_json()["employees"]
    assert any(e["full_name"] == "Sara" for e in employees)


def test_pdf_download_and_base64(admin_client, profiles, reports):
    profiles.add("e1", "Ali")
    reports.add("e1", "2024-01-16", printing=3)

    resp = admin_client.get("/admin/exports/report.pdf")
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert "report_2024-01-15_2024-01-21.pdf" in resp.headers["Content-Disposition"]
    assert resp.data.startswith(b"%PDF")

    body = admin_client.get("/admin/exports/report.xlsx?encoding=base64").get_json()
    assert body["filename"] == "report_2024-01-15_2024-01-21.xlsx"
    assert base64.b64decode(body["data"])[:2] == b"PK"


def test_export_data_json(admin_client, profiles, reports):
    profiles.add("e1", "Ali")
    reports.add("e1", "2024-01-16", printing=3)

    body = admin_client.get("/admin/exports/report?start=2024-01-01&end=2024-01-31").get_json()

    assert body["date_range"] == {"start": "2024-01-01", "end": "2024-01-31"}
    assert body["summaries"][0]["full_name"] == "Ali"


def test_dashboard(admin_client, profiles, reports):
    profiles.add("e1", "Ali")
    reports.add("e1", "2024-01-16", editing=5)

    stats = admin_client.get("/admin/dashboard").get_json()["stats"]

    assert stats["active_employees"] == 1
    assert stats["total_editing_pages"] == 5


def test_admin_role_string_in_session(client, profiles, login_as):
    boss = profiles.add("boss", "Boss", role=Role.ADMIN)
    login_as(client, boss)

    assert client.get("/admin/employees").status_code == 200
