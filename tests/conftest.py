from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.work_tracker.work_tracker.audit.model import AuditLog
from src.work_tracker.work_tracker.audit.service import AuditService
from src.work_tracker.work_tracker.container import build_services
from src.work_tracker.work_tracker.core.enums import Role
from src.work_tracker.work_tracker.core.exceptions import StoreError
from src.work_tracker.work_tracker.main import create_app
from src.work_tracker.work_tracker.reports.model import DailyReport
from src.work_tracker.work_tracker.users.model import Credentials, Profile

BASE_TIME = datetime(2024, 1, 1, 8, 0, 0)


class InMemoryProfiles:
    def __init__(self):
        self._rows: dict[str, Profile] = {}
        self._hashes: dict[str, str] = {}
        self._seq = 0

    def add(
        self,
        profile_id: str,
        full_name: str,
        *,
        role: Role = Role.EMPLOYEE,
        is_active: bool = True,
        email: Optional[str] = None,
        password: str = "secret123",
    ) -> Profile:
        self._seq += 1
        profile = Profile(
            profile_id=profile_id,
            full_name=full_name,
            phone=None,
            role=role,
            is_active=is_active,
            created_at=BASE_TIME + timedelta(minutes=self._seq),
            email=email or f"{profile_id}@example.com",
        )
        self._rows[profile_id] = profile
        self._hashes[profile_id] = generate_password_hash(password)
        return profile

    def list_profiles(self, *, role=None, active_only=False):
        items = [
            p
            for p in self._rows.values()
            if (role is None or p.role == role) and (not active_only or p.is_active)
        ]
        return sorted(items, key=lambda p: p.created_at, reverse=True)

    def get_by_id(self, profile_id):
        return self._rows.get(str(profile_id))

    def get_by_email(self, email):
        return next((p for p in self._rows.values() if p.email == email), None)

    def get_credentials(self, email):
        p = self.get_by_email(email)
        if not p:
            return None
        return Credentials(profile_id=p.profile_id, password_hash=self._hashes[p.profile_id])

    def create(self, *, email, password_hash, full_name, phone, role):
        self._seq += 1
        profile_id = f"p{self._seq}"
        profile = Profile(
            profile_id=profile_id,
            full_name=full_name,
            phone=phone,
            role=role,
            is_active=True,
            created_at=BASE_TIME + timedelta(minutes=self._seq),
            email=email,
        )
        self._rows[profile_id] = profile
        self._hashes[profile_id] = password_hash
        return profile

    def update(self, profile_id, *, full_name, phone, role, is_active):
        current = self._rows.get(str(profile_id))
        if not current:
            return None
        updated = replace(current, full_name=full_name, phone=phone, role=role, is_active=is_active)
        self._rows[str(profile_id)] = updated
        return updated

    def delete_by_id(self, profile_id):
        return self._rows.pop(str(profile_id), None) is not None


class InMemoryReports:
    def __init__(self, profiles: Optional[InMemoryProfiles] = None):
        self._rows: dict[str, DailyReport] = {}
        self._profiles = profiles
        self._seq = 0
        self.update_calls: list[tuple[str, dict]] = []

    def add(
        self,
        employee_id: str,
        report_date: str,
        *,
        printing: int = 0,
        typesetting: int = 0,
        editing: int = 0,
        is_leave: bool = False,
        book_title: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> DailyReport:
        return self.upsert(
            employee_id=employee_id,
            report_date=date.fromisoformat(report_date),
            book_title=book_title,
            printing_pages=printing,
            typesetting_pages=typesetting,
            editing_pages=editing,
            notes=notes,
            is_leave=is_leave,
        )

    def _matches(self, r, employee_id, start, end):
        if employee_id is not None and r.employee_id != employee_id:
            return False
        if start is not None and r.report_date < start:
            return False
        if end is not None and r.report_date > end:
            return False
        return True

    def list_reports(self, *, employee_id=None, start=None, end=None):
        items = [r for r in self._rows.values() if self._matches(r, employee_id, start, end)]
        return sorted(items, key=lambda r: r.report_date, reverse=True)

    def list_with_employee(self, *, employee_id=None, start=None, end=None):
        out = []
        for r in self.list_reports(employee_id=employee_id, start=start, end=end):
            profile = self._profiles.get_by_id(r.employee_id) if self._profiles else None
            row = r.to_dict()
            row["full_name"] = profile.full_name if profile else "-"
            row["total_pages"] = r.total_pages
            out.append(row)
        return out

    def get_by_id(self, report_id):
        return self._rows.get(str(report_id))

    def get_for_employee_and_date(self, employee_id, report_date):
        return next(
            (r for r in self._rows.values() if r.employee_id == employee_id and r.report_date == report_date),
            None,
        )

    def upsert(self, *, employee_id, report_date, book_title, printing_pages, typesetting_pages, editing_pages, notes, is_leave):
        existing = self.get_for_employee_and_date(employee_id, report_date)
        self._seq += 1
        stamp = BASE_TIME + timedelta(minutes=self._seq)
        report = DailyReport(
            report_id=existing.report_id if existing else f"r{self._seq}",
            employee_id=employee_id,
            report_date=report_date,
            book_title=book_title,
            printing_pages=printing_pages,
            typesetting_pages=typesetting_pages,
            editing_pages=editing_pages,
            notes=notes,
            is_leave=is_leave,
            created_at=existing.created_at if existing else stamp,
            updated_at=stamp,
        )
        self._rows[report.report_id] = report
        return report

    def update(self, report_id, changes):
        self.update_calls.append((str(report_id), dict(changes)))
        current = self._rows.get(str(report_id))
        if not current:
            return None
        updated = replace(current, **changes)
        self._rows[str(report_id)] = updated
        return updated


class InMemoryAudit:
    def __init__(self):
        self.entries: list[AuditLog] = []
        self.fail_times = 0
        self.error: Exception = StoreError("audit table unavailable")
        self.attempts = 0

    def append(self, entry):
        self.attempts += 1
        if self.fail_times > 0:
            self.fail_times -= 1
            raise self.error
        audit_id = f"a{len(self.entries) + 1}"
        self.entries.append(replace(entry, audit_id=audit_id))
        return audit_id

    def list_recent(self, *, limit=100):
        return [e.to_dict() for e in reversed(self.entries)][:limit]


@pytest.fixture
def profiles():
    return InMemoryProfiles()


@pytest.fixture
def reports(profiles):
    return InMemoryReports(profiles)


@pytest.fixture
def audit_repo():
    return InMemoryAudit()


@pytest.fixture
def audit_service(audit_repo):
    return AuditService(audit_repo, retry_attempts=2, clock=lambda: datetime(2024, 2, 1, 12, 0, 0))


@pytest.fixture
def container(profiles, reports, audit_repo):
    return build_services(profiles_repo=profiles, reports_repo=reports, audit_repo=audit_repo)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    app.config["TODAY_PROVIDER"] = lambda: date(2024, 1, 15)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _login_as(client, profile: Profile) -> None:
    with client.session_transaction() as sess:
        sess["user_id"] = profile.profile_id
        sess["name"] = profile.full_name
        sess["role"] = profile.role.value


@pytest.fixture
def admin(profiles):
    return profiles.add("admin1", "Admin", role=Role.ADMIN, email="admin@example.com", password="Admin123!")


@pytest.fixture
def admin_client(client, admin):
    _login_as(client, admin)
    return client


@pytest.fixture
def login_as():
    return _login_as
