from __future__ import annotations

from datetime import date
from typing import List

from ..common.datetime_utils import format_date, month_range, parse_date_range
from ..common.guards import require_admin
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..reports.repository import ReportRepository
from ..users.repository import ProfileRepository
from .aggregation import build_summaries, dashboard_stats, summarize_employee
from .model import DashboardStats, EmployeeSummary, SummaryReport


class SummaryService:
    """Fetch a fresh snapshot from the store, then aggregate it."""

    def __init__(self, profiles: ProfileRepository, reports: ReportRepository):
        self._profiles = profiles
        self._reports = reports

    def _summaries(self, start: date, end: date) -> List[EmployeeSummary]:
        employees = self._profiles.list_profiles(role=Role.EMPLOYEE, active_only=True)
        if not employees:
            return []
        reports = self._reports.list_reports(start=start, end=end) if start <= end else []
        return build_summaries(employees, reports, start=start, end=end)

    def get_all_employees_summary(self, *, current_role: Role, start: str, end: str) -> List[EmployeeSummary]:
        require_admin(current_role)
        start_d, end_d = parse_date_range(start, end)
        return self._summaries(start_d, end_d)

    def get_employee_summary(self, *, current_role: Role, employee_id: str, start: str, end: str) -> EmployeeSummary:
        require_admin(current_role)
        start_d, end_d = parse_date_range(start, end)

        profile = self._profiles.get_by_id(employee_id)
        if not profile:
            raise NotFoundError("Employee not found")

        reports = self._reports.list_reports(employee_id=profile.profile_id, start=start_d, end=end_d)
        return summarize_employee(profile, reports, start=start_d, end=end_d)

    def generate_report(self, *, current_role: Role, start: str, end: str) -> SummaryReport:
        require_admin(current_role)
        start_d, end_d = parse_date_range(start, end)
        return SummaryReport(start=format_date(start_d), end=format_date(end_d), summaries=self._summaries(start_d, end_d))

    def dashboard(self, *, current_role: Role, today: date) -> DashboardStats:
        """Totals for the calendar month containing ``today``."""

        require_admin(current_role)
        start, end = month_range(today)
        summaries = self._summaries(start, end)
        active = len(self._profiles.list_profiles(role=Role.EMPLOYEE, active_only=True))
        return dashboard_stats(active, summaries, start=start, end=end)
