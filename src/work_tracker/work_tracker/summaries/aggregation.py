"""Per-employee aggregation of daily reports.

Pure functions over already-fetched rows: no store access, no clock, so the
same inputs always give the same output.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

from ..reports.model import DailyReport
from ..users.model import Profile
from .model import DashboardStats, EmployeeSummary


def _in_range(report: DailyReport, start: date, end: date) -> bool:
    return start <= report.report_date <= end


def summarize_employee(
    profile: Profile,
    reports: Iterable[DailyReport],
    *,
    start: date,
    end: date,
) -> EmployeeSummary:
    printing = typesetting = editing = workdays = leave_days = 0

    for r in reports:
        if r.employee_id != profile.profile_id or not _in_range(r, start, end):
            continue
        printing += int(r.printing_pages or 0)
        typesetting += int(r.typesetting_pages or 0)
        editing += int(r.editing_pages or 0)
        if r.is_leave:
            leave_days += 1
        else:
            workdays += 1

    return EmployeeSummary(
        employee_id=profile.profile_id,
        full_name=profile.full_name,
        total_printing_pages=printing,
        total_typesetting_pages=typesetting,
        total_editing_pages=editing,
        total_workdays=workdays,
        total_leave_days=leave_days,
    )


def build_summaries(
    employees: Sequence[Profile],
    reports: Sequence[DailyReport],
    *,
    start: date,
    end: date,
) -> List[EmployeeSummary]:
    """One summary per employee, best performers first.

    Employees without reports get an all-zero summary. ``sorted`` is stable,
    so employees with equal totals keep the order they were given in.
    """

    if not employees:
        return []

    by_employee: dict[str, list[DailyReport]] = {}
    for r in reports:
        if _in_range(r, start, end):
            by_employee.setdefault(r.employee_id, []).append(r)

    summaries = [
        summarize_employee(e, by_employee.get(e.profile_id, ()), start=start, end=end)
        for e in employees
    ]
    return sorted(summaries, key=lambda s: s.total_pages, reverse=True)


def dashboard_stats(
    active_employees: int,
    summaries: Sequence[EmployeeSummary],
    *,
    start: date,
    end: date,
) -> DashboardStats:
    return DashboardStats(
        start=start.strftime("%Y-%m-%d"),
        end=end.strftime("%Y-%m-%d"),
        active_employees=int(active_employees),
        total_printing_pages=sum(s.total_printing_pages for s in summaries),
        total_typesetting_pages=sum(s.total_typesetting_pages for s in summaries),
        total_editing_pages=sum(s.total_editing_pages for s in summaries),
        total_workdays=sum(s.total_workdays for s in summaries),
    )
