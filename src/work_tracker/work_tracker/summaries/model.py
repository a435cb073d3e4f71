from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model: one employee's totals over a date range (never persisted)."""

    employee_id: str
    full_name: str
    total_printing_pages: int = 0
    total_typesetting_pages: int = 0
    total_editing_pages: int = 0
    total_workdays: int = 0
    total_leave_days: int = 0

    @property
    def total_pages(self) -> int:
        return self.total_printing_pages + self.total_typesetting_pages + self.total_editing_pages

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total_pages"] = self.total_pages
        return data


@dataclass(frozen=True)
class SummaryReport:
    start: str
    end: str
    summaries: List[EmployeeSummary] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date_range": {"start": self.start, "end": self.end},
            "summaries": [s.to_dict() for s in self.summaries],
        }


@dataclass(frozen=True)
class DashboardStats:
    start: str
    end: str
    active_employees: int
    total_printing_pages: int
    total_typesetting_pages: int
    total_editing_pages: int
    total_workdays: int

    @property
    def total_pages(self) -> int:
        return self.total_printing_pages + self.total_typesetting_pages + self.total_editing_pages

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total_pages"] = self.total_pages
        return data
