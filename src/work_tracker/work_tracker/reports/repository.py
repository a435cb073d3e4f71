from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyReport


class ReportRepository(Protocol):
    def list_reports(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[DailyReport]:
        """Reports with ``start <= report_date <= end`` (either bound optional), newest first."""

        raise NotImplementedError

    def list_with_employee(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[dict]:
        """Return UI rows (joined with the employee profile)."""

        raise NotImplementedError

    def get_by_id(self, report_id: str) -> Optional[DailyReport]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, report_date: date) -> Optional[DailyReport]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        employee_id: str,
        report_date: date,
        book_title: Optional[str],
        printing_pages: int,
        typesetting_pages: int,
        editing_pages: int,
        notes: Optional[str],
        is_leave: bool,
    ) -> DailyReport:
        """Insert or update keyed on (employee_id, report_date).

        Concurrent submissions for the same key are serialized by the unique
        constraint; the last writer wins.
        """

        raise NotImplementedError

    def update(self, report_id: str, changes: dict) -> Optional[DailyReport]:
        """Apply column changes and return the stored row (None if absent)."""

        raise NotImplementedError
