from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any, Optional


class _Unset:
    """Marker for a patch field the caller did not send."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

PAGE_FIELDS = ("printing_pages", "typesetting_pages", "editing_pages")


@dataclass(frozen=True)
class DailyReport:
    """Domain entity: one employee's work (or leave) for one calendar day."""

    report_id: str
    employee_id: str
    report_date: date
    book_title: Optional[str]
    printing_pages: int
    typesetting_pages: int
    editing_pages: int
    notes: Optional[str]
    is_leave: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def total_pages(self) -> int:
        return int(self.printing_pages or 0) + int(self.typesetting_pages or 0) + int(self.editing_pages or 0)

    def to_dict(self) -> dict:
        """JSON-safe snapshot, used for audit before/after data and API output."""
        return {
            "id": self.report_id,
            "employee_id": self.employee_id,
            "report_date": self.report_date.strftime("%Y-%m-%d"),
            "book_title": self.book_title,
            "printing_pages": self.printing_pages,
            "typesetting_pages": self.typesetting_pages,
            "editing_pages": self.editing_pages,
            "notes": self.notes,
            "is_leave": self.is_leave,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class DailyReportForm:
    """Employee submission for one day."""

    report_date: date
    book_title: Optional[str] = None
    printing_pages: Any = 0
    typesetting_pages: Any = 0
    editing_pages: Any = 0
    notes: Optional[str] = None
    is_leave: bool = False


@dataclass(frozen=True)
class ReportPatch:
    """Admin partial update: only fields that are not UNSET are applied."""

    book_title: Any = UNSET
    printing_pages: Any = UNSET
    typesetting_pages: Any = UNSET
    editing_pages: Any = UNSET
    notes: Any = UNSET
    is_leave: Any = UNSET

    @classmethod
    def from_mapping(cls, data: dict) -> "ReportPatch":
        allowed = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in allowed})

    def present(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}
