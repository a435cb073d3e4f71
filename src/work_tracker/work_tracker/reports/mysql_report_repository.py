from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import DailyReport
from .repository import ReportRepository

_COLUMNS = """
    report_id, employee_id, report_date, book_title,
    printing_pages, typesetting_pages, editing_pages,
    notes, is_leave, created_at, updated_at
"""

_UPDATABLE = {"book_title", "printing_pages", "typesetting_pages", "editing_pages", "notes", "is_leave"}


def _to_report(r: dict) -> DailyReport:
    return DailyReport(
        report_id=str(r["report_id"]),
        employee_id=str(r["employee_id"]),
        report_date=r["report_date"],
        book_title=r.get("book_title"),
        printing_pages=int(r.get("printing_pages") or 0),
        typesetting_pages=int(r.get("typesetting_pages") or 0),
        editing_pages=int(r.get("editing_pages") or 0),
        notes=r.get("notes"),
        is_leave=bool(r.get("is_leave")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _range_clauses(
    *,
    employee_id: Optional[str],
    start: Optional[date],
    end: Optional[date],
    prefix: str = "",
) -> tuple[str, list[object]]:
    clauses = ["1=1"]
    params: list[object] = []

    if employee_id is not None:
        clauses.append(f"{prefix}employee_id=%s")
        params.append(str(employee_id))
    if start is not None:
        clauses.append(f"{prefix}report_date>=%s")
        params.append(start)
    if end is not None:
        clauses.append(f"{prefix}report_date<=%s")
        params.append(end)

    return " AND ".join(clauses), params


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_reports(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[DailyReport]:
        where, params = _range_clauses(employee_id=employee_id, start=start, end=end)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_reports
                WHERE {where}
                ORDER BY report_date DESC
                """,
                tuple(params),
            )
            return [_to_report(r) for r in fetchall(cur)]

    def list_with_employee(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[dict]:
        where, params = _range_clauses(employee_id=employee_id, start=start, end=end, prefix="r.")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.report_id, r.employee_id, p.full_name,
                       r.report_date, r.book_title,
                       r.printing_pages, r.typesetting_pages, r.editing_pages,
                       r.notes, r.is_leave, r.updated_at
                FROM daily_reports r
                JOIN profiles p ON p.profile_id = r.employee_id
                WHERE {where}
                ORDER BY r.report_date DESC, p.full_name
                """,
                tuple(params),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                printing = int(r.get("printing_pages") or 0)
                typesetting = int(r.get("typesetting_pages") or 0)
                editing = int(r.get("editing_pages") or 0)
                out.append(
                    {
                        "id": r["report_id"],
                        "employee_id": r["employee_id"],
                        "full_name": r["full_name"],
                        "report_date": r["report_date"].strftime("%Y-%m-%d"),
                        "book_title": r.get("book_title") or "",
                        "printing_pages": printing,
                        "typesetting_pages": typesetting,
                        "editing_pages": editing,
                        "total_pages": printing + typesetting + editing,
                        "notes": r.get("notes") or "",
                        "is_leave": bool(r.get("is_leave")),
                        "updated_at": r["updated_at"].strftime("%Y-%m-%d %H:%M") if r.get("updated_at") else "-",
                    }
                )
            return out

    def get_by_id(self, report_id: str) -> Optional[DailyReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM daily_reports WHERE report_id=%s", (str(report_id),))
            r = fetchone(cur)
            return _to_report(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, report_date: date) -> Optional[DailyReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_reports WHERE employee_id=%s AND report_date=%s",
                (str(employee_id), report_date),
            )
            r = fetchone(cur)
            return _to_report(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_reports(
                    report_id, employee_id, report_date, book_title,
                    printing_pages, typesetting_pages, editing_pages, notes, is_leave
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    book_title=VALUES(book_title),
                    printing_pages=VALUES(printing_pages),
                    typesetting_pages=VALUES(typesetting_pages),
                    editing_pages=VALUES(editing_pages),
                    notes=VALUES(notes),
                    is_leave=VALUES(is_leave)
                """,
                (
                    new_id(),
                    str(employee_id),
                    report_date,
                    book_title,
                    int(printing_pages),
                    int(typesetting_pages),
                    int(editing_pages),
                    notes,
                    1 if is_leave else 0,
                ),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM daily_reports WHERE employee_id=%s AND report_date=%s",
                (str(employee_id), report_date),
            )
            return _to_report(fetchone(cur))

    def update(self, report_id: str, changes: dict) -> Optional[DailyReport]:
        unknown = set(changes) - _UPDATABLE
        if unknown:
            raise ValueError(f"Unsupported report columns: {sorted(unknown)}")

        with db_cursor(self._conn_factory) as (_, cur):
            if changes:
                assignments = ", ".join(f"{col}=%s" for col in changes)
                values = [int(v) if isinstance(v, bool) else v for v in changes.values()]
                cur.execute(
                    f"UPDATE daily_reports SET {assignments} WHERE report_id=%s",
                    tuple(values + [str(report_id)]),
                )
            cur.execute(f"SELECT {_COLUMNS} FROM daily_reports WHERE report_id=%s", (str(report_id),))
            r = fetchone(cur)
            return _to_report(r) if r else None
