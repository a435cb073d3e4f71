from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..audit.model import AuditLog
from ..audit.service import AuditService
from ..common.datetime_utils import parse_iso_date, parse_optional_date
from ..common.guards import require_admin
from ..common.validators import clean_optional, to_bool, to_page_count
from ..core.enums import AuditAction, Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import PAGE_FIELDS, DailyReport, DailyReportForm, ReportPatch
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class ReportService:
    """Daily report use cases: employee submission and admin review/edit.

    ``enforce_leave_on_edit`` decides whether an admin edit that leaves the
    row marked as leave also zeroes the page counts and clears the book title
    (the rule the employee path always applies). Off by default: admin edits
    are strict patches.
    """

    def __init__(
        self,
        reports: ReportRepository,
        audit: AuditService,
        *,
        enforce_leave_on_edit: bool = False,
    ):
        self._reports = reports
        self._audit = audit
        self._enforce_leave_on_edit = bool(enforce_leave_on_edit)

    def submit_daily_report(self, *, current_user_id: str, form: DailyReportForm) -> DailyReport:
        if not current_user_id:
            raise ValidationError("Missing employee")
        if not isinstance(form.report_date, date):
            raise ValidationError("Invalid report date")

        is_leave = to_bool(form.is_leave)
        return self._reports.upsert(
            employee_id=str(current_user_id),
            report_date=form.report_date,
            book_title=None if is_leave else clean_optional(form.book_title),
            printing_pages=0 if is_leave else to_page_count(form.printing_pages),
            typesetting_pages=0 if is_leave else to_page_count(form.typesetting_pages),
            editing_pages=0 if is_leave else to_page_count(form.editing_pages),
            notes=clean_optional(form.notes),
            is_leave=is_leave,
        )

    def get_my_reports(
        self,
        *,
        user_id: str,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[DailyReport]:
        return self._reports.list_reports(
            employee_id=str(user_id),
            start=parse_optional_date(start),
            end=parse_optional_date(end),
        )

    def get_report_for_date(self, *, user_id: str, report_date: str) -> Optional[DailyReport]:
        return self._reports.get_for_employee_and_date(str(user_id), parse_iso_date(report_date))

    def list_all_reports(
        self,
        *,
        current_role: Role,
        employee_id: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[dict]:
        require_admin(current_role)
        return self._reports.list_with_employee(
            employee_id=employee_id or None,
            start=parse_optional_date(start),
            end=parse_optional_date(end),
        )

    def _build_changes(self, before: DailyReport, patch: ReportPatch) -> dict:
        changes: dict = {}
        for name, value in patch.present().items():
            if name in PAGE_FIELDS:
                changes[name] = to_page_count(value)
            elif name == "is_leave":
                changes[name] = to_bool(value)
            else:
                changes[name] = clean_optional(value)

        if self._enforce_leave_on_edit and changes.get("is_leave", before.is_leave):
            for name in PAGE_FIELDS:
                changes[name] = 0
            changes["book_title"] = None

        return changes

    def admin_update_report(
        self,
        *,
        current_role: Role,
        actor_id: str,
        report_id: str,
        patch: ReportPatch,
    ) -> AuditLog:
        """Apply an admin edit and return the audit entry describing it.

        The entry's ``audit_id`` is None when the audit store rejected it; the
        edit itself stays committed either way.
        """

        require_admin(current_role)

        before = self._reports.get_by_id(report_id)
        if not before:
            raise NotFoundError("Report not found")

        changes = self._build_changes(before, patch)
        after = self._reports.update(report_id, changes)
        if not after:
            raise NotFoundError("Report not found")
        logger.info("Report %s edited by %s (%s)", report_id, actor_id, ", ".join(sorted(changes)) or "no changes")

        return self._audit.record(
            actor_id=actor_id,
            target_employee_id=before.employee_id,
            report_id=before.report_id,
            action=AuditAction.ADMIN_EDIT,
            before_data=before.to_dict(),
            after_data=after.to_dict(),
        )
