from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .audit.mysql_audit_repository import MySQLAuditRepository
from .audit.repository import AuditRepository
from .audit.service import AuditService
from .core.constants import DEFAULT_AUDIT_RETRY_ATTEMPTS, DEFAULT_REPORT_TITLE
from .database.connection import DBConfig, DatabaseConnection
from .exports.service import ExportService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .summaries.service import SummaryService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository
from .users.service import AuthService, ProfileService


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    reports_repo: ReportRepository
    audit_repo: AuditRepository

    auth_service: AuthService
    profile_service: ProfileService
    report_service: ReportService
    audit_service: AuditService
    summary_service: SummaryService
    export_service: ExportService


def build_services(
    *,
    profiles_repo: ProfileRepository,
    reports_repo: ReportRepository,
    audit_repo: AuditRepository,
    audit_retry_attempts: int = DEFAULT_AUDIT_RETRY_ATTEMPTS,
    enforce_leave_on_edit: bool = False,
    report_title: str = DEFAULT_REPORT_TITLE,
    pdf_font_path: Optional[str] = None,
    pdf_bold_font_path: Optional[str] = None,
) -> Container:
    """Wire services on top of any repository implementations."""

    audit_service = AuditService(audit_repo, retry_attempts=audit_retry_attempts)
    summary_service = SummaryService(profiles_repo, reports_repo)

    return Container(
        profiles_repo=profiles_repo,
        reports_repo=reports_repo,
        audit_repo=audit_repo,
        auth_service=AuthService(profiles_repo),
        profile_service=ProfileService(profiles_repo, audit_service),
        report_service=ReportService(reports_repo, audit_service, enforce_leave_on_edit=enforce_leave_on_edit),
        audit_service=audit_service,
        summary_service=summary_service,
        export_service=ExportService(
            summary_service,
            default_title=report_title,
            pdf_font_path=pdf_font_path,
            pdf_bold_font_path=pdf_bold_font_path,
        ),
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        profiles_repo=MySQLProfileRepository(conn),
        reports_repo=MySQLReportRepository(conn),
        audit_repo=MySQLAuditRepository(conn),
        **options,
    )
