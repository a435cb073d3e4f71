from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, parse_optional_date
from ..common.web import admin_required, current_role, current_user_id, login_required
from ..container import Container
from .model import DailyReportForm, ReportPatch


def register(app: Flask, container: Container) -> None:
    def _today() -> str:
        return format_date(app.config["TODAY_PROVIDER"]())

    @app.route("/reports", methods=["POST"], endpoint="submit_report")
    @login_required
    def submit_report():
        data = request.get_json(silent=True) or {}
        report_date = parse_optional_date(data.get("report_date")) or app.config["TODAY_PROVIDER"]()
        form = DailyReportForm(
            report_date=report_date,
            book_title=data.get("book_title"),
            printing_pages=data.get("printing_pages"),
            typesetting_pages=data.get("typesetting_pages"),
            editing_pages=data.get("editing_pages"),
            notes=data.get("notes"),
            is_leave=data.get("is_leave", False),
        )
        report = container.report_service.submit_daily_report(current_user_id=current_user_id(), form=form)
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/reports/me", methods=["GET"], endpoint="my_reports")
    @login_required
    def my_reports():
        reports = container.report_service.get_my_reports(
            user_id=current_user_id(),
            start=request.args.get("start"),
            end=request.args.get("end"),
        )
        return jsonify({"success": True, "reports": [r.to_dict() for r in reports]})

    @app.route("/reports/me/today", methods=["GET"], endpoint="my_today_report")
    @app.route("/reports/me/<report_date>", methods=["GET"], endpoint="my_report_for_date")
    @login_required
    def my_report_for_date(report_date: str | None = None):
        report = container.report_service.get_report_for_date(
            user_id=current_user_id(),
            report_date=report_date or _today(),
        )
        return jsonify({"success": True, "report": report.to_dict() if report else None})

    @app.route("/admin/reports", methods=["GET"], endpoint="admin_reports")
    @admin_required
    def admin_reports():
        rows = container.report_service.list_all_reports(
            current_role=current_role(),
            employee_id=request.args.get("employee_id"),
            start=request.args.get("start"),
            end=request.args.get("end"),
        )
        return jsonify({"success": True, "reports": list(rows)})

    @app.route("/admin/reports/<report_id>", methods=["PATCH"], endpoint="admin_update_report")
    @admin_required
    def admin_update_report(report_id: str):
        patch = ReportPatch.from_mapping(request.get_json(silent=True) or {})
        entry = container.report_service.admin_update_report(
            current_role=current_role(),
            actor_id=current_user_id(),
            report_id=report_id,
            patch=patch,
        )
        return jsonify({"success": True, "audit": entry.to_dict()})
