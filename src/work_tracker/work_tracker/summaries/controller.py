from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, month_range
from ..common.web import admin_required, current_role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _range_args() -> tuple[str, str]:
        start_default, end_default = month_range(app.config["TODAY_PROVIDER"]())
        return (
            request.args.get("start") or format_date(start_default),
            request.args.get("end") or format_date(end_default),
        )

    @app.route("/admin/summaries", methods=["GET"], endpoint="admin_summaries")
    @admin_required
    def admin_summaries():
        start, end = _range_args()
        summaries = container.summary_service.get_all_employees_summary(
            current_role=current_role(), start=start, end=end
        )
        return jsonify({"success": True, "start": start, "end": end, "summaries": [s.to_dict() for s in summaries]})

    @app.route("/admin/summaries/<employee_id>", methods=["GET"], endpoint="admin_employee_summary")
    @admin_required
    def admin_employee_summary(employee_id: str):
        start, end = _range_args()
        summary = container.summary_service.get_employee_summary(
            current_role=current_role(), employee_id=employee_id, start=start, end=end
        )
        return jsonify({"success": True, "start": start, "end": end, "summary": summary.to_dict()})

    @app.route("/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        stats = container.summary_service.dashboard(current_role=current_role(), today=app.config["TODAY_PROVIDER"]())
        return jsonify({"success": True, "stats": stats.to_dict()})
