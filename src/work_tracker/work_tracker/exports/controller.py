from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import format_date, week_range
from ..common.web import admin_required, current_role
from ..container import Container
from .model import ExportFile


def register(app: Flask, container: Container) -> None:
    def _range_args() -> tuple[str, str]:
        start_default, end_default = week_range(app.config["TODAY_PROVIDER"]())
        return (
            request.args.get("start") or format_date(start_default),
            request.args.get("end") or format_date(end_default),
        )

    def _send(export: ExportFile):
        if request.args.get("encoding") == "base64":
            return jsonify({"success": True, "filename": export.filename, "mimetype": export.mimetype, "data": export.as_base64()})
        return send_file(
            io.BytesIO(export.content),
            mimetype=export.mimetype,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/admin/exports/report", methods=["GET"], endpoint="export_report_data")
    @admin_required
    def export_report_data():
        start, end = _range_args()
        report = container.summary_service.generate_report(current_role=current_role(), start=start, end=end)
        return jsonify({"success": True, **report.to_dict()})

    @app.route("/admin/exports/report.xlsx", methods=["GET"], endpoint="export_report_xlsx")
    @admin_required
    def export_report_xlsx():
        start, end = _range_args()
        export = container.export_service.export_excel(
            current_role=current_role(), start=start, end=end, title=request.args.get("title")
        )
        return _send(export)

    @app.route("/admin/exports/report.pdf", methods=["GET"], endpoint="export_report_pdf")
    @admin_required
    def export_report_pdf():
        start, end = _range_args()
        export = container.export_service.export_pdf(
            current_role=current_role(), start=start, end=end, title=request.args.get("title")
        )
        return _send(export)
