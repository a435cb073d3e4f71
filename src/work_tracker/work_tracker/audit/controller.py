from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_role
from ..container import Container
from ..core.constants import DEFAULT_AUDIT_LIST_LIMIT


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/audit", methods=["GET"], endpoint="admin_audit")
    @admin_required
    def admin_audit():
        limit = request.args.get("limit", DEFAULT_AUDIT_LIST_LIMIT, type=int)
        rows = container.audit_service.list_recent(current_role=current_role(), limit=limit)
        return jsonify({"success": True, "entries": list(rows)})
