from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.validators import to_bool
from ..common.web import admin_required, current_role, current_user_id, login_required
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = to_bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["user_id"] = s_user.profile_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value

        return jsonify({"success": True, "user": {"id": s_user.profile_id, "full_name": s_user.full_name, "role": s_user.role.value}})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        profile = container.profile_service.get_profile(current_user_id())
        if not profile:
            session.clear()
            return jsonify({"success": False, "error": "Please log in to continue"}), 401
        return jsonify({"success": True, "profile": profile.to_dict()})

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        profiles = container.profile_service.list_employees(current_role=current_role())
        return jsonify({"success": True, "employees": [p.to_dict() for p in profiles]})

    @app.route("/admin/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = request.get_json(silent=True) or {}
        profile = container.profile_service.create_employee(
            current_role=current_role(),
            actor_id=current_user_id(),
            email=data.get("email", ""),
            password=data.get("password", ""),
            full_name=data.get("full_name", ""),
            phone=data.get("phone"),
            role=data.get("role", "employee"),
        )
        return jsonify({"success": True, "employee": profile.to_dict()}), 201

    @app.route("/admin/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @admin_required
    def get_employee(employee_id: str):
        profile = container.profile_service.get_employee(current_role=current_role(), employee_id=employee_id)
        return jsonify({"success": True, "employee": profile.to_dict()})

    @app.route("/admin/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_required
    def update_employee(employee_id: str):
        data = request.get_json(silent=True) or {}
        profile = container.profile_service.update_employee(
            current_role=current_role(),
            actor_id=current_user_id(),
            employee_id=employee_id,
            full_name=data.get("full_name", ""),
            phone=data.get("phone"),
            role=data.get("role", "employee"),
            is_active=to_bool(data.get("is_active", True)),
        )
        return jsonify({"success": True, "employee": profile.to_dict()})

    @app.route("/admin/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        container.profile_service.delete_employee(
            current_role=current_role(),
            actor_id=current_user_id(),
            employee_id=employee_id,
        )
        return jsonify({"success": True})
