from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    ExportError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    ExportError: 500,
    StoreError: 503,
}


def error_response(e: DomainError):
    status = next((code for cls, code in _STATUS.items() if isinstance(e, cls)), 400)
    if status >= 500:
        logger.error("%s: %s", type(e).__name__, e)
        message = "Export failed" if isinstance(e, ExportError) else "Service temporarily unavailable"
    else:
        message = str(e)
    return jsonify({"success": False, "error": message}), status


def current_role() -> Role:
    return Role(session.get("role"))


def current_user_id() -> str:
    return str(session["user_id"])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "error": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Route-level gate; services repeat the check through ``require_admin``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "error": "Please log in to continue"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"success": False, "error": "Forbidden"}), 403
        return view(*args, **kwargs)

    return wrapper
