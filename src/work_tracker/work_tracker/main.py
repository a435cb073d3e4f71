from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .audit.controller import register as register_audit
from .common.datetime_utils import today_local
from .common.web import error_response
from .container import Container, build_container
from .core.constants import DEFAULT_AUDIT_RETRY_ATTEMPTS, DEFAULT_REPORT_TITLE, DEFAULT_TIMEZONE_OFFSET_HOURS
from .core.exceptions import DomainError
from .core.logging_setup import setup_logging
from .database.bootstrap import apply_schema, list_tables
from .exports.controller import register as register_exports
from .reports.controller import register as register_reports
from .summaries.controller import register as register_summaries
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    ``container`` lets callers (tests, scripts) supply pre-wired services;
    otherwise the MySQL-backed container is built from the settings module.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    offset = int(getattr(settings, "TIMEZONE_OFFSET_HOURS", DEFAULT_TIMEZONE_OFFSET_HOURS))
    app.config["TODAY_PROVIDER"] = lambda: today_local(offset)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            audit_retry_attempts=int(getattr(settings, "AUDIT_RETRY_ATTEMPTS", DEFAULT_AUDIT_RETRY_ATTEMPTS)),
            enforce_leave_on_edit=bool(getattr(settings, "ENFORCE_LEAVE_ON_ADMIN_EDIT", False)),
            report_title=getattr(settings, "REPORT_TITLE", DEFAULT_REPORT_TITLE),
            pdf_font_path=getattr(settings, "EXPORT_PDF_FONT", None),
            pdf_bold_font_path=getattr(settings, "EXPORT_PDF_BOLD_FONT", None),
        )

    app.register_error_handler(DomainError, error_response)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_users(app, container)
    register_reports(app, container)
    register_summaries(app, container)
    register_exports(app, container)
    register_audit(app, container)

    return app
