"""Settings shared by every environment; each env module overrides a few."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_tracker"),
}

PORT = int(os.getenv("PORT", "5000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# Office timezone as a fixed UTC offset (Baghdad, UTC+3)
TIMEZONE_OFFSET_HOURS = int(os.getenv("TIMEZONE_OFFSET_HOURS", "3"))

REPORT_TITLE = os.getenv("REPORT_TITLE", "Performance Report")

# Optional TTF files for PDF export (needed for non-Latin employee names)
EXPORT_PDF_FONT = os.getenv("EXPORT_PDF_FONT") or None
EXPORT_PDF_BOLD_FONT = os.getenv("EXPORT_PDF_BOLD_FONT") or None

AUDIT_RETRY_ATTEMPTS = int(os.getenv("AUDIT_RETRY_ATTEMPTS", "2"))

# 1 = an admin edit that leaves a report marked as leave also zeroes its pages
ENFORCE_LEAVE_ON_ADMIN_EDIT = env_flag("ENFORCE_LEAVE_ON_ADMIN_EDIT", "0")
