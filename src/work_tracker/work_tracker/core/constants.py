"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_TIMEZONE_OFFSET_HOURS = 3  # Asia/Baghdad, no DST
DEFAULT_AUDIT_RETRY_ATTEMPTS = 2
DEFAULT_AUDIT_LIST_LIMIT = 100
MIN_PASSWORD_LENGTH = 6

DEFAULT_REPORT_TITLE = "Performance Report"

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIMETYPE = "application/pdf"
