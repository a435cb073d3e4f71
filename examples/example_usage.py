"""Example: use the service layer directly (no Flask).

Controllers are thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.work_tracker.work_tracker.container import build_container
from src.work_tracker.work_tracker.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.summary_service.generate_report(current_role=Role.ADMIN, start="2024-01-01", end="2024-01-07")
    for s in report.summaries:
        print(s.full_name, s.total_pages, s.total_workdays, s.total_leave_days)


if __name__ == "__main__":
    main()
