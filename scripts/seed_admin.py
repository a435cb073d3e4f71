"""Create the first admin account (or reset its password).

Reads ADMIN_EMAIL / ADMIN_PASSWORD / ADMIN_NAME from the environment or .env.
"""

from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.work_tracker.work_tracker.core.constants import MIN_PASSWORD_LENGTH
from src.work_tracker.work_tracker.database.bootstrap import ensure_admin


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    email = os.getenv("ADMIN_EMAIL", "admin@example.com").strip().lower()
    password = os.getenv("ADMIN_PASSWORD", "")
    full_name = os.getenv("ADMIN_NAME", "System Admin")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise SystemExit(f"Set ADMIN_PASSWORD (at least {MIN_PASSWORD_LENGTH} characters) before seeding the admin account.")

    profile_id = ensure_admin(db_config, email=email, password=password, full_name=full_name)
    print(f"OK: Admin ready -> {email} (id={profile_id})")


if __name__ == "__main__":
    main()
