from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_records.hr_records.core.enums import StoreBackend
from src.hr_records.hr_records.database.bootstrap import DATABASE_DIR, apply_seed_sql
from src.hr_records.hr_records.database.connection import DatabaseConnection, resolve_store_settings
from src.hr_records.hr_records.leave_attendance.model import LEAVE_SCHEMA
from src.hr_records.hr_records.onboarding.model import ONBOARDING_SCHEMA
from src.hr_records.hr_records.payroll.model import PAYROLL_SCHEMA


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store_settings = resolve_store_settings(settings)
    if store_settings.backend == StoreBackend.SUPABASE:
        raise SystemExit("Seeding is only supported for SQL backends (DATABASE_URL or DB_*).")

    conn = DatabaseConnection(store_settings)
    try:
        applied = apply_seed_sql(
            conn,
            seed_path=DATABASE_DIR / "seed.sql",
            only_if_empty=(ONBOARDING_SCHEMA.table, LEAVE_SCHEMA.table, PAYROLL_SCHEMA.table),
        )
    finally:
        conn.close()

    if applied:
        print(f"OK: Seeded database -> {store_settings.describe()}")
    else:
        print("Skipped: tables already contain rows")


if __name__ == "__main__":
    main()
