from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_records.hr_records.core.enums import StoreBackend
from src.hr_records.hr_records.database.bootstrap import apply_schema, list_tables, schema_path_for
from src.hr_records.hr_records.database.connection import DatabaseConnection, resolve_store_settings


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store_settings = resolve_store_settings(settings)
    if store_settings.backend == StoreBackend.SUPABASE:
        raise SystemExit(
            "Supabase schema is managed from the project dashboard; "
            f"run {schema_path_for(StoreBackend.POSTGRES).name} in its SQL editor."
        )

    conn = DatabaseConnection(store_settings)
    try:
        apply_schema(conn, schema_path=schema_path_for(store_settings.backend))
        tables = list_tables(conn)
    finally:
        conn.close()
    print(f"OK: Applied schema -> {store_settings.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
