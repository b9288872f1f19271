from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..core.enums import StoreBackend
from .connection import DatabaseConnection
from .sql_base import db_cursor, execute, fetchall, fetchone

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[4] / "database"


def schema_path_for(backend: StoreBackend, *, base_dir: Path = DATABASE_DIR) -> Path:
    return base_dir / f"schema.{backend.value}.sql"


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(_strip_comments(sql)):
        execute(cur, stmt)


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    """Create the resource tables (statements are CREATE ... IF NOT EXISTS)."""
    sql = Path(schema_path).read_text(encoding="utf-8")
    with db_cursor(conn_factory) as (_, cur):
        _exec_sql(cur, sql)
    logger.info("Applied schema %s", schema_path)


def apply_seed_sql(conn_factory: DatabaseConnection, *, seed_path: str | Path, only_if_empty: Iterable[str] = ()) -> bool:
    """Load demo rows. Skipped when any table in ``only_if_empty`` has rows."""
    sql = Path(seed_path).read_text(encoding="utf-8")
    with db_cursor(conn_factory) as (_, cur):
        for table in only_if_empty:
            execute(cur, f"SELECT COUNT(*) AS total FROM {table}")
            row = fetchone(cur)
            if row and int(row["total"]) > 0:
                logger.info("Seed skipped: %s already has rows", table)
                return False
        _exec_sql(cur, sql)
    logger.info("Applied seed %s", seed_path)
    return True


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    if conn_factory.backend == StoreBackend.POSTGRES:
        sql = "SELECT table_name AS name FROM information_schema.tables WHERE table_schema = current_schema()"
    else:
        sql = "SELECT table_name AS name FROM information_schema.tables WHERE table_schema = DATABASE()"

    with db_cursor(conn_factory) as (_, cur):
        execute(cur, sql + " ORDER BY table_name")
        return [row["name"] for row in fetchall(cur)]
