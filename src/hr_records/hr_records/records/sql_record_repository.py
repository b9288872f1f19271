from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Type

from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .model import Record
from .repository import RecordRepository
from .schema import ResourceSchema


class SQLRecordRepository(RecordRepository):
    """Parameterized SQL over the shared pool (Postgres or MySQL).

    Postgres returns written rows with RETURNING. MySQL has no RETURNING, so
    the row is read back by id on the same connection before commit.
    """

    def __init__(self, conn_factory: DatabaseConnection, schema: ResourceSchema, model: Type[Record]):
        self._conn_factory = conn_factory
        self._schema = schema
        self._model = model
        self._select_list = ", ".join(("id",) + schema.columns)

    def _select_by_id(self, cur, record_id: int) -> Optional[Record]:
        execute(
            cur,
            f"SELECT {self._select_list} FROM {self._schema.table} WHERE id=%s",
            (int(record_id),),
        )
        row = fetchone(cur)
        return self._model.from_row(row) if row else None

    def list_all(self) -> Sequence[Record]:
        direction = "DESC" if self._schema.descending else "ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            execute(
                cur,
                f"""
                SELECT {self._select_list}
                FROM {self._schema.table}
                ORDER BY {self._schema.order_by} {direction}, id ASC
                """,
            )
            return [self._model.from_row(r) for r in fetchall(cur)]

    def get(self, *, record_id: int) -> Optional[Record]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_by_id(cur, record_id)

    def create(self, *, values: Mapping[str, Any]) -> Record:
        columns = self._schema.columns
        placeholders = ",".join(["%s"] * len(columns))
        sql = f"INSERT INTO {self._schema.table}({', '.join(columns)}) VALUES({placeholders})"
        params = tuple(values.get(c) for c in columns)

        with db_cursor(self._conn_factory) as (_, cur):
            if self._conn_factory.supports_returning:
                execute(cur, f"{sql} RETURNING {self._select_list}", params)
                return self._model.from_row(fetchone(cur))

            execute(cur, sql, params)
            return self._select_by_id(cur, int(cur.lastrowid))

    def replace(self, *, record_id: int, values: Mapping[str, Any]) -> Optional[Record]:
        columns = self._schema.columns
        assignments = ", ".join(f"{c}=%s" for c in columns)
        sql = f"UPDATE {self._schema.table} SET {assignments} WHERE id=%s"
        params = tuple(values.get(c) for c in columns) + (int(record_id),)

        with db_cursor(self._conn_factory) as (_, cur):
            if self._conn_factory.supports_returning:
                execute(cur, f"{sql} RETURNING {self._select_list}", params)
                row = fetchone(cur)
                return self._model.from_row(row) if row else None

            # MySQL rowcount reports changed rows, not matched ones.
            execute(cur, sql, params)
            return self._select_by_id(cur, record_id)

    def delete(self, *, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            execute(cur, f"DELETE FROM {self._schema.table} WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            execute(cur, f"SELECT COUNT(*) AS total FROM {self._schema.table}")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
