from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _rollback(conn_factory: DatabaseConnection, conn) -> None:
    try:
        conn.rollback()
    except conn_factory.error_types:
        logger.warning("Rollback failed", exc_info=True)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Borrow a pooled connection for one unit of work.

    Commits on success, rolls back on error, and always hands the connection
    back to the pool. Driver errors surface as StoreError.
    """
    try:
        conn = conn_factory.connect()
    except conn_factory.error_types as exc:
        raise StoreError(f"could not acquire a connection: {exc}") from exc

    try:
        cur = conn_factory.cursor(conn)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except conn_factory.error_types as exc:
        _rollback(conn_factory, conn)
        raise StoreError(str(exc)) from exc
    except Exception:
        _rollback(conn_factory, conn)
        raise
    finally:
        conn_factory.release(conn)


def execute(cur, sql: str, params: Sequence[Any] = ()) -> None:
    start = time.perf_counter()
    # No params: skip driver-side %-interpolation entirely.
    cur.execute(sql, tuple(params) if params else None)
    logger.debug(
        "Executed query %s (duration=%.1fms rows=%s)",
        " ".join(sql.split()),
        (time.perf_counter() - start) * 1000,
        cur.rowcount,
    )


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]
