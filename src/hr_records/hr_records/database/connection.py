from __future__ import annotations

import threading
import urllib.parse
from dataclasses import dataclass
from typing import Any, Optional

import mysql.connector
import mysql.connector.pooling
import psycopg2
import psycopg2.pool
from psycopg2.extras import RealDictCursor

from ..core.constants import DEFAULT_POOL_MAX, DEFAULT_POOL_MIN
from ..core.enums import StoreBackend
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


@dataclass(frozen=True)
class StoreSettings:
    """Backend selection, resolved once at startup."""

    backend: StoreBackend
    database_url: Optional[str] = None
    db: Optional[DBConfig] = None
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    pool_min: int = DEFAULT_POOL_MIN
    pool_max: int = DEFAULT_POOL_MAX

    def describe(self) -> str:
        """Human-readable target without credentials."""
        if self.backend == StoreBackend.SUPABASE:
            return f"supabase {self.supabase_url}"
        if self.backend == StoreBackend.POSTGRES:
            parsed = urllib.parse.urlsplit(self.database_url or "")
            return f"postgres {parsed.hostname}:{parsed.port or 5432}{parsed.path}"
        db = self.db
        return f"mysql {db.user}@{db.host}:{db.port}/{db.database}" if db else "mysql"


def _mysql_config_from_url(url: str) -> DBConfig:
    parsed = urllib.parse.urlsplit(url)
    return DBConfig(
        host=parsed.hostname or "localhost",
        port=int(parsed.port or 3306),
        user=urllib.parse.unquote(parsed.username or "root"),
        password=urllib.parse.unquote(parsed.password or ""),
        database=parsed.path.lstrip("/") or "hr_records",
    )


def _mysql_config_from_dict(db_config: dict) -> DBConfig:
    return DBConfig(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "hr_records")),
    )


def resolve_store_settings(settings: Any) -> StoreSettings:
    """Pick the backend from a settings module.

    A Supabase URL wins over DATABASE_URL. With neither, fall back to the
    MySQL ``DB_CONFIG`` dictionary.
    """
    pool_min = int(getattr(settings, "DB_POOL_MIN", DEFAULT_POOL_MIN))
    pool_max = int(getattr(settings, "DB_POOL_MAX", DEFAULT_POOL_MAX))

    supabase_url = getattr(settings, "SUPABASE_URL", None)
    if supabase_url:
        supabase_key = getattr(settings, "SUPABASE_KEY", None)
        if not supabase_key:
            raise ConfigurationError("SUPABASE_URL is set but SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_KEY) is missing")
        return StoreSettings(
            backend=StoreBackend.SUPABASE,
            supabase_url=str(supabase_url),
            supabase_key=str(supabase_key),
        )

    database_url = getattr(settings, "DATABASE_URL", None)
    if database_url:
        scheme = urllib.parse.urlsplit(database_url).scheme.split("+", 1)[0].lower()
        if scheme in {"postgres", "postgresql"}:
            return StoreSettings(
                backend=StoreBackend.POSTGRES,
                database_url=str(database_url),
                pool_min=pool_min,
                pool_max=pool_max,
            )
        if scheme == "mysql":
            return StoreSettings(
                backend=StoreBackend.MYSQL,
                db=_mysql_config_from_url(database_url),
                pool_min=pool_min,
                pool_max=pool_max,
            )
        raise ConfigurationError(f"Unsupported DATABASE_URL scheme: {scheme!r}")

    db_config = getattr(settings, "DB_CONFIG", None)
    if not db_config:
        raise ConfigurationError(
            "No database configuration found. Set DATABASE_URL, SUPABASE_URL or the DB_* variables."
        )
    return StoreSettings(
        backend=StoreBackend.MYSQL,
        db=_mysql_config_from_dict(db_config),
        pool_min=pool_min,
        pool_max=pool_max,
    )


class DatabaseConnection:
    """Process-wide connection pool for the SQL backends.

    The pool is created on first use and shared by every repository.
    """

    error_types: tuple = (mysql.connector.Error, psycopg2.Error)

    def __init__(self, settings: StoreSettings):
        if settings.backend == StoreBackend.SUPABASE:
            raise ConfigurationError("DatabaseConnection serves SQL backends only")
        self._settings = settings
        self._pool: Any = None
        self._lock = threading.Lock()

    @property
    def backend(self) -> StoreBackend:
        return self._settings.backend

    @property
    def supports_returning(self) -> bool:
        return self._settings.backend == StoreBackend.POSTGRES

    def _get_pool(self):
        with self._lock:
            if self._pool is None:
                self._pool = self._create_pool()
            return self._pool

    def _create_pool(self):
        s = self._settings
        if s.backend == StoreBackend.POSTGRES:
            return psycopg2.pool.ThreadedConnectionPool(s.pool_min, s.pool_max, dsn=s.database_url)

        db = s.db
        return mysql.connector.pooling.MySQLConnectionPool(
            pool_name="hr_records",
            # mysql-connector caps pools at 32 connections.
            pool_size=max(1, min(s.pool_max, 32)),
            host=db.host,
            port=int(db.port),
            user=db.user,
            password=db.password,
            database=db.database,
        )

    def connect(self):
        pool = self._get_pool()
        if self.backend == StoreBackend.POSTGRES:
            return pool.getconn()
        return pool.get_connection()

    def cursor(self, conn):
        if self.backend == StoreBackend.POSTGRES:
            return conn.cursor(cursor_factory=RealDictCursor)
        return conn.cursor(dictionary=True)

    def release(self, conn) -> None:
        if self.backend == StoreBackend.POSTGRES:
            pool = self._pool
            if pool is None:
                conn.close()
                return
            pool.putconn(conn, close=bool(conn.closed))
        else:
            # Closing a pooled MySQL connection hands it back to the pool.
            conn.close()

    def close(self) -> None:
        with self._lock:
            pool, self._pool = self._pool, None
        if pool is not None and self.backend == StoreBackend.POSTGRES:
            pool.closeall()
