from __future__ import annotations

import atexit
import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .core.enums import StoreBackend
from .database.bootstrap import DATABASE_DIR, apply_schema, apply_seed_sql, list_tables, schema_path_for
from .database.connection import resolve_store_settings

from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .leave_attendance.controller import register as register_leave_attendance
from .leave_attendance.model import LEAVE_SCHEMA
from .onboarding.controller import register as register_onboarding
from .onboarding.model import ONBOARDING_SCHEMA
from .payroll.controller import register as register_payroll
from .payroll.model import PAYROLL_SCHEMA

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def _bootstrap_store(container: Container, *, auto_init_db: bool, auto_seed_db: bool) -> None:
    conn = container.store
    if auto_init_db:
        apply_schema(conn, schema_path=schema_path_for(conn.backend))
        logger.info("Schema ready (tables=%d)", len(list_tables(conn)))
    if auto_seed_db:
        apply_seed_sql(
            conn,
            seed_path=DATABASE_DIR / "seed.sql",
            only_if_empty=(ONBOARDING_SCHEMA.table, LEAVE_SCHEMA.table, PAYROLL_SCHEMA.table),
        )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

    if container is None:
        store_settings = resolve_store_settings(settings)
        logger.info("settings=%s store=%s", settings_module, store_settings.describe())

        container = build_container(store_settings=store_settings)
        atexit.register(container.close)

        if store_settings.backend != StoreBackend.SUPABASE:
            _bootstrap_store(
                container,
                auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
                auto_seed_db=bool(getattr(settings, "AUTO_SEED_DB", False)),
            )

    app.extensions["hr_records"] = container

    register_onboarding(app, container)
    register_leave_attendance(app, container)
    register_payroll(app, container)
    register_dashboard(app, container)
    _register_error_handlers(app)

    return app


def run() -> None:
    app = create_app()
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "5000")),
        debug=bool(app.config["DEBUG"]),
    )
