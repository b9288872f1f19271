from __future__ import annotations

from flask import Flask

from ..container import Container
from ..records.controller import register_record_routes


def register(app: Flask, container: Container) -> None:
    register_record_routes(app, container.leave_service, resource="leave-attendance", endpoint="leave_attendance")
