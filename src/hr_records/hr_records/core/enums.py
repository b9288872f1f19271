from __future__ import annotations

from enum import Enum


class StoreBackend(str, Enum):
    """Backing store selected once at process start."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SUPABASE = "supabase"


class LeaveStatus(str, Enum):
    """Leave request states offered by the UI. Not enforced by the API."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveType(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
