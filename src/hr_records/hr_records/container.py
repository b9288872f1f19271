from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.enums import StoreBackend
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, StoreSettings
from .database.supabase_client import create_admin_client
from .leave_attendance.model import LEAVE_SCHEMA, LeaveRecord
from .onboarding.model import ONBOARDING_SCHEMA, OnboardingTask
from .payroll.model import PAYROLL_SCHEMA, PayrollRecord
from .records.repository import RecordRepository
from .records.service import RecordService
from .records.sql_record_repository import SQLRecordRepository
from .records.supabase_record_repository import SupabaseRecordRepository


@dataclass(frozen=True)
class Container:
    # Shared store handle: a DatabaseConnection pool or a Supabase client.
    store: Any

    onboarding_repo: RecordRepository
    leave_repo: RecordRepository
    payroll_repo: RecordRepository

    onboarding_service: RecordService
    leave_service: RecordService
    payroll_service: RecordService
    dashboard_service: DashboardService

    def close(self) -> None:
        if isinstance(self.store, DatabaseConnection):
            self.store.close()


def build_container_from_repositories(
    *,
    onboarding_repo: RecordRepository,
    leave_repo: RecordRepository,
    payroll_repo: RecordRepository,
    store: Optional[Any] = None,
) -> Container:
    return Container(
        store=store,
        onboarding_repo=onboarding_repo,
        leave_repo=leave_repo,
        payroll_repo=payroll_repo,
        onboarding_service=RecordService(onboarding_repo, ONBOARDING_SCHEMA),
        leave_service=RecordService(leave_repo, LEAVE_SCHEMA),
        payroll_service=RecordService(payroll_repo, PAYROLL_SCHEMA),
        dashboard_service=DashboardService(onboarding_repo, leave_repo, payroll_repo),
    )


def build_container(*, store_settings: StoreSettings) -> Container:
    if store_settings.backend == StoreBackend.SUPABASE:
        client = create_admin_client(store_settings)
        return build_container_from_repositories(
            store=client,
            onboarding_repo=SupabaseRecordRepository(client, ONBOARDING_SCHEMA, OnboardingTask),
            leave_repo=SupabaseRecordRepository(client, LEAVE_SCHEMA, LeaveRecord),
            payroll_repo=SupabaseRecordRepository(client, PAYROLL_SCHEMA, PayrollRecord),
        )

    conn = DatabaseConnection(store_settings)
    return build_container_from_repositories(
        store=conn,
        onboarding_repo=SQLRecordRepository(conn, ONBOARDING_SCHEMA, OnboardingTask),
        leave_repo=SQLRecordRepository(conn, LEAVE_SCHEMA, LeaveRecord),
        payroll_repo=SQLRecordRepository(conn, PAYROLL_SCHEMA, PayrollRecord),
    )
