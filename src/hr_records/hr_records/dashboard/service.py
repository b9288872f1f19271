from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from ..core.exceptions import StoreError
from ..records.repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardMetrics:
    onboarding: int
    leave: int
    payroll: int

    def to_dict(self) -> dict:
        return asdict(self)


class DashboardService:
    def __init__(self, onboarding: RecordRepository, leave: RecordRepository, payroll: RecordRepository):
        self._onboarding = onboarding
        self._leave = leave
        self._payroll = payroll

    def metrics(self) -> DashboardMetrics:
        """Row count per resource."""
        try:
            return DashboardMetrics(
                onboarding=self._onboarding.count(),
                leave=self._leave.count(),
                payroll=self._payroll.count(),
            )
        except StoreError as exc:
            logger.exception("Error loading dashboard metrics")
            raise StoreError("Failed to load dashboard metrics") from exc
