from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.serialization import as_int, iso_date
from ..records.model import Record
from ..records.schema import ResourceSchema


@dataclass(frozen=True)
class OnboardingTask(Record):
    id: int
    task: Optional[str]
    type: Optional[str]
    document_name: Optional[str]
    assigned_to: Optional[str]
    name_of_employee: Optional[str]
    due_date: Optional[str]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "OnboardingTask":
        return cls(
            id=as_int(row["id"]),
            task=row.get("task"),
            type=row.get("type"),
            document_name=row.get("document_name"),
            assigned_to=row.get("assigned_to"),
            name_of_employee=row.get("name_of_employee"),
            due_date=iso_date(row.get("due_date")),
        )


ONBOARDING_SCHEMA = ResourceSchema(
    table="employee_onboarding",
    columns=("task", "type", "document_name", "assigned_to", "name_of_employee", "due_date"),
    required=("task", "type", "assigned_to", "name_of_employee", "due_date"),
    order_by="due_date",
    singular="onboarding task",
    plural="onboarding tasks",
)
