from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.serialization import as_int, as_number, iso_date
from ..records.model import Record
from ..records.schema import ResourceSchema


@dataclass(frozen=True)
class LeaveRecord(Record):
    """A leave/attendance entry.

    ``status`` and ``type`` normally hold LeaveStatus / LeaveType values, but
    any string is stored as sent. ``duration`` is in days.
    """

    id: int
    date: Optional[str]
    status: Optional[str]
    type: Optional[str]
    duration: Optional[float]
    assigned_to: Optional[str]
    comment: Optional[str]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LeaveRecord":
        return cls(
            id=as_int(row["id"]),
            date=iso_date(row.get("date")),
            status=row.get("status"),
            type=row.get("type"),
            duration=as_number(row.get("duration")),
            assigned_to=row.get("assigned_to"),
            comment=row.get("comment"),
        )


LEAVE_SCHEMA = ResourceSchema(
    table="leave_attendance",
    columns=("date", "status", "type", "duration", "assigned_to", "comment"),
    required=("date", "status", "type", "duration", "assigned_to"),
    order_by="date",
    descending=True,
    singular="leave record",
    plural="leave records",
)
