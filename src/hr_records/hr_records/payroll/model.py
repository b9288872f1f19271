from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.serialization import as_bool, as_int, as_number, iso_date
from ..records.model import Record
from ..records.schema import ResourceSchema


@dataclass(frozen=True)
class PayrollRecord(Record):
    id: int
    name: Optional[str]
    ssn: Optional[str]
    address: Optional[str]
    occupation: Optional[str]
    gender: Optional[str]
    hire_date: Optional[str]
    salary: Optional[float]
    regular_hourly_rate: Optional[float]
    overtime_hourly_rate: Optional[float]
    exempt_from_overtime: Optional[bool]
    federal_allowances: Optional[int]
    retirement_contribution: Optional[float]
    insurance_deduction: Optional[float]
    other_deductions: Optional[float]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PayrollRecord":
        return cls(
            id=as_int(row["id"]),
            name=row.get("name"),
            ssn=row.get("ssn"),
            address=row.get("address"),
            occupation=row.get("occupation"),
            gender=row.get("gender"),
            hire_date=iso_date(row.get("hire_date")),
            salary=as_number(row.get("salary")),
            regular_hourly_rate=as_number(row.get("regular_hourly_rate")),
            overtime_hourly_rate=as_number(row.get("overtime_hourly_rate")),
            exempt_from_overtime=as_bool(row.get("exempt_from_overtime")),
            federal_allowances=as_int(row.get("federal_allowances")),
            retirement_contribution=as_number(row.get("retirement_contribution")),
            insurance_deduction=as_number(row.get("insurance_deduction")),
            other_deductions=as_number(row.get("other_deductions")),
        )


PAYROLL_SCHEMA = ResourceSchema(
    table="payroll",
    columns=(
        "name",
        "ssn",
        "address",
        "occupation",
        "gender",
        "hire_date",
        "salary",
        "regular_hourly_rate",
        "overtime_hourly_rate",
        "exempt_from_overtime",
        "federal_allowances",
        "retirement_contribution",
        "insurance_deduction",
        "other_deductions",
    ),
    required=("name", "ssn", "address", "occupation", "gender", "hire_date", "salary"),
    order_by="name",
    singular="payroll record",
    plural="payroll records",
    zero_allowed=("salary",),
)
