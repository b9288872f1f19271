from __future__ import annotations

import logging

import pytest

from src.hr_records.hr_records.core.enums import LeaveStatus, LeaveType
from src.hr_records.hr_records.core.exceptions import NotFoundError, StoreError, ValidationError
from src.hr_records.hr_records.leave_attendance.model import LEAVE_SCHEMA, LeaveRecord
from src.hr_records.hr_records.payroll.model import PAYROLL_SCHEMA, PayrollRecord
from src.hr_records.hr_records.records.service import RecordService


class FakeRecordsRepo:
    def __init__(self, model):
        self._model = model
        self._rows: dict[int, dict] = {}
        self._next_id = 1
        self.calls: list[str] = []
        self.last_values = None

    def list_all(self):
        self.calls.append("list_all")
        return [self._model.from_row(r) for r in self._rows.values()]

    def get(self, *, record_id):
        self.calls.append("get")
        row = self._rows.get(record_id)
        return self._model.from_row(row) if row else None

    def create(self, *, values):
        self.calls.append("create")
        self.last_values = dict(values)
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = {"id": rid, **values}
        return self._model.from_row(self._rows[rid])

    def replace(self, *, record_id, values):
        self.calls.append("replace")
        self.last_values = dict(values)
        if record_id not in self._rows:
            return None
        self._rows[record_id] = {"id": record_id, **values}
        return self._model.from_row(self._rows[record_id])

    def delete(self, *, record_id):
        self.calls.append("delete")
        return self._rows.pop(record_id, None) is not None

    def count(self):
        return len(self._rows)


class BrokenRepo:
    def list_all(self):
        raise StoreError('relation "leave_attendance" does not exist')

    def create(self, *, values):
        raise StoreError("connection refused")


LEAVE = {
    "date": "2024-03-01",
    "status": LeaveStatus.PENDING.value,
    "type": LeaveType.VACATION.value,
    "duration": 2,
    "assigned_to": "Jane Doe",
    "comment": "Spring break",
}


def test_create_assigns_distinct_ids_and_defaults_optional_to_none():
    repo = FakeRecordsRepo(LeaveRecord)
    svc = RecordService(repo, LEAVE_SCHEMA)

    first = svc.create({k: v for k, v in LEAVE.items() if k != "comment"})
    second = svc.create(LEAVE)

    assert first.id != second.id
    assert first.comment is None
    assert repo.last_values == LEAVE


@pytest.mark.parametrize("missing", LEAVE_SCHEMA.required)
def test_create_missing_required_field_persists_nothing(missing):
    repo = FakeRecordsRepo(LeaveRecord)
    svc = RecordService(repo, LEAVE_SCHEMA)

    body = {k: v for k, v in LEAVE.items() if k != missing}
    with pytest.raises(ValidationError, match="Missing required fields"):
        svc.create(body)

    assert repo.count() == 0
    assert repo.calls == []


def test_create_rejects_non_object_body():
    svc = RecordService(FakeRecordsRepo(LeaveRecord), LEAVE_SCHEMA)
    with pytest.raises(ValidationError):
        svc.create(None)


def test_create_ignores_unknown_keys_and_client_id():
    repo = FakeRecordsRepo(LeaveRecord)
    svc = RecordService(repo, LEAVE_SCHEMA)

    rec = svc.create({**LEAVE, "id": 999, "approved_by": "boss"})

    assert rec.id == 1
    assert set(repo.last_values) == set(LEAVE_SCHEMA.columns)


def test_payroll_salary_zero_is_present():
    svc = RecordService(FakeRecordsRepo(PayrollRecord), PAYROLL_SCHEMA)
    body = {
        "name": "Intern",
        "ssn": "000-00-0000",
        "address": "Somewhere",
        "occupation": "Intern",
        "gender": "other",
        "hire_date": "2024-06-01",
        "salary": 0,
    }

    rec = svc.create(body)
    assert rec.salary == 0

    with pytest.raises(ValidationError):
        svc.create({k: v for k, v in body.items() if k != "salary"})


def test_update_is_full_replace_not_patch():
    repo = FakeRecordsRepo(LeaveRecord)
    svc = RecordService(repo, LEAVE_SCHEMA)
    rec = svc.create(LEAVE)

    changed = svc.update(str(rec.id), {**LEAVE, "status": LeaveStatus.APPROVED.value})
    assert changed.to_dict() == {**rec.to_dict(), "status": LeaveStatus.APPROVED.value}

    # Omitting a field nulls it instead of keeping the old value.
    body = {k: v for k, v in LEAVE.items() if k != "comment"}
    replaced = svc.update(rec.id, body)
    assert replaced.comment is None
    assert repo.last_values["comment"] is None


def test_get_update_delete_unknown_id_raise_not_found():
    svc = RecordService(FakeRecordsRepo(LeaveRecord), LEAVE_SCHEMA)

    with pytest.raises(NotFoundError, match="Leave record not found"):
        svc.get("42")
    with pytest.raises(NotFoundError):
        svc.update("42", LEAVE)
    with pytest.raises(NotFoundError):
        svc.delete("42")


def test_invalid_id_fails_before_store_access():
    repo = FakeRecordsRepo(LeaveRecord)
    svc = RecordService(repo, LEAVE_SCHEMA)

    for call in (lambda: svc.get("abc"), lambda: svc.update("abc", LEAVE), lambda: svc.delete("abc")):
        with pytest.raises(ValidationError, match="Invalid ID"):
            call()

    assert repo.calls == []


def test_delete_then_get_is_not_found():
    svc = RecordService(FakeRecordsRepo(LeaveRecord), LEAVE_SCHEMA)
    rec = svc.create(LEAVE)

    svc.delete(rec.id)

    with pytest.raises(NotFoundError):
        svc.get(rec.id)


def test_store_errors_are_logged_and_masked(caplog):
    svc = RecordService(BrokenRepo(), LEAVE_SCHEMA)

    with caplog.at_level(logging.ERROR):
        with pytest.raises(StoreError) as exc_info:
            svc.list_all()

    assert str(exc_info.value) == "Failed to fetch leave records"
    assert "does not exist" not in str(exc_info.value)
    assert "Error fetching leave records" in caplog.text

    with pytest.raises(StoreError, match="Failed to create leave record"):
        svc.create(LEAVE)
