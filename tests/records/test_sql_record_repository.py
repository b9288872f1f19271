from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.hr_records.hr_records.core.enums import StoreBackend
from src.hr_records.hr_records.core.exceptions import StoreError
from src.hr_records.hr_records.leave_attendance.model import LEAVE_SCHEMA, LeaveRecord
from src.hr_records.hr_records.onboarding.model import ONBOARDING_SCHEMA, OnboardingTask
from src.hr_records.hr_records.records.sql_record_repository import SQLRecordRepository


class FakeDriverError(Exception):
    pass


class FakeCursor:
    def __init__(self, results=(), *, lastrowid=None, rowcount=1, fail_with=None):
        self._results = list(results)
        self.executed: list[tuple[str, object]] = []
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.closed = False
        self._fail_with = fail_with

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        if self._fail_with is not None:
            raise self._fail_with

    def fetchone(self):
        return self._results.pop(0)

    def fetchall(self):
        return self._results.pop(0)

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeConnFactory:
    error_types = (FakeDriverError,)

    def __init__(self, cursor: FakeCursor, *, backend=StoreBackend.POSTGRES):
        self.backend = backend
        self.supports_returning = backend == StoreBackend.POSTGRES
        self.conn = FakeConn()
        self.cursor_obj = cursor
        self.released = 0

    def connect(self):
        return self.conn

    def cursor(self, conn):
        return self.cursor_obj

    def release(self, conn):
        self.released += 1


ONBOARDING_ROW = {
    "id": 7,
    "task": "Sign NDA",
    "type": "Legal",
    "document_name": None,
    "assigned_to": "HR",
    "name_of_employee": "Jane Doe",
    "due_date": date(2024, 1, 15),
}

ONBOARDING_VALUES = {k: v for k, v in ONBOARDING_ROW.items() if k != "id"} | {"due_date": "2024-01-15"}


def test_list_all_orders_by_resource_sort_key():
    cur = FakeCursor([[{"id": 1, "date": date(2024, 2, 1), "status": "pending", "type": "sick",
                        "duration": Decimal("1.5"), "assigned_to": "A", "comment": None}]])
    factory = FakeConnFactory(cur)
    repo = SQLRecordRepository(factory, LEAVE_SCHEMA, LeaveRecord)

    rows = repo.list_all()

    sql, _ = cur.executed[0]
    assert "FROM leave_attendance" in sql
    assert sql.endswith("ORDER BY date DESC, id ASC")
    assert rows[0].duration == 1.5
    assert rows[0].date == "2024-02-01"
    assert factory.released == 1


def test_postgres_create_uses_returning_and_positional_params():
    cur = FakeCursor([ONBOARDING_ROW])
    factory = FakeConnFactory(cur)
    repo = SQLRecordRepository(factory, ONBOARDING_SCHEMA, OnboardingTask)

    task = repo.create(values=ONBOARDING_VALUES)

    sql, params = cur.executed[0]
    assert sql.startswith("INSERT INTO employee_onboarding(task, type, document_name, assigned_to, name_of_employee, due_date)")
    assert "RETURNING id, task" in sql
    assert params == ("Sign NDA", "Legal", None, "HR", "Jane Doe", "2024-01-15")
    assert task.id == 7
    assert task.due_date == "2024-01-15"
    assert factory.conn.commits == 1
    assert cur.closed


def test_mysql_create_reads_row_back_by_lastrowid():
    cur = FakeCursor([ONBOARDING_ROW], lastrowid=7)
    factory = FakeConnFactory(cur, backend=StoreBackend.MYSQL)
    repo = SQLRecordRepository(factory, ONBOARDING_SCHEMA, OnboardingTask)

    task = repo.create(values=ONBOARDING_VALUES)

    insert_sql, _ = cur.executed[0]
    select_sql, select_params = cur.executed[1]
    assert "RETURNING" not in insert_sql
    assert select_sql.startswith("SELECT id, task")
    assert select_params == (7,)
    assert task.id == 7


def test_replace_binds_every_column_then_id():
    cur = FakeCursor([None])
    repo = SQLRecordRepository(FakeConnFactory(cur), ONBOARDING_SCHEMA, OnboardingTask)

    result = repo.replace(record_id=99, values={"task": "Only task"})

    sql, params = cur.executed[0]
    assert sql.startswith(
        "UPDATE employee_onboarding SET task=%s, type=%s, document_name=%s, assigned_to=%s, "
        "name_of_employee=%s, due_date=%s WHERE id=%s"
    )
    assert params == ("Only task", None, None, None, None, None, 99)
    assert result is None


def test_mysql_replace_missing_row_returns_none():
    cur = FakeCursor([None], rowcount=0)
    repo = SQLRecordRepository(FakeConnFactory(cur, backend=StoreBackend.MYSQL), ONBOARDING_SCHEMA, OnboardingTask)

    assert repo.replace(record_id=3, values=ONBOARDING_VALUES) is None
    assert len(cur.executed) == 2


@pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
def test_delete_reports_whether_a_row_was_removed(rowcount, expected):
    cur = FakeCursor(rowcount=rowcount)
    repo = SQLRecordRepository(FakeConnFactory(cur), ONBOARDING_SCHEMA, OnboardingTask)

    assert repo.delete(record_id=5) is expected
    assert cur.executed[0] == ("DELETE FROM employee_onboarding WHERE id=%s", (5,))


def test_count():
    cur = FakeCursor([{"total": 3}])
    repo = SQLRecordRepository(FakeConnFactory(cur), ONBOARDING_SCHEMA, OnboardingTask)

    assert repo.count() == 3


def test_driver_error_rolls_back_releases_and_raises_store_error():
    cur = FakeCursor(fail_with=FakeDriverError("syntax error at or near"))
    factory = FakeConnFactory(cur)
    repo = SQLRecordRepository(factory, ONBOARDING_SCHEMA, OnboardingTask)

    with pytest.raises(StoreError):
        repo.get(record_id=1)

    assert factory.conn.rollbacks == 1
    assert factory.conn.commits == 0
    assert factory.released == 1
    assert cur.closed


def test_connection_failure_raises_store_error():
    class DownFactory(FakeConnFactory):
        def connect(self):
            raise FakeDriverError("could not connect to server")

    factory = DownFactory(FakeCursor())
    repo = SQLRecordRepository(factory, ONBOARDING_SCHEMA, OnboardingTask)

    with pytest.raises(StoreError):
        repo.list_all()
    assert factory.released == 0
