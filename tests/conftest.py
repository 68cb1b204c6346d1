from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.kiosk_attendance.kiosk_attendance.admin.gate import AdminGate
from src.kiosk_attendance.kiosk_attendance.attendance.model import AttendanceRecord, RecordFilter, RecordUpdate
from src.kiosk_attendance.kiosk_attendance.attendance.service import AttendanceLedger
from src.kiosk_attendance.kiosk_attendance.backend import AttendanceBackend
from src.kiosk_attendance.kiosk_attendance.common.updates import is_set
from src.kiosk_attendance.kiosk_attendance.core.exceptions import DuplicateIdError
from src.kiosk_attendance.kiosk_attendance.employees.model import Employee, EmployeeUpdate
from src.kiosk_attendance.kiosk_attendance.employees.service import EmployeeStore
from src.kiosk_attendance.kiosk_attendance.export.service import ExportProjector
from src.kiosk_attendance.kiosk_attendance.stats.service import StatsAggregator

ADMIN_PASSWORD = "0824"


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class InMemoryEmployees:
    def __init__(self):
        # dicts keep insertion order, matching the seq column ordering
        self._by_id: dict[str, Employee] = {}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def create(self, *, employee_id: str, name: str, now: datetime) -> Employee:
        if employee_id in self._by_id:
            raise DuplicateIdError(f"An employee with id {employee_id!r} already exists")
        employee = Employee(id=employee_id, name=name, active=True, created_at=now, updated_at=now)
        self._by_id[employee_id] = employee
        return employee

    def update(self, employee_id: str, changes: EmployeeUpdate, *, now: datetime) -> Optional[Employee]:
        current = self._by_id.get(employee_id)
        if not current:
            return None
        updated = replace(
            current,
            name=changes.name if is_set(changes.name) else current.name,
            active=changes.active if is_set(changes.active) else current.active,
            updated_at=now,
        )
        self._by_id[employee_id] = updated
        return updated

    def delete_by_id(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None

    def list_all(self, *, active_only: bool = False):
        return [e for e in self._by_id.values() if e.active or not active_only]


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def create(self, *, employee_id, employee_name, timestamp, type, notes, now) -> AttendanceRecord:
        self._id += 1
        record = AttendanceRecord(
            id=self._id,
            employee_id=employee_id,
            employee_name=employee_name,
            timestamp=timestamp,
            type=type,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        self._by_id[record.id] = record
        return record

    def update(self, record_id: int, changes: RecordUpdate, *, now: datetime) -> Optional[AttendanceRecord]:
        current = self._by_id.get(record_id)
        if not current:
            return None
        updated = replace(
            current,
            timestamp=changes.timestamp if is_set(changes.timestamp) else current.timestamp,
            type=changes.type if is_set(changes.type) else current.type,
            notes=changes.notes if is_set(changes.notes) else current.notes,
            updated_at=now,
        )
        self._by_id[record_id] = updated
        return updated

    def delete_by_id(self, record_id: int) -> bool:
        return self._by_id.pop(record_id, None) is not None

    def find(self, record_filter: RecordFilter):
        lower, upper = record_filter.timestamp_bounds()
        items = [
            r
            for r in self._by_id.values()
            if (lower is None or r.timestamp >= lower)
            and (upper is None or r.timestamp < upper)
            and (record_filter.employee_id is None or r.employee_id == record_filter.employee_id)
            and (record_filter.type is None or r.type == record_filter.type)
        ]
        items.sort(key=lambda r: r.sort_key, reverse=record_filter.newest_first)
        return items


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    return FakeClock(fixed_now)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def store(employees_repo, clock) -> EmployeeStore:
    return EmployeeStore(employees_repo, clock=clock)


@pytest.fixture
def ledger(attendance_repo, clock) -> AttendanceLedger:
    return AttendanceLedger(attendance_repo, clock=clock)


@pytest.fixture
def backend(store, ledger, clock, tmp_path) -> AttendanceBackend:
    return AttendanceBackend(
        store,
        ledger,
        StatsAggregator(ledger, clock=clock),
        ExportProjector(export_dir=tmp_path / "exports", clock=clock),
        AdminGate(ADMIN_PASSWORD),
    )
