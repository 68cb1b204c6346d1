from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence, Union

from .admin.gate import AdminGate
from .attendance.model import AttendanceRecord, RecordFilter, RecordUpdate
from .attendance.service import AttendanceLedger
from .common.updates import UNSET, UnsetType
from .common.validators import require_non_empty, require_optional_str, require_record_type
from .core.constants import UNKNOWN_EMPLOYEE_NAME
from .core.enums import RecordType
from .employees.model import Employee, EmployeeUpdate
from .employees.service import EmployeeStore
from .export.service import ExportProjector
from .stats.model import DailyStats
from .stats.service import StatsAggregator

logger = logging.getLogger(__name__)


class AttendanceBackend:
    """Operations consumed by the kiosk/admin interface.

    Admin checks happen in the interface layer (``verify_admin_password``)
    before the mutating calls below are made; kiosk check-in/out is open.
    """

    def __init__(
        self,
        employees: EmployeeStore,
        ledger: AttendanceLedger,
        stats: StatsAggregator,
        exporter: ExportProjector,
        gate: AdminGate,
    ):
        self._employees = employees
        self._ledger = ledger
        self._stats = stats
        self._exporter = exporter
        self._gate = gate

    # Employees

    def create_employee(self, employee_id: str, name: str) -> Employee:
        return self._employees.create(employee_id, name)

    def update_employee(
        self,
        employee_id: str,
        *,
        name: Union[str, UnsetType] = UNSET,
        active: Union[bool, UnsetType] = UNSET,
    ) -> Employee:
        return self._employees.update(employee_id, EmployeeUpdate(name=name, active=active))

    def delete_employee(self, employee_id: str) -> None:
        self._employees.delete(employee_id)

    def list_employees(self, active_only: bool = False) -> Sequence[Employee]:
        return self._employees.list(active_only)

    # Kiosk

    def check_in(self, employee_id: str, employee_name: Optional[str] = None) -> AttendanceRecord:
        return self._record_kiosk_event(employee_id, RecordType.ENTRY, employee_name)

    def check_out(self, employee_id: str, employee_name: Optional[str] = None) -> AttendanceRecord:
        return self._record_kiosk_event(employee_id, RecordType.EXIT, employee_name)

    def _record_kiosk_event(
        self, employee_id: str, record_type: RecordType, employee_name: Optional[str]
    ) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "Employee id")
        snapshot = self._resolve_name(employee_id, employee_name)
        return self._ledger.record_event(employee_id, record_type, employee_name=snapshot)

    def _resolve_name(self, employee_id: str, employee_name: Optional[str]) -> str:
        employee_name = require_optional_str(employee_name, "Employee name")
        if employee_name and employee_name.strip():
            return employee_name.strip()
        employee = self._employees.get(employee_id)
        if employee:
            return employee.name
        logger.info("Kiosk event for unknown employee %s", employee_id)
        return UNKNOWN_EMPLOYEE_NAME.format(employee_id=employee_id)

    # Records

    def get_records(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
        type: Optional[Union[RecordType, str]] = None,
        *,
        newest_first: bool = False,
    ) -> Sequence[AttendanceRecord]:
        return self._ledger.query(
            RecordFilter(
                start_date=start_date,
                end_date=end_date,
                employee_id=employee_id or None,
                type=require_record_type(type) if type else None,
                newest_first=newest_first,
            )
        )

    def update_record(
        self,
        record_id: int,
        *,
        timestamp: Union[datetime, UnsetType] = UNSET,
        type: Union[RecordType, str, UnsetType] = UNSET,
        notes: Union[Optional[str], UnsetType] = UNSET,
    ) -> AttendanceRecord:
        return self._ledger.update_record(record_id, RecordUpdate(timestamp=timestamp, type=type, notes=notes))

    def delete_record(self, record_id: int) -> None:
        self._ledger.delete_record(record_id)

    def get_daily_stats(self) -> DailyStats:
        return self._stats.daily_stats()

    def export_to_excel(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
        type: Optional[Union[RecordType, str]] = None,
    ) -> str:
        records = self.get_records(start_date, end_date, employee_id, type)
        return str(self._exporter.export(records))

    # Admin

    def verify_admin_password(self, password: str) -> bool:
        return self._gate.verify(password)
