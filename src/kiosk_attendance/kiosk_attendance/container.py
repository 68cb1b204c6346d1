from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.gate import AdminGate
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceLedger
from .backend import AttendanceBackend
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeStore
from .export.service import ExportProjector
from .stats.service import StatsAggregator


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository

    employee_store: EmployeeStore
    ledger: AttendanceLedger
    stats: StatsAggregator
    exporter: ExportProjector
    admin_gate: AdminGate
    backend: AttendanceBackend


def build_container(
    *,
    db_config: dict,
    admin_password: str = DEFAULT_ADMIN_PASSWORD,
    export_dir: Optional[str] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    employee_store = EmployeeStore(employees_repo)
    ledger = AttendanceLedger(attendance_repo)
    stats = StatsAggregator(ledger)
    exporter = ExportProjector(export_dir=export_dir)
    admin_gate = AdminGate(admin_password)
    backend = AttendanceBackend(employee_store, ledger, stats, exporter, admin_gate)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_store=employee_store,
        ledger=ledger,
        stats=stats,
        exporter=exporter,
        admin_gate=admin_gate,
        backend=backend,
    )
