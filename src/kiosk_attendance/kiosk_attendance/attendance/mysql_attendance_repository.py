from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.updates import is_set
from ..core.enums import RecordType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, RecordFilter, RecordUpdate
from .repository import AttendanceRepository

_COLUMNS = "id, employee_id, employee_name, `timestamp`, `type`, notes, created_at, updated_at"


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(row["id"]),
        employee_id=row["employee_id"],
        employee_name=row.get("employee_name"),
        timestamp=row["timestamp"],
        type=RecordType(row["type"]),
        notes=row.get("notes"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def build_where(record_filter: RecordFilter) -> tuple[str, list[object]]:
    """Translate a filter into a WHERE clause (always valid, '1=1' when empty)."""
    clauses = ["1=1"]
    params: list[object] = []

    lower, upper = record_filter.timestamp_bounds()
    if lower is not None:
        clauses.append("`timestamp` >= %s")
        params.append(lower)
    if upper is not None:
        clauses.append("`timestamp` < %s")
        params.append(upper)
    if record_filter.employee_id is not None:
        clauses.append("employee_id=%s")
        params.append(record_filter.employee_id)
    if record_filter.type is not None:
        clauses.append("`type`=%s")
        params.append(record_filter.type.value)

    return " AND ".join(clauses), params


def build_order_by(record_filter: RecordFilter) -> str:
    direction = "DESC" if record_filter.newest_first else "ASC"
    return f"`timestamp` {direction}, id {direction}"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s", (int(record_id),))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create(
        self,
        *,
        employee_id: str,
        employee_name: Optional[str],
        timestamp: datetime,
        type: RecordType,
        notes: Optional[str],
        now: datetime,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, employee_name, `timestamp`, `type`, notes, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_id, employee_name, timestamp, type.value, notes, now, now),
            )
            record_id = int(cur.lastrowid)
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s", (record_id,))
            return _to_record(fetchone(cur))

    def update(self, record_id: int, changes: RecordUpdate, *, now: datetime) -> Optional[AttendanceRecord]:
        sets: list[str] = []
        params: list[object] = []
        if is_set(changes.timestamp):
            sets.append("`timestamp`=%s")
            params.append(changes.timestamp)
        if is_set(changes.type):
            sets.append("`type`=%s")
            params.append(changes.type.value)
        if is_set(changes.notes):
            sets.append("notes=%s")
            params.append(changes.notes)
        sets.append("updated_at=%s")
        params.append(now)
        params.append(int(record_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM attendance_records WHERE id=%s FOR UPDATE", (int(record_id),))
            if not fetchone(cur):
                return None
            cur.execute(f"UPDATE attendance_records SET {', '.join(sets)} WHERE id=%s", tuple(params))
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s", (int(record_id),))
            return _to_record(fetchone(cur))

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

    def find(self, record_filter: RecordFilter) -> Sequence[AttendanceRecord]:
        where, params = build_where(record_filter)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY {build_order_by(record_filter)}
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
