from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local, truncate_to_seconds
from ..common.updates import UNSET, is_set
from ..common.validators import require_non_empty, require_optional_str, require_record_type
from ..core.enums import RecordType
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceRecord, RecordFilter, RecordUpdate
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Owns attendance events.

    The ledger never looks employees up: callers pass the name snapshot, and
    ``employee_id`` is accepted whether or not it is on the roster.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Callable = now_local):
        self._attendance = attendance
        self._clock = clock

    def record_event(
        self,
        employee_id: str,
        type: RecordType | str,
        employee_name: Optional[str] = None,
        timestamp: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "Employee id")
        record_type = require_record_type(type)
        employee_name = require_optional_str(employee_name, "Employee name")
        notes = require_optional_str(notes, "Notes")
        if timestamp is not None and not isinstance(timestamp, datetime):
            raise ValidationError("Timestamp must be a datetime")

        now = self._clock()
        record = self._attendance.create(
            employee_id=employee_id,
            employee_name=employee_name,
            timestamp=truncate_to_seconds(timestamp) if timestamp is not None else now,
            type=record_type,
            notes=notes,
            now=now,
        )
        logger.info("Recorded %s #%d for employee %s", record.type.value, record.id, record.employee_id)
        return record

    def update_record(self, record_id: int, changes: RecordUpdate) -> AttendanceRecord:
        if changes.is_empty():
            raise ValidationError("No fields to update")
        if is_set(changes.timestamp) and not isinstance(changes.timestamp, datetime):
            raise ValidationError("Timestamp must be a datetime")
        changes = RecordUpdate(
            timestamp=truncate_to_seconds(changes.timestamp) if is_set(changes.timestamp) else UNSET,
            type=require_record_type(changes.type) if is_set(changes.type) else UNSET,
            notes=require_optional_str(changes.notes, "Notes") if is_set(changes.notes) else UNSET,
        )

        record = self._attendance.update(int(record_id), changes, now=self._clock())
        if record is None:
            raise NotFoundError(f"Attendance record {record_id} not found")
        logger.info("Updated attendance record #%d", record.id)
        return record

    def delete_record(self, record_id: int) -> None:
        if not self._attendance.delete_by_id(int(record_id)):
            raise NotFoundError(f"Attendance record {record_id} not found")
        logger.info("Deleted attendance record #%d", int(record_id))

    def get(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_by_id(int(record_id))

    def query(self, record_filter: Optional[RecordFilter] = None) -> Sequence[AttendanceRecord]:
        record_filter = record_filter or RecordFilter()
        if record_filter.start_date and record_filter.end_date and record_filter.start_date > record_filter.end_date:
            raise ValidationError("Start date must not be after end date")
        return self._attendance.find(record_filter)
