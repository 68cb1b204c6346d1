from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RecordType
from .model import AttendanceRecord, RecordFilter, RecordUpdate


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

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
        """Insert a record under the next id and return it as stored."""

        raise NotImplementedError

    def update(self, record_id: int, changes: RecordUpdate, *, now: datetime) -> Optional[AttendanceRecord]:
        """Apply the set fields of ``changes``; returns None if the id is unknown."""

        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError

    def find(self, record_filter: RecordFilter) -> Sequence[AttendanceRecord]:
        """Matching records ordered by (timestamp, id), reversed when ``newest_first``."""

        raise NotImplementedError
