from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class DailyStats:
    """Summary of one local calendar day; derived on demand, never stored."""

    total_entries: int
    total_exits: int
    unique_employees_present: int
    last_activity: Optional[AttendanceRecord] = None

    def to_dict(self) -> dict:
        return {
            "total_entries": self.total_entries,
            "total_exits": self.total_exits,
            "unique_employees_present": self.unique_employees_present,
            "last_activity": self.last_activity.to_dict() if self.last_activity else None,
        }
