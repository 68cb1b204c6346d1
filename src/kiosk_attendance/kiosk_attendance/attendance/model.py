from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import start_of_day, start_of_next_day
from ..common.updates import UNSET, UnsetType, is_set
from ..core.enums import RecordType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one entry/exit event in the ledger.

    ``employee_id`` is a soft reference and ``employee_name`` is the roster
    name captured when the event was recorded.
    """

    id: int
    employee_id: str
    employee_name: Optional[str]
    timestamp: datetime
    type: RecordType
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    @property
    def sort_key(self) -> tuple[datetime, int]:
        return self.timestamp, self.id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "timestamp": self.timestamp.isoformat(sep=" "),
            "type": self.type.value,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(sep=" "),
            "updated_at": self.updated_at.isoformat(sep=" "),
        }


@dataclass(frozen=True)
class RecordFilter:
    """Conjunctive query filter; ``None`` fields do not constrain the result.

    Date bounds are inclusive and apply to the local date of ``timestamp``.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    employee_id: Optional[str] = None
    type: Optional[RecordType] = None
    newest_first: bool = False

    def timestamp_bounds(self) -> tuple[Optional[datetime], Optional[datetime]]:
        """Half-open ``[lower, upper)`` timestamp range equivalent to the date bounds."""
        lower = start_of_day(self.start_date) if self.start_date else None
        upper = start_of_next_day(self.end_date) if self.end_date else None
        return lower, upper


@dataclass(frozen=True)
class RecordUpdate:
    """Admin correction of a record; ``employee_id`` and the name snapshot are fixed."""

    timestamp: Union[datetime, UnsetType] = field(default=UNSET)
    type: Union[RecordType, UnsetType] = field(default=UNSET)
    notes: Union[Optional[str], UnsetType] = field(default=UNSET)

    def is_empty(self) -> bool:
        return not (is_set(self.timestamp) or is_set(self.type) or is_set(self.notes))
