from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..attendance.model import RecordFilter
from ..attendance.service import AttendanceLedger
from ..common.datetime_utils import now_local
from ..core.enums import RecordType
from .model import DailyStats


class StatsAggregator:
    """Derives daily summaries from the ledger.

    Recomputed on every call because records can be edited or deleted at any
    time; nothing is cached between calls.
    """

    def __init__(self, ledger: AttendanceLedger, *, clock: Callable = now_local):
        self._ledger = ledger
        self._clock = clock

    def daily_stats(self, now: Optional[datetime] = None) -> DailyStats:
        today = (now or self._clock()).date()
        records = self._ledger.query(RecordFilter(start_date=today, end_date=today))

        entries = sum(1 for r in records if r.type == RecordType.ENTRY)
        exits = sum(1 for r in records if r.type == RecordType.EXIT)
        employees = {r.employee_id for r in records}
        last = max(records, key=lambda r: r.sort_key) if records else None

        return DailyStats(
            total_entries=entries,
            total_exits=exits,
            unique_employees_present=len(employees),
            last_activity=last,
        )
