from __future__ import annotations

from datetime import date, datetime

from src.kiosk_attendance.kiosk_attendance.attendance.model import RecordFilter
from src.kiosk_attendance.kiosk_attendance.attendance.mysql_attendance_repository import build_order_by, build_where
from src.kiosk_attendance.kiosk_attendance.core.enums import RecordType


def test_empty_filter_matches_everything():
    where, params = build_where(RecordFilter())

    assert where == "1=1"
    assert params == []


def test_date_bounds_become_half_open_timestamp_range():
    where, params = build_where(
        RecordFilter(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), employee_id="E1", type=RecordType.EXIT)
    )

    assert where == "1=1 AND `timestamp` >= %s AND `timestamp` < %s AND employee_id=%s AND `type`=%s"
    assert params == [datetime(2024, 1, 1, 0, 0), datetime(2024, 2, 1, 0, 0), "E1", "exit"]


def test_order_by_defaults_to_oldest_first():
    assert build_order_by(RecordFilter()) == "`timestamp` ASC, id ASC"
    assert build_order_by(RecordFilter(newest_first=True)) == "`timestamp` DESC, id DESC"
