from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp ('2024-01-01T08:30:00' or '2024-01-01 08:30:00').

    Timestamps are stored as naive local time, so an explicit offset is
    converted to local time and dropped.
    """
    try:
        parsed = datetime.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return truncate_to_seconds(parsed)


def truncate_to_seconds(moment: datetime) -> datetime:
    """Drop microseconds; MySQL DATETIME would otherwise round them, possibly into the next day."""
    return moment.replace(microsecond=0)


def now_local() -> datetime:
    """Current local time, truncated to whole seconds (DATETIME precision).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return truncate_to_seconds(datetime.now())


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def start_of_next_day(day: date) -> datetime:
    return start_of_day(day) + timedelta(days=1)
