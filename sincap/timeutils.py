"""Date and time helpers."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta, timezone

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def time_bod(moment: datetime) -> datetime:
    """Return the beginning of the day of ``moment``, keeping its timezone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def time_bom(moment: datetime) -> datetime:
    """Return the beginning of the month of ``moment``, keeping its timezone."""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def time_mon_sun_weekday(moment: date) -> int:
    """Return the weekday index with Monday as 0 and Sunday as 6."""
    return moment.weekday()


def date_equal(date1: date, date2: date) -> bool:
    """Tell whether two moments fall on the same year, month and day."""
    return (date1.year, date1.month, date1.day) == (date2.year, date2.month, date2.day)


def parse_unix(ms_string: str) -> datetime:
    """Parse milliseconds since the epoch into a UTC datetime."""
    if not _INT_PATTERN.fullmatch(ms_string):
        raise ValueError(f"invalid millisecond timestamp: {ms_string!r}")
    millis = int(ms_string)
    if not -(2**63) <= millis <= 2**63 - 1:
        raise ValueError(f"timestamp out of range: {ms_string!r}")
    try:
        return _EPOCH + timedelta(milliseconds=millis)
    except OverflowError as err:
        raise ValueError(f"timestamp out of range: {ms_string!r}") from err


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a month; out-of-range months roll into adjacent years."""
    year_offset, month_index = divmod(int(month) - 1, 12)
    return calendar.monthrange(year + year_offset, month_index + 1)[1]