# utils/dates.py

"""Day-granularity date helpers. All engine dates pass through `parse_date`."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Iterator, List, Union

from dateutil import parser

from errors import InvalidDate

DateLike = Union[date, datetime, str]

# full calendar date, optionally followed by a time part
_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}(T.*)?")


def parse_date(x: DateLike) -> date:
    """
    Normalise a date-like value to a `date`.

    Accepts `date`, `datetime` (time-of-day dropped) or ISO text
    (`YYYY-MM-DD`, an ISO timestamp is truncated to its day).
    """
    if isinstance(x, datetime):
        return x.date()
    if isinstance(x, date):
        return x
    if not isinstance(x, str) or not x.strip():
        raise InvalidDate(x, "expected YYYY-MM-DD")
    text = x.strip()
    if not _ISO_DAY.fullmatch(text):
        raise InvalidDate(x, "expected YYYY-MM-DD")
    try:
        return parser.isoparse(text).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDate(x, str(e)) from e


def iter_days(start: DateLike, count: int) -> Iterator[date]:
    """`count` consecutive days starting at `start` (inclusive)."""
    d = parse_date(start)
    for i in range(max(0, count)):
        yield d + timedelta(days=i)


def trailing_days(end: DateLike, count: int) -> List[date]:
    """The `count` days ending at `end` inclusive, oldest first."""
    end_d = parse_date(end)
    return [end_d - timedelta(days=i) for i in range(max(0, count) - 1, -1, -1)]


def days_between(start: DateLike, end: DateLike) -> int:
    """Inclusive number of days from start to end (0 if end < start)."""
    return max(0, (parse_date(end) - parse_date(start)).days + 1)


def days_in_month(year: int, month: int) -> int:
    """Month is zero-based (0 = January)."""
    if not 0 <= month <= 11:
        raise InvalidDate(f"{year}-{month + 1:02d}", "month out of range")
    return calendar.monthrange(year, month + 1)[1]


def month_days(year: int, month: int) -> List[date]:
    """Every calendar day of a zero-based month."""
    n = days_in_month(year, month)
    return [date(year, month + 1, d) for d in range(1, n + 1)]


def week_start(day: DateLike, first_weekday: int = 0) -> date:
    """First day of the week containing `day` (0 = Monday ... 6 = Sunday)."""
    d = parse_date(day)
    offset = (d.weekday() - first_weekday) % 7
    return d - timedelta(days=offset)


def shift_months(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, zero-based month) pair by `delta` months."""
    idx = year * 12 + month + delta
    return idx // 12, idx % 12
