# tests/test_dates.py
from datetime import date, datetime

import pytest

from errors import InvalidDate
from utils.dates import (
    days_between, days_in_month, iter_days, month_days, parse_date, shift_months, trailing_days, week_start,
)


def test_parse_date_accepts_text_date_and_datetime():
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    assert parse_date(date(2024, 1, 5)) == date(2024, 1, 5)
    assert parse_date(datetime(2024, 1, 5, 23, 59)) == date(2024, 1, 5)
    assert parse_date(" 2024-01-10T06:30:00 ") == date(2024, 1, 10)


@pytest.mark.parametrize("bad", [
    "", "not-a-date", "2024-13-01", "2023-02-29", None,
    "2024-01", "2024", "20240105", "2024-W02", "2024-005",
])
def test_parse_date_rejects_malformed(bad):
    with pytest.raises(InvalidDate):
        parse_date(bad)


def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        parse_date("2024-02-30")


def test_days_in_month_is_zero_based():
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2023, 1) == 28
    assert days_in_month(2024, 0) == 31
    assert len(month_days(2024, 1)) == 29
    with pytest.raises(InvalidDate):
        days_in_month(2024, 12)


def test_week_start_defaults_to_monday():
    assert week_start("2024-01-07") == date(2024, 1, 1)  # Sunday
    assert week_start("2024-01-01") == date(2024, 1, 1)
    assert week_start("2024-01-07", first_weekday=6) == date(2024, 1, 7)


def test_day_sequences():
    assert list(iter_days("2024-02-28", 3)) == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert trailing_days("2024-01-02", 3) == [date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)]
    assert days_between("2024-01-01", "2024-01-10") == 10
    assert days_between("2024-01-10", "2024-01-01") == 0


def test_shift_months_wraps_years():
    assert shift_months(2024, 0, -1) == (2023, 11)
    assert shift_months(2023, 11, 1) == (2024, 0)
    assert shift_months(2024, 5, -5) == (2024, 0)
