# tests/test_stats.py
import pytest

from errors import InvalidDate
from utils.stats import (
    Insight, Stats, daily_stats, insights, monthly_stats, overview_stats, range_stats, status_breakdown,
    weekly_stats,
)

from helpers import completions, day_span, make_task


def test_daily_stats_half_done():
    tasks = [make_task("a", start="2024-01-15"), make_task("b", start="2024-02-01", end="2024-02-01")]
    progress = completions("a", "2024-02-01")
    assert daily_stats("2024-02-01", tasks, progress) == Stats(completed=1, total=2, rate=50.0)


def test_daily_stats_nothing_active():
    s = daily_stats("2024-02-01", [make_task(start="2024-03-01")], [])
    assert s.total == 0 and s.completed == 0 and s.rate == 0


def test_daily_stats_no_tasks():
    assert daily_stats("2024-02-01", [], []) == Stats(0, 0, 0.0)


def test_records_on_inactive_days_are_ignored():
    t = make_task(start="2024-01-10", end="2024-01-12")
    progress = completions("t1", "2024-01-09", "2024-01-13")
    assert daily_stats("2024-01-09", [t], progress).total == 0
    assert range_stats("2024-01-08", 7, [t], progress) == Stats(0, 3, 0.0)


def test_completed_never_exceeds_total():
    tasks = [make_task("a", start="2024-01-01"), make_task("b", start="2024-01-03")]
    progress = completions("a", *day_span("2024-01-01", "2024-01-10")) + completions("b", *day_span("2024-01-01", "2024-01-10"))
    for day in day_span("2023-12-30", "2024-01-12"):
        s = daily_stats(day, tasks, progress)
        assert s.completed <= s.total


def test_range_rate_weighs_busy_days_more():
    solo = make_task("solo", start="2024-01-01", end="2024-01-02")
    late = [make_task(f"x{i}", start="2024-01-02", end="2024-01-02") for i in range(2)]
    progress = completions("solo", "2024-01-01")
    s = range_stats("2024-01-01", 2, [solo, *late], progress)
    assert s == Stats(completed=1, total=4, rate=25.0)


def test_weekly_stats_covers_seven_days():
    t = make_task(start="2024-01-01")
    progress = completions("t1", *day_span("2024-01-01", "2024-01-08"))
    s = weekly_stats("2024-01-01", [t], progress)
    assert (s.completed, s.total, s.rate) == (7, 7, 100.0)


def test_monthly_stats_leap_february():
    tasks = [make_task("a", start="2024-01-15"), make_task("b", start="2024-02-10", end="2024-02-20")]
    progress = completions("b", "2024-02-11") + completions("a", "2024-03-01")
    s = monthly_stats(2024, 1, tasks, progress)
    assert s.total == 29 + 11
    assert s.completed == 1


def test_monthly_stats_rejects_bad_month():
    with pytest.raises(InvalidDate):
        monthly_stats(2024, 12, [], [])


def test_overview_stats():
    tasks = [make_task("a"), make_task("b")]
    progress = (
        completions("a", "2024-01-01")
        + completions("a", "2024-01-02", completed=False)
        + completions("b", "2024-01-01")
    )
    o = overview_stats(tasks, progress)
    assert (o.total_tasks, o.total_completed, o.active_days) == (2, 2, 2)
    assert o.all_time_rate == 50.0


def test_overview_stats_empty():
    o = overview_stats([], [])
    assert (o.total_tasks, o.total_completed, o.active_days, o.all_time_rate) == (0, 0, 0, 0.0)


def test_status_breakdown():
    running = make_task("run", start="2024-01-01")
    finished = make_task("old", start="2024-01-01", end="2024-01-02")
    progress = completions("run", "2024-01-01", "2024-01-03")
    b = status_breakdown([running, finished], progress, today="2024-01-05")
    assert b.completed == 2
    assert b.missed == 2 + 2
    assert b.pending == 1
    assert b.in_progress == 1


def test_status_breakdown_fresh_task_is_pending_not_in_progress():
    b = status_breakdown([make_task(start="2024-01-05")], [], today="2024-01-05")
    assert (b.completed, b.in_progress, b.pending, b.missed) == (0, 0, 1, 0)


def test_insights():
    assert insights([], [], today="2024-03-05") == [Insight.GET_STARTED]

    t = make_task(start="2024-03-01")
    progress = completions("t1", *day_span("2024-03-01", "2024-03-05"))
    assert insights([t], progress, today="2024-03-05") == [Insight.PERFECT_DAY, Insight.ON_FIRE]

    short = make_task(start="2024-02-01", end="2024-02-04")
    progress = completions("t1", *day_span("2024-02-01", "2024-02-03"))
    assert insights([short], progress, today="2024-02-04") == [Insight.GREAT_MONTH]
