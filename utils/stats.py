# utils/stats.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional

from models.progress import ProgressIndex
from models.task import Task
from utils.activity import active_tasks, is_active
from utils.dates import DateLike, days_between, iter_days, month_days, parse_date
from utils.streaks import overall_streak


@dataclass(frozen=True)
class Stats:
    completed: int = 0
    total: int = 0
    rate: float = 0.0


def completion_rate(completed: int, total: int) -> float:
    """Percentage, 0 when there is nothing to complete."""
    return (completed / total) * 100 if total > 0 else 0.0


def daily_stats(day: DateLike, tasks: Iterable[Task], progress=()) -> Stats:
    index = ProgressIndex.of(progress)
    d = parse_date(day)
    active = active_tasks(tasks, d)
    completed = sum(1 for t in active if index.is_completed(t.id, d))
    return Stats(completed, len(active), completion_rate(completed, len(active)))


def sum_stats(days: Iterable[date], tasks: Iterable[Task], progress=()) -> Stats:
    """Totals over several days; the rate comes from the summed counts."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    completed = total = 0
    for d in days:
        s = daily_stats(d, tasks, index)
        completed += s.completed
        total += s.total
    return Stats(completed, total, completion_rate(completed, total))


def range_stats(start: DateLike, day_count: int, tasks: Iterable[Task], progress=()) -> Stats:
    return sum_stats(iter_days(start, day_count), tasks, progress)


def weekly_stats(week_start: DateLike, tasks: Iterable[Task], progress=()) -> Stats:
    return range_stats(week_start, 7, tasks, progress)


def monthly_stats(year: int, month: int, tasks: Iterable[Task], progress=()) -> Stats:
    """`month` is zero-based: monthly_stats(2024, 1, ...) covers February 2024."""
    return sum_stats(month_days(year, month), tasks, progress)


@dataclass(frozen=True)
class Overview:
    total_tasks: int
    total_completed: int
    active_days: int
    all_time_rate: float


def overview_stats(tasks: Iterable[Task], progress=()) -> Overview:
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    total_completed = index.total_completed()
    active_days = len(index.recorded_dates())
    rate = 0.0
    if active_days > 0:
        rate = total_completed / max(active_days * len(tasks), 1) * 100
    return Overview(len(tasks), total_completed, active_days, rate)


@dataclass(frozen=True)
class StatusBreakdown:
    completed: int = 0
    in_progress: int = 0
    pending: int = 0
    missed: int = 0


def status_breakdown(tasks: Iterable[Task], progress=(), today: Optional[DateLike] = None) -> StatusBreakdown:
    """
    completed   - completion records, all history
    missed      - active days before today left uncompleted
    pending     - tasks active today, not yet completed today
    in_progress - pending tasks that already have some completion
    """
    index = ProgressIndex.of(progress)
    today_d = parse_date(today) if today is not None else date.today()
    completed = in_progress = pending = missed = 0

    for t in tasks:
        done = index.completed_count(t.id)
        completed += done

        start = parse_date(t.start_date)
        last = today_d if t.end_date is None else min(today_d, parse_date(t.end_date))
        for d in iter_days(start, days_between(start, last)):
            if d < today_d and not index.is_completed(t.id, d):
                missed += 1

        if is_active(t, today_d) and not index.is_completed(t.id, today_d):
            pending += 1
            if done > 0:
                in_progress += 1

    return StatusBreakdown(completed, in_progress, pending, missed)


class Insight(str, Enum):
    PERFECT_DAY = "perfect_day"
    ON_FIRE = "on_fire"
    GREAT_MONTH = "great_month"
    GET_STARTED = "get_started"


def insights(tasks: Iterable[Task], progress=(), today: Optional[DateLike] = None) -> List[Insight]:
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    today_d = parse_date(today) if today is not None else date.today()

    day = daily_stats(today_d, tasks, index)
    month = monthly_stats(today_d.year, today_d.month - 1, tasks, index)

    out: List[Insight] = []
    if day.total > 0 and day.rate >= 100:
        out.append(Insight.PERFECT_DAY)
    if overall_streak(tasks, today_d, index) >= 3:
        out.append(Insight.ON_FIRE)
    if month.rate >= 75:
        out.append(Insight.GREAT_MONTH)
    if not tasks:
        out.append(Insight.GET_STARTED)
    return out
