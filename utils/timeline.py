# utils/timeline.py

"""Chart-ready pandas frames built from the daily statistics."""

from dataclasses import asdict
from datetime import date, timedelta
from typing import Iterable, Optional

import pandas as pd

from models.progress import ProgressIndex
from models.task import Task
from utils.activity import is_active
from utils.dates import DateLike, parse_date, shift_months, trailing_days, week_start
from utils.heatmap import heatmap
from utils.stats import daily_stats, monthly_stats

STATS_COLUMNS = ["date", "completed", "total", "rate", "completion"]


def _stats_rows(days, tasks, index):
    rows = []
    for d in days:
        s = daily_stats(d, tasks, index)
        rows.append({
            "date": d,
            "completed": s.completed,
            "total": s.total,
            "rate": s.rate,
            "completion": int(round(s.rate)),
        })
    return rows


def daily_stats_df(tasks: Iterable[Task], progress=(), end: Optional[DateLike] = None, days: int = 14) -> pd.DataFrame:
    """Trailing `days` days ending at `end`, oldest first."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    end_d = parse_date(end) if end is not None else date.today()
    return pd.DataFrame(_stats_rows(trailing_days(end_d, days), tasks, index), columns=STATS_COLUMNS)


def week_df(
    tasks: Iterable[Task],
    progress=(),
    day: Optional[DateLike] = None,
    first_weekday: int = 0,
) -> pd.DataFrame:
    """The seven days of the week containing `day`, with a short weekday name."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    start = week_start(day if day is not None else date.today(), first_weekday)
    df = pd.DataFrame(
        _stats_rows([start + timedelta(days=i) for i in range(7)], tasks, index),
        columns=STATS_COLUMNS,
    )
    df.insert(0, "name", [d.strftime("%a") for d in df["date"]])
    return df


def monthly_stats_df(tasks: Iterable[Task], progress=(), end: Optional[DateLike] = None, months: int = 6) -> pd.DataFrame:
    """Trailing `months` calendar months ending with the month of `end`."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    end_d = parse_date(end) if end is not None else date.today()
    rows = []
    for back in range(months - 1, -1, -1):
        year, month = shift_months(end_d.year, end_d.month - 1, -back)
        s = monthly_stats(year, month, tasks, index)
        first = date(year, month + 1, 1)
        rows.append({
            "month": first.strftime("%b"),
            "full_name": first.strftime("%B %Y"),
            "year": year,
            "month_index": month,
            "completed": s.completed,
            "total": s.total,
            "rate": s.rate,
            "completion": int(round(s.rate)),
        })
    return pd.DataFrame(rows, columns=[
        "month", "full_name", "year", "month_index", "completed", "total", "rate", "completion",
    ])


def cell_state(task: Task, day: date, index: ProgressIndex, today: date) -> str:
    if not is_active(task, day):
        return "inactive"
    if index.is_completed(task.id, day):
        return "completed"
    if day < today:
        return "missed"
    return "open"


def progress_matrix_df(
    tasks: Iterable[Task],
    progress=(),
    start: Optional[DateLike] = None,
    days: int = 30,
    today: Optional[DateLike] = None,
) -> pd.DataFrame:
    """Task x day grid of cell states, indexed by task id, one column per ISO date."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    today_d = parse_date(today) if today is not None else date.today()
    start_d = parse_date(start) if start is not None else today_d - timedelta(days=7)
    dates = [d.date() for d in pd.date_range(start_d, periods=max(0, days), freq="D")]

    rows = {t.id: [cell_state(t, d, index, today_d) for d in dates] for t in tasks}
    df = pd.DataFrame.from_dict(rows, orient="index", columns=[d.isoformat() for d in dates])
    df.index.name = "task_id"
    if not df.empty:
        df.insert(0, "name", [t.name for t in tasks])
    return df


def heatmap_df(tasks: Iterable[Task], progress=(), reference_date: Optional[DateLike] = None) -> pd.DataFrame:
    df = pd.DataFrame([asdict(h) for h in heatmap(tasks, progress, reference_date)], columns=["date", "count", "level"])
    if not df.empty:
        df["date"] = pd.to_datetime(df["date"])
        df["weekday"] = df["date"].dt.weekday
    return df
