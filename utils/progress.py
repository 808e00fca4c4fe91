# utils/progress.py
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from models.progress import ProgressIndex
from models.task import Task
from utils.activity import is_active
from utils.dates import DateLike, days_between, parse_date
from utils.stats import completion_rate
from utils.streaks import streak


@dataclass(frozen=True)
class TaskProgress:
    task: Task
    today_completed: bool
    total_days: int
    completed_days: int
    streak: int
    completion_rate: float


def compute_total_days(task: Task, today: DateLike) -> int:
    """Days from start to min(end, today), inclusive; at least 1."""
    last = parse_date(today)
    if task.end_date is not None:
        last = min(last, parse_date(task.end_date))
    return max(1, days_between(task.start_date, last))


def compute_task_progress(task: Task, day: DateLike, index: ProgressIndex, today: DateLike) -> TaskProgress:
    total = compute_total_days(task, today)
    done = index.completed_count(task.id)
    return TaskProgress(
        task=task,
        today_completed=index.is_completed(task.id, day),
        total_days=total,
        completed_days=done,
        streak=streak(task, day, index),
        completion_rate=completion_rate(done, total),
    )


def tasks_with_progress(
    day: DateLike,
    tasks: Iterable[Task],
    progress=(),
    today: Optional[DateLike] = None,
) -> List[TaskProgress]:
    """Per-task progress for every task active on `day`; streaks are as of `day`."""
    index = ProgressIndex.of(progress)
    d = parse_date(day)
    today_d = parse_date(today) if today is not None else date.today()
    return [compute_task_progress(t, d, index, today_d) for t in tasks if is_active(t, d)]
