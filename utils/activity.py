# utils/activity.py
from typing import Iterable, List

from models.task import Task
from utils.dates import DateLike, parse_date


def is_active(task: Task, day: DateLike) -> bool:
    """True if `day` falls within the task's inclusive start/end range."""
    d = parse_date(day)
    if d < parse_date(task.start_date):
        return False
    if task.end_date is not None and d > parse_date(task.end_date):
        return False
    return True


def active_tasks(tasks: Iterable[Task], day: DateLike) -> List[Task]:
    d = parse_date(day)
    return [t for t in tasks if is_active(t, d)]
