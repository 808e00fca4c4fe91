# utils/streaks.py

"""
Current streaks, walking backward one day at a time from a reference date.

Both walks stop at the first day that does not qualify; that day is not
counted. A reference date that does not qualify gives 0.
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from models.progress import ProgressIndex
from models.state import TrackerState
from models.task import Task
from utils.activity import active_tasks, is_active
from utils.dates import DateLike, parse_date


def _start(reference_date: Optional[DateLike]) -> date:
    return parse_date(reference_date) if reference_date is not None else date.today()


def streak(task: Task, reference_date: Optional[DateLike] = None, progress=()) -> int:
    """Consecutive active, completed days for one task ending at `reference_date`."""
    index = ProgressIndex.of(progress)
    day = _start(reference_date)
    count = 0
    while is_active(task, day) and index.is_completed(task.id, day):
        count += 1
        day -= timedelta(days=1)
    return count


def overall_streak(tasks: Iterable[Task], reference_date: Optional[DateLike] = None, progress=()) -> int:
    """
    Consecutive days on which every active task was completed.

    A day with no active task at all ends the streak, it is not skipped.
    """
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    day = _start(reference_date)
    count = 0
    while True:
        active = active_tasks(tasks, day)
        if not active:
            break
        if not all(index.is_completed(t.id, day) for t in active):
            break
        count += 1
        day -= timedelta(days=1)
    return count


def task_streak(state: TrackerState, task_id: str, reference_date: Optional[DateLike] = None) -> int:
    """`streak` looked up by id; raises NotFound for an unknown task."""
    return streak(state.get_task(task_id), reference_date, state.index())
