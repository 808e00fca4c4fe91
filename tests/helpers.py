# tests/helpers.py
from datetime import date, datetime

from models.progress import DailyProgress
from models.task import Priority, Task


def d(s: str) -> date:
    return date.fromisoformat(s)


def make_task(task_id="t1", start="2024-01-01", end=None, name=None, priority=Priority.MEDIUM) -> Task:
    return Task(
        id=task_id,
        name=name or f"Task {task_id}",
        start_date=d(start),
        end_date=d(end) if end else None,
        priority=priority,
        created_at=datetime(2024, 1, 1, 8, 0, 0),
    )


def completions(task_id, *days, completed=True) -> list:
    return [DailyProgress(task_id=task_id, date=d(x), completed=completed) for x in days]


def day_span(start: str, end: str) -> list:
    """ISO strings for every day from start to end inclusive."""
    first, last = d(start), d(end)
    return [date.fromordinal(o).isoformat() for o in range(first.toordinal(), last.toordinal() + 1)]
