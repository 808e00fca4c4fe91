# models/progress.py
import datetime as dt
from typing import Dict, Iterable, Optional, Set, Tuple

from sqlmodel import SQLModel, Field

from utils.dates import DateLike, parse_date


class DailyProgress(SQLModel, table=True):
    """One completion record per (task, day); the composite key keeps it unique."""

    __tablename__ = "daily_progress"
    __table_args__ = {"extend_existing": True}

    task_id: str = Field(foreign_key="tasks.id", primary_key=True)
    date: dt.date = Field(primary_key=True)
    completed: bool = Field(default=True)


class ProgressIndex:
    """
    Lookup table over a snapshot of DailyProgress rows.

    `state()` answers three ways: True / False for an explicit record,
    None when nothing was ever recorded. `is_completed()` collapses that
    to a bool for counting.
    """

    def __init__(self, records: Iterable[DailyProgress] = ()):
        self._by_key: Dict[Tuple[str, dt.date], bool] = {}
        for r in records:
            self._by_key[(r.task_id, parse_date(r.date))] = bool(r.completed)

        self._completed_by_task: Dict[str, int] = {}
        for (task_id, _), done in self._by_key.items():
            if done:
                self._completed_by_task[task_id] = self._completed_by_task.get(task_id, 0) + 1

    @classmethod
    def of(cls, progress) -> "ProgressIndex":
        if isinstance(progress, cls):
            return progress
        return cls(progress or ())

    def state(self, task_id: str, day: DateLike) -> Optional[bool]:
        return self._by_key.get((task_id, parse_date(day)))

    def is_completed(self, task_id: str, day: DateLike) -> bool:
        return self.state(task_id, day) is True

    def completed_count(self, task_id: str) -> int:
        return self._completed_by_task.get(task_id, 0)

    def total_completed(self) -> int:
        return sum(self._completed_by_task.values())

    def recorded_dates(self) -> Set[dt.date]:
        """Distinct days with any record, completed or not."""
        return {d for (_, d) in self._by_key}
