# models/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from dateutil import parser

from errors import NotFound
from utils.dates import DateLike, parse_date

from .progress import DailyProgress, ProgressIndex
from .task import Priority, Task, new_task_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerState:
    """
    Snapshot of both stores: every task and every completion record.

    Mutations never touch existing records; they return a new TrackerState
    holding new tuples, so anything still reading the old snapshot keeps
    a consistent view. Persisting the result is up to the caller.
    """

    tasks: tuple = ()
    progress: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "tasks", tuple(self.tasks))
        object.__setattr__(self, "progress", tuple(self.progress))

    # ---- reads ----

    def find_task(self, task_id: str) -> Optional[Task]:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def get_task(self, task_id: str) -> Task:
        t = self.find_task(task_id)
        if t is None:
            raise NotFound(task_id)
        return t

    def index(self) -> ProgressIndex:
        return ProgressIndex(self.progress)

    # ---- mutations ----

    def add_task(
        self,
        name: str,
        start_date: DateLike,
        *,
        end_date: Optional[DateLike] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        priority: Priority | str = Priority.MEDIUM,
    ) -> TrackerState:
        """Append a new task with a fresh id and creation timestamp."""
        task = Task(
            id=new_task_id(),
            name=name,
            description=description,
            category=category,
            start_date=parse_date(start_date),
            end_date=parse_date(end_date) if end_date is not None else None,
            priority=Priority(priority),
            created_at=datetime.now(),
        )
        logger.debug("Task added id=%s name=%r start=%s end=%s",
                     task.id, task.name, task.start_date, task.end_date)
        return TrackerState(self.tasks + (task,), self.progress)

    def delete_task(self, task_id: str) -> TrackerState:
        """Remove a task and all its completion records. Unknown ids are a no-op."""
        if self.find_task(task_id) is None:
            logger.debug("delete_task: no task id=%s, nothing to do", task_id)
            return self
        tasks = tuple(t for t in self.tasks if t.id != task_id)
        progress = tuple(p for p in self.progress if p.task_id != task_id)
        logger.debug("Task deleted id=%s (dropped %d progress rows)",
                     task_id, len(self.progress) - len(progress))
        return TrackerState(tasks, progress)

    def toggle_completion(self, task_id: str, day: DateLike) -> TrackerState:
        """
        Flip the completion flag for (task, day), or record it as completed
        when there is no record yet. Whether the task is active that day is
        not checked; records on inactive days are ignored by the statistics.
        """
        self.get_task(task_id)
        d = parse_date(day)

        progress = list(self.progress)
        for i, p in enumerate(progress):
            if p.task_id == task_id and parse_date(p.date) == d:
                progress[i] = DailyProgress(task_id=task_id, date=d, completed=not p.completed)
                logger.debug("Toggled task=%s date=%s completed=%s", task_id, d, progress[i].completed)
                return TrackerState(self.tasks, progress)

        progress.append(DailyProgress(task_id=task_id, date=d, completed=True))
        logger.debug("Toggled task=%s date=%s completed=True (new record)", task_id, d)
        return TrackerState(self.tasks, progress)

    # ---- plain-record conversion ----

    @classmethod
    def from_records(
        cls,
        tasks: Iterable[Dict[str, Any]] = (),
        progress: Iterable[Dict[str, Any]] = (),
    ) -> TrackerState:
        """Build a state from camelCase dicts (the shape a storage adapter hands over)."""
        task_rows = []
        for r in tasks:
            created = r.get("createdAt")
            task_rows.append(Task(
                id=str(r["id"]),
                name=r["name"],
                description=r.get("description"),
                category=r.get("category"),
                start_date=parse_date(r["startDate"]),
                end_date=parse_date(r["endDate"]) if r.get("endDate") else None,
                priority=Priority(r.get("priority") or Priority.MEDIUM),
                created_at=parser.isoparse(created) if isinstance(created, str) else (created or datetime.now()),
            ))
        progress_rows = [
            DailyProgress(task_id=str(r["taskId"]), date=parse_date(r["date"]), completed=bool(r["completed"]))
            for r in progress
        ]
        return cls(task_rows, progress_rows)

    def to_records(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "tasks": [
                {
                    "id": t.id,
                    "name": t.name,
                    "description": t.description,
                    "category": t.category,
                    "startDate": parse_date(t.start_date).isoformat(),
                    "endDate": parse_date(t.end_date).isoformat() if t.end_date else None,
                    "priority": Priority(t.priority).value,
                    "createdAt": t.created_at.isoformat() if t.created_at else None,
                }
                for t in self.tasks
            ],
            "progress": [
                {"taskId": p.task_id, "date": parse_date(p.date).isoformat(), "completed": bool(p.completed)}
                for p in self.progress
            ],
        }
