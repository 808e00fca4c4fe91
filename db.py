# db.py

"""
Local persistence for the tracker: loads and saves whole TrackerState snapshots.

The statistics engine never calls this module. A caller loads a state at
start-up, applies mutations, and saves the returned state after each change.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine, select

from config import get_settings
from models.progress import DailyProgress
from models.state import TrackerState
from models.task import Priority, Task
from utils.dates import parse_date

logger = logging.getLogger(__name__)

# ---- Engine / Session ----
_engine: Optional[Engine] = None


def make_engine(url: Optional[str] = None) -> Engine:
    url = url or get_settings().database_url
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = make_engine()
    return _engine


def init_db(engine: Optional[Engine] = None) -> None:
    SQLModel.metadata.create_all(engine or get_engine())


@contextmanager
def get_session(engine: Optional[Engine] = None) -> Iterator[Session]:
    with Session(engine or get_engine(), expire_on_commit=False) as s:
        yield s


# ---- snapshot load / save ----

def load_state(engine: Optional[Engine] = None) -> TrackerState:
    """Read every task (oldest first) and every progress row into a new state."""
    engine = engine or get_engine()
    init_db(engine)
    with get_session(engine) as s:
        tasks = s.exec(select(Task).order_by(Task.created_at, Task.id)).all()
        progress = s.exec(select(DailyProgress).order_by(DailyProgress.task_id, DailyProgress.date)).all()
        s.expunge_all()
    logger.info("Loaded state tasks=%d progress=%d", len(tasks), len(progress))
    return TrackerState(tasks, progress)


def save_state(state: TrackerState, engine: Optional[Engine] = None) -> None:
    """
    Make the stored snapshot equal to `state`, in one transaction:
    rows missing from the state are deleted, the rest are inserted or updated.
    """
    engine = engine or get_engine()
    init_db(engine)

    task_ids = {t.id for t in state.tasks}
    progress_keys = {(p.task_id, parse_date(p.date)) for p in state.progress}

    try:
        with get_session(engine) as s:
            for row in s.exec(select(DailyProgress)).all():
                if (row.task_id, row.date) not in progress_keys:
                    s.delete(row)
            for row in s.exec(select(Task)).all():
                if row.id not in task_ids:
                    s.delete(row)
            s.flush()

            for t in state.tasks:
                s.merge(Task(
                    id=t.id, name=t.name, description=t.description, category=t.category,
                    start_date=parse_date(t.start_date),
                    end_date=parse_date(t.end_date) if t.end_date is not None else None,
                    priority=Priority(t.priority), created_at=t.created_at,
                ))
            s.flush()

            for p in state.progress:
                s.merge(DailyProgress(task_id=p.task_id, date=parse_date(p.date), completed=bool(p.completed)))
            s.commit()
    except SQLAlchemyError:
        logger.exception("Failed to save state tasks=%d progress=%d", len(state.tasks), len(state.progress))
        raise
    logger.info("Saved state tasks=%d progress=%d", len(state.tasks), len(state.progress))
