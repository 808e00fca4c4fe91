# models/task.py
import uuid
from datetime import date, datetime
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def new_task_id() -> str:
    return str(uuid.uuid4())


class Task(SQLModel, table=True):
    __tablename__ = "tasks"
    __table_args__ = {"extend_existing": True}

    id: str = Field(default_factory=new_task_id, primary_key=True)
    name: str
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, index=True)
    start_date: date
    end_date: Optional[date] = None  # None = open-ended
    priority: Priority = Field(default=Priority.MEDIUM)
    created_at: datetime = Field(default_factory=datetime.now)
