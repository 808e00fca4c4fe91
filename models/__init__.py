# models/__init__.py
from .task import Task, Priority
from .progress import DailyProgress, ProgressIndex
from .state import TrackerState
