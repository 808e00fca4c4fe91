# errors.py

class TrackerError(Exception):
    """Base class for tracker engine errors."""


class InvalidDate(TrackerError, ValueError):
    """Date text is not a valid YYYY-MM-DD calendar date."""

    def __init__(self, value, reason: str | None = None):
        self.value = value
        msg = f"Invalid date: {value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class NotFound(TrackerError, LookupError):
    """No task with the given id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")
