"""Business rules checked before a task is created."""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from .models import Task


def validate_new_task(task: Task, now: Optional[datetime] = None) -> Dict[str, List[str]]:
    """Return field errors for a create candidate. Empty means valid."""
    now = now or datetime.now(timezone.utc)
    errors: Dict[str, List[str]] = {}

    if task.due_date < now:
        errors["dueDate"] = ["Due date cannot be in the past."]
    if task.is_completed:
        errors["isCompleted"] = ["Cannot add completed task"]

    return errors
