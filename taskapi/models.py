"""
Task record and its JSON wire form.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, List

from .exceptions import ValidationError


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


@dataclass(frozen=True)
class Task:
    """A to-do item. Instances are values; build a new one to change a field."""
    id: int
    title: str
    description: str
    due_date: datetime
    is_completed: bool = False

    def with_id(self, new_id: int) -> "Task":
        return replace(self, id=new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": format_timestamp(self.due_date),
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Any, task_id: int = 0) -> "Task":
        """Build a task from a request body.

        Any ``id`` in ``data`` is ignored; the caller decides the id.
        All field problems are collected and raised as one ValidationError.
        """
        if not isinstance(data, dict):
            raise ValidationError({"body": ["Request body must be a JSON object."]})

        errors: Dict[str, List[str]] = {}

        title = data.get("title")
        if not isinstance(title, str):
            errors["title"] = ["Title is required and must be a string."]

        description = data.get("description", "")
        if description is None:
            description = ""
        if not isinstance(description, str):
            errors["description"] = ["Description must be a string."]

        due_date = None
        raw_due = data.get("dueDate")
        if not isinstance(raw_due, str):
            errors["dueDate"] = ["Due date is required as an ISO 8601 string."]
        else:
            try:
                due_date = parse_timestamp(raw_due)
            except (ValueError, OverflowError):
                errors["dueDate"] = [f"'{raw_due}' is not a valid ISO 8601 timestamp."]

        is_completed = data.get("isCompleted", False)
        if not isinstance(is_completed, bool):
            errors["isCompleted"] = ["isCompleted must be a boolean."]

        if errors:
            raise ValidationError(errors)

        return cls(
            id=task_id,
            title=title,
            description=description,
            due_date=due_date,
            is_completed=is_completed,
        )
