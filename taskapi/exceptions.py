"""Custom exceptions for the task API."""

from typing import Dict, List


class TaskAPIError(Exception):
    """Base exception for the task API."""
    pass


class ValidationError(TaskAPIError):
    """Request payload failed one or more field rules."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation failed for: {fields}")
