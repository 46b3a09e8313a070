"""
Task API - a small in-memory task service over HTTP

Provides:
- A thread-safe task repository with monotonically increasing ids
- A Flask application with list/get/create/update/delete endpoints
- Create-time validation (no past due dates, no completed tasks)

Usage:
    from taskapi import create_app, InMemoryTaskRepository

    app = create_app(InMemoryTaskRepository())
    app.run()
"""

from .api import create_app
from .exceptions import TaskAPIError, ValidationError
from .models import Task
from .repository import InMemoryTaskRepository, TaskRepository
from .validation import validate_new_task

__version__ = "0.1.0"
__all__ = [
    "create_app",
    "TaskAPIError",
    "ValidationError",
    "Task",
    "TaskRepository",
    "InMemoryTaskRepository",
    "validate_new_task",
]
