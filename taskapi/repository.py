"""
Task repository: the only owner of the task collection and the id counter.

Absence is a ``None`` result, never an exception. Every operation holds the
repository lock for its whole duration, so a reader sees a mutation either
fully applied or not at all.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .models import Task

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Contract the HTTP layer depends on."""

    @abstractmethod
    def list_tasks(self) -> List[Task]:
        """Return a snapshot of all tasks, oldest first."""

    @abstractmethod
    def get_task(self, task_id: int) -> Optional[Task]:
        """Return the task with ``task_id`` or None."""

    @abstractmethod
    def create_task(self, candidate: Task) -> Task:
        """Store ``candidate`` under a freshly allocated id and return it."""

    @abstractmethod
    def update_task(self, task_id: int, replacement: Task) -> Optional[Task]:
        """Overwrite the task at ``task_id``; None if it does not exist."""

    @abstractmethod
    def delete_task(self, task_id: int) -> Optional[Task]:
        """Remove and return the task at ``task_id``; None if it does not exist."""


class InMemoryTaskRepository(TaskRepository):
    """Process-local repository. Ids start at 1 and are never reused."""

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def get_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def create_task(self, candidate: Task) -> Task:
        with self._lock:
            task = candidate.with_id(self._next_id)
            self._tasks[task.id] = task
            self._next_id += 1
        logger.debug(f"Created task {task.id}")
        return task

    def update_task(self, task_id: int, replacement: Task) -> Optional[Task]:
        with self._lock:
            if task_id not in self._tasks:
                return None
            # Reassigning an existing key keeps the record's list position
            task = replacement.with_id(task_id)
            self._tasks[task_id] = task
        logger.debug(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.pop(task_id, None)
        if task is not None:
            logger.debug(f"Deleted task {task_id}")
        return task
