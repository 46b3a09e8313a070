import pytest
from datetime import datetime, timedelta, timezone

from taskapi.api import create_app
from taskapi.config import Config
from taskapi.models import Task
from taskapi.repository import InMemoryTaskRepository


@pytest.fixture
def tomorrow():
    return datetime.now(timezone.utc) + timedelta(days=1)


@pytest.fixture
def make_task(tomorrow):
    """Factory for task values with sensible defaults"""
    def _make(title="Buy milk", description="2 litres", due_date=None,
              is_completed=False, task_id=0):
        return Task(
            id=task_id,
            title=title,
            description=description,
            due_date=due_date or tomorrow,
            is_completed=is_completed,
        )
    return _make


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def app(repo):
    app = create_app(repo, Config())
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def task_payload(tomorrow):
    return {
        "title": "Buy milk",
        "description": "2 litres",
        "dueDate": tomorrow.isoformat(),
        "isCompleted": False,
    }
