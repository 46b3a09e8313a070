"""
Flask application exposing the task repository over HTTP.

Use ``create_app()`` to build an app; each app owns one repository instance
that all of its request handlers share.

The OpenAPI document at ``/api/openapi.json`` is only served when
``Config.ENABLE_DOCS`` is set, which defaults to ``Config.DEBUG``. There is
no interactive Swagger UI page; point an external viewer at the JSON.
"""

import logging
import time
from typing import Optional

from flask import Blueprint, Flask, current_app, g, jsonify, redirect, request

from .config import Config, config as default_config
from .exceptions import TaskAPIError, ValidationError
from .models import Task
from .repository import InMemoryTaskRepository, TaskRepository
from .validation import validate_new_task

logger = logging.getLogger(__name__)

REPOSITORY_KEY = 'task_repository'

tasks_api = Blueprint('tasks', __name__, url_prefix='/api/tasks')


def get_repository() -> TaskRepository:
    return current_app.extensions[REPOSITORY_KEY]


def not_found(task_id: int):
    return jsonify({'error': f'Task with ID {task_id} not found.'}), 404


@tasks_api.route('/', methods=['GET'])
def list_tasks():
    """List all tasks."""
    tasks = get_repository().list_tasks()
    return jsonify([task.to_dict() for task in tasks])


@tasks_api.route('/<int:task_id>', methods=['GET'])
def get_task(task_id):
    """Get a task by ID."""
    task = get_repository().get_task(task_id)
    if task is None:
        return not_found(task_id)
    return jsonify(task.to_dict())


@tasks_api.route('/', methods=['POST'])
def create_task():
    """Create a task. Any id in the body is ignored."""
    candidate = Task.from_dict(request.get_json(silent=True))
    errors = validate_new_task(candidate)
    if errors:
        raise ValidationError(errors)

    task = get_repository().create_task(candidate)
    response = jsonify(task.to_dict())
    response.status_code = 201
    response.headers['Location'] = f'/api/tasks/{task.id}'
    return response


@tasks_api.route('/<int:task_id>', methods=['PUT'])
def update_task(task_id):
    """Replace a task. The path id wins over any id in the body."""
    replacement = Task.from_dict(request.get_json(silent=True), task_id=task_id)
    task = get_repository().update_task(task_id, replacement)
    if task is None:
        return not_found(task_id)
    return jsonify(task.to_dict())


@tasks_api.route('/<int:task_id>', methods=['DELETE'])
def delete_task(task_id):
    """Delete a task and return its last value."""
    task = get_repository().delete_task(task_id)
    if task is None:
        return not_found(task_id)
    return jsonify(task.to_dict())


def openapi_document() -> dict:
    """Static OpenAPI description of the task endpoints."""
    task_schema = {
        'type': 'object',
        'required': ['title', 'dueDate'],
        'properties': {
            'id': {'type': 'integer', 'readOnly': True},
            'title': {'type': 'string'},
            'description': {'type': 'string'},
            'dueDate': {'type': 'string', 'format': 'date-time'},
            'isCompleted': {'type': 'boolean'},
        },
    }
    task_ref = {'$ref': '#/components/schemas/Task'}
    task_body = {'required': True, 'content': {'application/json': {'schema': task_ref}}}
    task_response = {'content': {'application/json': {'schema': task_ref}}}
    id_param = [{'name': 'id', 'in': 'path', 'required': True, 'schema': {'type': 'integer'}}]
    missing = {'description': 'Task not found'}

    return {
        'openapi': '3.0.3',
        'info': {'title': 'Task API', 'version': '0.1.0'},
        'paths': {
            '/api/tasks/': {
                'get': {
                    'operationId': 'GetAllTasks',
                    'responses': {'200': {
                        'description': 'All tasks',
                        'content': {'application/json': {
                            'schema': {'type': 'array', 'items': task_ref}}},
                    }},
                },
                'post': {
                    'operationId': 'CreateTask',
                    'requestBody': task_body,
                    'responses': {
                        '201': dict(description='Created task', **task_response),
                        '400': {'description': 'Validation errors'},
                    },
                },
            },
            '/api/tasks/{id}': {
                'parameters': id_param,
                'get': {
                    'operationId': 'GetTaskById',
                    'responses': {'200': dict(description='The task', **task_response),
                                  '404': missing},
                },
                'put': {
                    'operationId': 'UpdateTask',
                    'requestBody': task_body,
                    'responses': {'200': dict(description='Updated task', **task_response),
                                  '400': {'description': 'Malformed body'},
                                  '404': missing},
                },
                'delete': {
                    'operationId': 'DeleteTask',
                    'responses': {'200': dict(description='Deleted task', **task_response),
                                  '404': missing},
                },
            },
        },
        'components': {'schemas': {'Task': task_schema}},
    }


def _redirect_legacy_paths():
    """Permanently redirect ``.../todos/...`` to ``.../tasks/...``."""
    if 'todos/' not in request.path:
        return None
    target = request.path.replace('todos/', 'tasks/', 1)
    query = request.query_string.decode()
    if query:
        target = f'{target}?{query}'
    # 308 keeps the method and body for PUT/POST/DELETE
    return redirect(target, code=308)


def _log_request_started():
    g.request_started = time.perf_counter()
    logger.info(f"{request.method} {request.path} started")


def _log_request_finished(response):
    started = g.get('request_started')
    elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
    logger.info(
        f"{request.method} {request.path} finished {response.status_code} in {elapsed_ms:.1f} ms"
    )
    return response


def _handle_validation_error(e: ValidationError):
    return jsonify({
        'title': 'One or more validation errors occurred.',
        'status': 400,
        'errors': e.errors,
    }), 400


def _handle_api_error(e: TaskAPIError):
    return jsonify({'error': str(e)}), 400


def create_app(repository: Optional[TaskRepository] = None,
               config: Optional[Config] = None) -> Flask:
    """Build the Flask app around ``repository`` (a fresh in-memory one by default)."""
    config = config or default_config
    app = Flask(__name__)
    app.config['DEBUG'] = config.DEBUG
    app.extensions[REPOSITORY_KEY] = repository if repository is not None else InMemoryTaskRepository()

    app.before_request(_log_request_started)
    app.before_request(_redirect_legacy_paths)
    app.after_request(_log_request_finished)

    app.register_error_handler(ValidationError, _handle_validation_error)
    app.register_error_handler(TaskAPIError, _handle_api_error)

    app.register_blueprint(tasks_api)

    if config.ENABLE_DOCS:
        @app.route('/api/openapi.json', methods=['GET'])
        def openapi():
            return jsonify(openapi_document())

    return app
