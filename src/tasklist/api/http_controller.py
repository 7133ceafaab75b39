# src/tasklist/api/http_controller.py

"""HTTP controller: JSON routes bound to the TaskService."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from ..core.errors import NotFoundError, StoreError, TaskError, ValidationError
from ..tasks.task_service import TaskService, parse_task_id

logger = logging.getLogger(__name__)

SERVICE_EXTENSION_KEY = "task_service"

tasks_bp = Blueprint("tasks", __name__)

_STATUS_BY_ERROR: dict[type[TaskError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
    StoreError: 500,
}


def _service() -> TaskService:
    return current_app.extensions[SERVICE_EXTENSION_KEY]


@tasks_bp.errorhandler(TaskError)
def handle_task_error(exc: TaskError):
    status = _STATUS_BY_ERROR.get(type(exc), 500)
    if status >= 500:
        logger.error("HTTP %s %s failed: %s", request.method, request.path, exc.message)
    return jsonify({"error": exc.message}), status


@tasks_bp.route("/tasks", methods=["GET"])
def list_tasks():
    """List all tasks."""
    return jsonify([t.to_dict() for t in _service().list()])


@tasks_bp.route("/tasks", methods=["POST"])
def create_task():
    """Create a task from {"title": ...}."""
    data = request.get_json(silent=True) or {}
    title = data.get("title") if isinstance(data, dict) else None
    task = _service().create(title)
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/tasks/<task_id>/toggle", methods=["PATCH", "POST"])
def toggle_task(task_id: str):
    """Flip completion of one task."""
    task = _service().toggle(parse_task_id(task_id))
    return jsonify(task.to_dict())
