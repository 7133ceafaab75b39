# src/tasklist/tasks/task_service.py

"""
Task service.

The only place where task rules live:
- title validation on create (required, max length),
- task id validation on toggle,
- the pending <-> completed transition.

Adapters (GraphQL, HTTP, console) call this and shape the result for their
transport. Store errors are never caught here.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import (
    INVALID_TASK_ID,
    TASK_NOT_FOUND,
    TITLE_REQUIRED,
    TITLE_TOO_LONG,
    NotFoundError,
    ValidationError,
)
from ..core.ports import TaskRepo
from .task_models import TITLE_MAX_LENGTH, Task

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, store: TaskRepo) -> None:
        self._store = store

    def list(self) -> list[Task]:
        """All tasks, ascending by id."""
        return self._store.list_all()

    def create(self, raw_title: Any) -> Task:
        """
        Create a pending task.

        Checks run in a fixed order: emptiness on the trimmed title first,
        then length on the untrimmed input. The stored title is trimmed.
        """
        if not isinstance(raw_title, str) or not raw_title.strip():
            logger.debug("create rejected: empty title")
            raise ValidationError(TITLE_REQUIRED)

        if len(raw_title) > TITLE_MAX_LENGTH:
            logger.debug("create rejected: title length=%d", len(raw_title))
            raise ValidationError(TITLE_TOO_LONG)

        task = self._store.insert(title=raw_title.strip(), completed=False)
        logger.info("Task created id=%s", task.id)
        return task

    def toggle(self, task_id: Any) -> Task:
        """
        Flip `completed` on an existing task.

        NOTE: read-then-write; two concurrent toggles on the same id can
        collapse into one observed change.
        """
        if not _is_valid_id(task_id):
            logger.debug("toggle rejected: task_id=%r", task_id)
            raise ValidationError(INVALID_TASK_ID)

        task = self._store.find_by_id(task_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)

        updated = self._store.update_by_id(task_id, completed=not task.completed)
        if updated is None:
            raise NotFoundError(TASK_NOT_FOUND)

        logger.info("Task toggled id=%s completed=%s", updated.id, updated.completed)
        return updated


def _is_valid_id(task_id: Any) -> bool:
    if isinstance(task_id, bool) or not isinstance(task_id, int):
        return False
    return task_id > 0


def parse_task_id(raw: Any) -> int | None:
    """
    Convert an adapter-level id (GraphQL ID string, URL segment, CLI arg)
    into the native integer id. Returns None when it is not an integer,
    which the service then rejects.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        s = raw.strip()
        try:
            return int(s)
        except ValueError:
            return None
    return None
