# src/tasklist/tasks/task_seeds.py

from __future__ import annotations

import logging

from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

SAMPLE_TASKS: list[tuple[str, bool]] = [
    ("Learn GraphQL basics", True),
    ("Set up Apollo Server", True),
    ("Connect to PostgreSQL", False),
    ("Build frontend with Next.js", False),
    ("Debug and fix issues", False),
]


def seed_tasks(store: TaskStore, samples: list[tuple[str, bool]] | None = None) -> list[Task]:
    """
    Reset the table and insert sample tasks.

    Writes go straight to the store: seeded rows may start completed,
    which TaskService.create never produces.
    """
    rows = SAMPLE_TASKS if samples is None else samples
    store.delete_all()
    created = [store.insert(title=title, completed=done) for title, done in rows]
    logger.info("Seeded %d tasks into %s", len(created), store.db_path)
    return created
