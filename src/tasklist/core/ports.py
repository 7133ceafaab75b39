# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on this Protocol instead of the SQLite store,
so tests can swap in an in-memory repo.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def list_all(self) -> list[Task]: ...
    def insert(self, *, title: str, completed: bool = False) -> Task: ...
    def find_by_id(self, task_id: int) -> Task | None: ...
    def update_by_id(self, task_id: int, *, completed: bool | None = None) -> Task | None: ...
