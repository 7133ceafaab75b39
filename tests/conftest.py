# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.api.app import create_app
from tasklist.core.state import AppState
from tasklist.tasks.task_service import TaskService
from tasklist.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the app factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        host="127.0.0.1",
        port=0,
        graphql_path="/graphql",
        http_enabled=True,
        console_enabled=False,
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        seed_on_start=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_db_path)


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    return TaskService(store)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, service: TaskService) -> AppState:
    """
    AppState wired with a real SQLite store.

    The store's correctness is part of what adapter tests exercise.
    """
    return AppState(settings=settings, task_store=store, task_service=service)


@pytest.fixture()
def client(state: AppState):
    app = create_app(state)
    app.config["TESTING"] = True
    return app.test_client()
