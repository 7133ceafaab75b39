# tests/test_graphql_schema.py

from __future__ import annotations

import pytest

from tasklist.api.graphql_schema import execute_query
from tasklist.tasks.task_service import TaskService

from .fakes import FailingTaskRepo, FakeTaskRepo

TASKS_QUERY = "{ tasks { id title completed createdAt } }"

CREATE_MUTATION = """
mutation Create($title: String!) {
  createTask(title: $title) { id title completed }
}
"""

TOGGLE_MUTATION = """
mutation Toggle($id: ID!) {
  toggleTask(id: $id) { id title completed }
}
"""


@pytest.fixture()
def svc() -> TaskService:
    return TaskService(FakeTaskRepo())


def _messages(body: dict) -> list[str]:
    return [e["message"] for e in body.get("errors", [])]


def test_tasks_query_empty(svc: TaskService) -> None:
    body = execute_query(svc, TASKS_QUERY)
    assert body == {"data": {"tasks": []}}


def test_tasks_query_serializes_ids_as_strings(svc: TaskService) -> None:
    svc.create("first")
    svc.create("second")

    body = execute_query(svc, TASKS_QUERY)

    tasks = body["data"]["tasks"]
    assert [t["id"] for t in tasks] == ["1", "2"]
    assert [t["title"] for t in tasks] == ["first", "second"]
    assert all(t["completed"] is False for t in tasks)
    assert all(t["createdAt"] for t in tasks)


def test_create_task_trims_title(svc: TaskService) -> None:
    body = execute_query(svc, CREATE_MUTATION, variables={"title": "  Trimmed Task  "})

    assert "errors" not in body
    assert body["data"]["createTask"] == {"id": "1", "title": "Trimmed Task", "completed": False}


@pytest.mark.parametrize(
    ("title", "message"),
    [
        ("", "Title is required"),
        ("   ", "Title is required"),
        ("a" * 256, "Title must be 255 characters or less"),
    ],
)
def test_create_task_validation_errors(svc: TaskService, title: str, message: str) -> None:
    body = execute_query(svc, CREATE_MUTATION, variables={"title": title})

    assert body["data"] == {"createTask": None}
    assert _messages(body) == [message]
    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert svc.list() == []


def test_toggle_task_round_trip(svc: TaskService) -> None:
    task = svc.create("flip")

    body = execute_query(svc, TOGGLE_MUTATION, variables={"id": str(task.id)})
    assert body["data"]["toggleTask"]["completed"] is True

    body = execute_query(svc, TOGGLE_MUTATION, variables={"id": task.id})
    assert body["data"]["toggleTask"]["completed"] is False


@pytest.mark.parametrize("raw_id", ["0", "-1", "abc"])
def test_toggle_task_invalid_id(svc: TaskService, raw_id: str) -> None:
    body = execute_query(svc, TOGGLE_MUTATION, variables={"id": raw_id})

    assert _messages(body) == ["Valid task ID is required"]


def test_toggle_task_not_found(svc: TaskService) -> None:
    body = execute_query(svc, TOGGLE_MUTATION, variables={"id": "999"})

    assert body["data"] == {"toggleTask": None}
    assert _messages(body) == ["Task not found"]
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


def test_store_failure_surfaces_as_graphql_error() -> None:
    svc = TaskService(FailingTaskRepo("db down"))

    body = execute_query(svc, TASKS_QUERY)

    assert body["data"] == {"tasks": None}
    assert _messages(body) == ["db down"]
    assert body["errors"][0]["extensions"]["code"] == "INTERNAL_SERVER_ERROR"


def test_syntax_error_has_no_data(svc: TaskService) -> None:
    body = execute_query(svc, "{ tasks { id ")

    assert body["data"] is None
    assert body["errors"]
