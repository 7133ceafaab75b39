# src/tasklist/api/graphql_schema.py

"""
GraphQL adapter (graphene).

    type Task { id: ID!, title: String!, completed: Boolean, createdAt: DateTime }
    type Query { tasks: [Task] }
    type Mutation { createTask(title: String!): Task, toggleTask(id: ID!): Task }

Resolvers are pass-through: they fetch the TaskService from the execution
context, call it, and turn TaskError into GraphQLError with the same message.
"""

from __future__ import annotations

import logging
from typing import Any

import graphene
from graphql import GraphQLError

from ..core.errors import TaskError
from ..tasks.task_models import Task
from ..tasks.task_service import TaskService, parse_task_id

logger = logging.getLogger(__name__)

SERVICE_CONTEXT_KEY = "task_service"


def _service(info: graphene.ResolveInfo) -> TaskService:
    ctx = info.context
    if isinstance(ctx, dict):
        service = ctx.get(SERVICE_CONTEXT_KEY)
    else:
        service = getattr(ctx, SERVICE_CONTEXT_KEY, None)
    if service is None:
        raise GraphQLError("Task service is not configured", extensions={"code": "INTERNAL_SERVER_ERROR"})
    return service


def _to_graphql_error(exc: TaskError) -> GraphQLError:
    return GraphQLError(exc.message, original_error=exc, extensions={"code": exc.code})


class TaskType(graphene.ObjectType):
    class Meta:
        name = "Task"

    id = graphene.ID(required=True)
    title = graphene.String(required=True)
    completed = graphene.Boolean()
    created_at = graphene.DateTime()

    @staticmethod
    def resolve_id(task: Task, info: graphene.ResolveInfo) -> str:
        return str(task.id)


class Query(graphene.ObjectType):
    tasks = graphene.List(TaskType)

    @staticmethod
    def resolve_tasks(root: Any, info: graphene.ResolveInfo) -> list[Task]:
        try:
            return _service(info).list()
        except TaskError as exc:
            raise _to_graphql_error(exc) from exc


class CreateTask(graphene.Mutation):
    class Arguments:
        title = graphene.String(required=True)

    Output = TaskType

    @staticmethod
    def mutate(root: Any, info: graphene.ResolveInfo, title: str) -> Task:
        try:
            return _service(info).create(title)
        except TaskError as exc:
            raise _to_graphql_error(exc) from exc


class ToggleTask(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = TaskType

    @staticmethod
    def mutate(root: Any, info: graphene.ResolveInfo, id: str) -> Task:
        try:
            return _service(info).toggle(parse_task_id(id))
        except TaskError as exc:
            raise _to_graphql_error(exc) from exc


class Mutation(graphene.ObjectType):
    create_task = CreateTask.Field()
    toggle_task = ToggleTask.Field()


schema = graphene.Schema(query=Query, mutation=Mutation)


def execute_query(
    service: TaskService,
    query: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> dict[str, Any]:
    """
    Run one GraphQL request against the schema and return the response body
    ({"data": ..., "errors": [...]}, errors omitted when empty).
    """
    result = schema.execute(
        query,
        variable_values=variables,
        operation_name=operation_name,
        context_value={SERVICE_CONTEXT_KEY: service},
    )

    body: dict[str, Any] = {"data": result.data}
    if result.errors:
        for err in result.errors:
            original = getattr(err, "original_error", None)
            if original is not None and not isinstance(original, (GraphQLError, TaskError)):
                logger.error("GraphQL resolver crashed: %s", err.message, exc_info=original)
        body["errors"] = [err.formatted for err in result.errors]
    return body
